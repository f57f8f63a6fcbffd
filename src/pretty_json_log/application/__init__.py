"""Application layer: ports and the ingest/print/shutdown use cases."""
