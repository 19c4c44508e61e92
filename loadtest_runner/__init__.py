"""Run load-testing tool scripts and ingest their results."""
