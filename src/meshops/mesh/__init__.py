"""Mesh ingestion, validation, assembly and render conversion."""
