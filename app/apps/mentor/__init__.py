"""Mentor catalog: records, schemas and the catalog service."""
