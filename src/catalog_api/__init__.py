"""Catalog asset ingestion service."""
