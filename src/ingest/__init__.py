"""Dataset ingestion pipeline.

This package reads the airports, airlines and routes datasets, converts
rows into typed records and cross-references routes into a graph.
"""
