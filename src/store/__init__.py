"""Read-only route database.

This package holds the built graph, its query API, geo aggregations
and JSON payload helpers for presentation layers.
"""
