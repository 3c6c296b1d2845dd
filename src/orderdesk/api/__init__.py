"""API layer: canonical query/transform surface for the order table and export.

Key rules:

1. Query logic lives in the query engine - this layer only composes it
2. No rendering here - output/ modules render what this layer returns
3. Return Pydantic models or composition wrappers only
"""
