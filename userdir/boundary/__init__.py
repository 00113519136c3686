"""Boundary adapters for external systems (relational record store)."""
