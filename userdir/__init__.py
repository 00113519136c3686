"""
User directory service and forwarding gateway.

Packages:
  - boundary: storage adapters (SQLAlchemy record store)
  - core: graph assembly and exception hierarchy
  - application: directory and query orchestration
  - api: directory HTTP surface
  - gateway: query template registry, forwarding client and gateway HTTP surface
"""

__version__ = "0.1.0"
