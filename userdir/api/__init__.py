"""
Directory API module.

FastAPI application, routers and dependency factories of the directory service.
"""
