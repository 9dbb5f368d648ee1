"""
API Layer - FastAPI routers, one module per resource
"""
