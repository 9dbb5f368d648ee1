"""
Core Layer - Configuration, storage, auth and cross-cutting concerns
"""
