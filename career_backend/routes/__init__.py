"""
FastAPI routers for all API endpoints.

Each module defines a router for one area (health, recommendations).
Routers authenticate, validate, call the service layer, and map its
result or error onto the HTTP contract.
"""
