"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it builds commands, runs the use cases and translates their
Result values to HTTP responses.

Structure:
- routers/system.py: non-versioned endpoints (root, health)
- routers/api/v1/: API version 1 endpoints (RESTful resources)
- routers/api/middleware/: request tracing

The presentation layer depends on the application layer but contains NO
business logic.
"""
