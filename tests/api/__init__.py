"""API endpoint tests (FastAPI TestClient, handlers overridden)."""
