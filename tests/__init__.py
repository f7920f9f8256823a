"""Test suite for the sign-in service.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic and use cases with mocked collaborators
- integration/: Integration tests - adapters against real libraries
- api/: API endpoint tests - HTTP endpoints through the FastAPI TestClient

No test requires a live database or network access.
"""
