"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories (SQLAlchemy)
- Security services (bcrypt, PyJWT, random tokens, ids)
- Social identity providers (Facebook, Google) over httpx
- Structured logging (structlog)

Structure:
- persistence/: Database adapters (PostgreSQL repositories)
- security/: Hashing and token adapters
- providers/: Outbound HTTP and social identity adapters
- logging/: Logger and timing sink adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
