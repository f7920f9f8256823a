"""Application layer - Use cases and orchestration.

This layer contains the authentication use cases. Each use case is a command
dataclass paired with a handler exposing one async ``execute`` entry point
that returns a Result.

Structure:
- commands/auth_commands.py: Command and result dataclasses
- commands/handlers/: Use case handlers (sign up, sign in, forgot password)

The application layer orchestrates domain logic through protocols and
contains no framework or infrastructure code.
"""
