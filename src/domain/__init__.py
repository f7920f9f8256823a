"""Domain layer - Pure business logic.

This layer contains the entities, value objects, error taxonomy and protocols
(ports) of the authentication service. It has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (User, TokenForgotPassword, SocialIdentity)
- value_objects/: Value objects (Email, Password, Id)
- errors/: Error taxonomy returned inside Failure
- enums/: Motives and collaborator names used by errors
- protocols/: Provider and repository interfaces
"""
