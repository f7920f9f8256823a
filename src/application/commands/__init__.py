"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (SignUp, SignIn).

Each command has a corresponding handler that contains the use case.
"""

from src.application.commands.auth_commands import (
    AccessToken,
    AuthenticatedUser,
    CredentialsSignIn,
    FacebookSignIn,
    GoogleSignIn,
    SendForgotPasswordNotification,
    SignIn,
    SignUp,
)

__all__ = [
    "AccessToken",
    "AuthenticatedUser",
    "CredentialsSignIn",
    "FacebookSignIn",
    "GoogleSignIn",
    "SendForgotPasswordNotification",
    "SignIn",
    "SignUp",
]
