"""Operations exposed by external-capability collaborators."""

from enum import Enum


class ProviderMethod(str, Enum):
    """Provider operations named in ProviderError messages."""

    ENCRYPT = "encrypt"
    COMPARE = "compare"
    GET = "get"
    SEND = "send"
    GENERATE = "generate"
    GENERATE_JWT = "generate jwt"
    VERIFY_JWT = "verify jwt"
    LOAD_USER = "load user"
    GENERATE_ID = "generate id"
