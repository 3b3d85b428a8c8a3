"""Exceptions raised by the credential, token, and authorization tools."""


class HashingError(RuntimeError):
    """A password hash could not be produced or is structurally invalid."""


class InvalidToken(ValueError):
    """Token could not be verified."""


class MalformedToken(InvalidToken):
    """Token is not a well-formed JWT, or lacks the expected claims."""


class InvalidSignature(InvalidToken):
    """Token signature does not match the signing secret."""


class ExpiredToken(InvalidToken):
    """Token was well-formed and correctly signed, but it has expired."""


class AuthContextError(RuntimeError):
    """
    Claims are missing from the request context.

    This means the auth layer did not run before an owner check, which is
    a server-side fault and never grounds for authorizing the request.
    """
