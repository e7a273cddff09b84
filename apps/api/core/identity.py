"""
Caller identity dependency.

The service does not authenticate callers itself. The hosting gateway
resolves who is calling and forwards an opaque identity string in a
header (X-Caller-Id by default). Everything keyed "per caller" uses it.
"""
from fastapi import Request

from core.config import settings
from core.exceptions import UnauthorizedError


def get_caller_identity(request: Request) -> str:
    """
    Return the invoking caller's identity.

    Raises UnauthorizedError (401) if the header is missing or blank.
    """
    caller = request.headers.get(settings.CALLER_ID_HEADER)
    if caller is None or not caller.strip():
        raise UnauthorizedError(f"Missing {settings.CALLER_ID_HEADER} header")
    return caller.strip()
