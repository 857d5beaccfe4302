"""Digest calculation collaborators for the imaging commands."""

from .backends import (
    DigestBackend,
    DigestBackendFactory,
    HashlibDigestBackend,
    create_digest_backend,
    list_digest_backends,
    register_digest_backend,
    unregister_digest_backend,
)
from .context import DigestContext
from .types import DigestType

__all__ = [
    "DigestBackend",
    "DigestBackendFactory",
    "DigestContext",
    "DigestType",
    "HashlibDigestBackend",
    "create_digest_backend",
    "list_digest_backends",
    "register_digest_backend",
    "unregister_digest_backend",
]
