"""Digest backends and their registry.

A backend turns a ``DigestType`` into a fresh hasher object exposing
``update(data)`` and ``digest()``. Backends are looked up by name so the
commands can select one from configuration.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from typing import Callable, Protocol

from procstatus.digest.types import DigestType
from procstatus.exceptions import DigestError, InvalidArgumentError


class Hasher(Protocol):
    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...


class DigestBackend(ABC):
    """Capability interface for creating hashers."""

    name: str = ""

    @abstractmethod
    def new(self, digest_type: DigestType) -> Hasher:
        """Return a fresh hasher for ``digest_type``.

        Raises:
            DigestError: If the backend cannot provide the algorithm.
        """


class HashlibDigestBackend(DigestBackend):
    """Backend using :mod:`hashlib` (OpenSSL where available)."""

    name = "hashlib"

    def new(self, digest_type: DigestType) -> Hasher:
        try:
            return hashlib.new(digest_type.hashlib_name)
        except ValueError as exc:
            raise DigestError(
                f"unable to create {digest_type.value} context: {exc}"
            ) from exc


DigestBackendFactory = Callable[[], DigestBackend]


class _DigestBackendRegistry:
    def __init__(self) -> None:
        self._factories: dict[str, DigestBackendFactory] = {}

    def register(self, name: str, factory: DigestBackendFactory) -> None:
        key = name.lower()
        self._factories[key] = factory

    def create(self, name: str) -> DigestBackend:
        key = name.lower()
        factory = self._factories.get(key)
        if factory is None:
            available = ", ".join(sorted(self._factories.keys())) or "(none)"
            raise InvalidArgumentError(
                f"No digest backend registered under name '{name}'. "
                f"Available backends: {available}."
            )
        return factory()

    def list_backends(self) -> list[str]:
        return sorted(self._factories.keys())

    def unregister(self, name: str) -> None:
        self._factories.pop(name.lower(), None)


_REGISTRY = _DigestBackendRegistry()


def register_digest_backend(name: str, factory: DigestBackendFactory) -> None:
    """Register a digest backend factory in the global registry.

    Args:
        name: Backend identifier (case-insensitive).
        factory: Callable returning a ``DigestBackend`` instance.
    """
    _REGISTRY.register(name, factory)


def create_digest_backend(name: str) -> DigestBackend:
    """Create a backend instance from the registry.

    Raises:
        InvalidArgumentError: If the backend name is not registered.
    """
    return _REGISTRY.create(name)


def list_digest_backends() -> list[str]:
    """List all registered backend names."""
    return _REGISTRY.list_backends()


def unregister_digest_backend(name: str) -> None:
    _REGISTRY.unregister(name)


register_digest_backend(HashlibDigestBackend.name, HashlibDigestBackend)


__all__ = [
    "DigestBackend",
    "DigestBackendFactory",
    "Hasher",
    "HashlibDigestBackend",
    "create_digest_backend",
    "list_digest_backends",
    "register_digest_backend",
    "unregister_digest_backend",
]
