"""Digest context wrapping a backend hasher."""

from __future__ import annotations

import logging

from procstatus.digest.backends import DigestBackend, Hasher, create_digest_backend
from procstatus.digest.types import DigestType
from procstatus.exceptions import DigestError, InvalidArgumentError

logger = logging.getLogger(__name__)


class DigestContext:
    """Incremental MD5 or SHA1 calculation over a byte stream.

    Create contexts with :meth:`initialize`; feed chunks with :meth:`update`
    and obtain the digest with :meth:`finalize`; repeated calls return the
    same digest.
    """

    def __init__(self, digest_type: DigestType, hasher: Hasher) -> None:
        self.digest_type = digest_type
        self._hasher: Hasher | None = hasher
        self._digest: bytes | None = None

    @classmethod
    def initialize(
        cls,
        digest_type: DigestType | str,
        backend: DigestBackend | str = "hashlib",
    ) -> DigestContext:
        """Create a context for ``digest_type`` using ``backend``.

        Raises:
            InvalidArgumentError: For an unsupported type or unknown backend.
            DigestError: If the backend cannot create the hasher.
        """
        digest_type = DigestType.coerce(digest_type)
        if isinstance(backend, str):
            backend = create_digest_backend(backend)
        hasher = backend.new(digest_type)
        logger.debug(
            "Digest context initialized: %s (%s)", digest_type.value, backend.name
        )
        return cls(digest_type, hasher)

    def update(self, buffer: bytes | bytearray | memoryview) -> None:
        if buffer is None:
            raise InvalidArgumentError("invalid buffer")
        if self._hasher is None:
            raise InvalidArgumentError("digest context already finalized")
        try:
            self._hasher.update(buffer)
        except TypeError as exc:
            raise InvalidArgumentError(f"invalid buffer: {exc}") from exc

    def finalize(self) -> bytes:
        """Return the digest; the context accepts no further updates."""
        if self._digest is not None:
            return self._digest
        if self._hasher is None:
            raise InvalidArgumentError("digest context already finalized")

        digest = self._hasher.digest()
        self._hasher = None
        if len(digest) != self.digest_type.digest_size:
            raise DigestError(
                f"unexpected {self.digest_type.value} digest size: {len(digest)}"
            )
        self._digest = digest
        return digest

    def hexdigest(self) -> str:
        return self.finalize().hex()
