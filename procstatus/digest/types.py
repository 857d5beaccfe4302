"""Supported digest algorithms."""

from __future__ import annotations

from enum import Enum

from procstatus.exceptions import InvalidArgumentError


class DigestType(str, Enum):
    MD5 = "md5"
    SHA1 = "sha1"

    @property
    def hashlib_name(self) -> str:
        return self.value

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self]

    @classmethod
    def coerce(cls, value: DigestType | str) -> DigestType:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f"unsupported digest type: {value!r}")


_DIGEST_SIZES = {
    DigestType.MD5: 16,
    DigestType.SHA1: 20,
}
