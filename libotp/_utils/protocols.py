from __future__ import annotations

from typing import Protocol

from typing_extensions import Buffer, Self


class KeyedHash(Protocol):
    """The subset of :class:`hmac.HMAC` used by the password generator."""

    @property
    def digest_size(self) -> int: ...

    @property
    def name(self) -> str: ...

    def copy(self) -> Self: ...

    def digest(self) -> bytes: ...

    def update(self, msg: Buffer, /) -> None: ...
