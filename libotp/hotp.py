"""libotp.hotp -- HMAC-based one-time passwords (RFC 4226)."""

from __future__ import annotations

import enum
import hashlib
import hmac
import logging
import struct
from typing import TYPE_CHECKING, Any, Callable

import typing_extensions

from libotp._utils.bytes import StrOrBytes, as_bytes
from libotp._utils.validation import validate_digits, validate_secret
from libotp.errors import ConfigurationError

if TYPE_CHECKING:
    from libotp._utils.protocols import KeyedHash

__all__ = ["MAX_COUNTER", "Algorithm", "PasswordGenerator", "check_counter"]

log = logging.getLogger(__name__)

#: largest counter value accepted, counters are unsigned 64 bit integers
MAX_COUNTER = (1 << 64) - 1

_counter_struct = struct.Struct(">Q")
_truncate_struct = struct.Struct(">I")


class Algorithm(enum.Enum):
    """Hash algorithm used for the keyed hash. RFC 4226 only defines SHA1."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"


def _digest_constructor(algorithm: Algorithm) -> Callable[..., Any]:
    if algorithm is Algorithm.SHA1:
        return hashlib.sha1
    if algorithm is Algorithm.SHA256:
        return hashlib.sha256
    if algorithm is Algorithm.SHA512:
        return hashlib.sha512
    typing_extensions.assert_never(algorithm)


def check_counter(counter: int) -> None:
    """check that counter is an unsigned 64 bit integer"""
    if isinstance(counter, bool) or not isinstance(counter, int):
        msg = f"counter must be an integer, not {type(counter).__name__}"
        raise TypeError(msg)
    if counter < 0 or counter > MAX_COUNTER:
        msg = f"counter must be between 0 - {MAX_COUNTER}"
        raise ValueError(msg)


class PasswordGenerator:
    """
    Generates HMAC-based one-time passwords for a single secret.

    Create one instance per secret and reuse it: the secret is keyed into an
    HMAC template once, and every call works on its own copy of that template,
    so a single instance may be shared between threads without locking.

    :param secret:
        shared secret, as :class:`!bytes` (:class:`!str` is encoded using utf-8).
        Must contain at least one byte.

    :param algorithm:
        hash algorithm, defaults to :attr:`Algorithm.SHA1`.

    :param digits:
        number of digits in generated passwords, must be in range [6 .. 8].

    :raises ~libotp.errors.ConfigurationError:
        if any of the settings is invalid, or the keyed hash isn't
        available on this platform.
    """

    def __init__(
        self,
        secret: StrOrBytes,
        algorithm: Algorithm = Algorithm.SHA1,
        digits: int = 6,
    ) -> None:
        validate_secret(secret)
        if not isinstance(algorithm, Algorithm):
            msg = f"unsupported algorithm: {algorithm!r}"
            raise ConfigurationError(msg)
        validate_digits(digits)

        self._algorithm = algorithm
        self._digits = digits
        self._modulus = 10**digits
        self._template = self._compile(as_bytes(secret), algorithm)
        log.debug(
            "created password generator: algorithm=%s digits=%d",
            algorithm.name,
            digits,
        )

    @staticmethod
    def _compile(secret: bytes, algorithm: Algorithm) -> KeyedHash:
        try:
            return hmac.new(secret, digestmod=_digest_constructor(algorithm))
        except ValueError as err:
            # raised by hashlib when e.g. a FIPS build refuses the digest
            msg = f"keyed hash unavailable for {algorithm.name}"
            raise ConfigurationError(msg) from err

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def digits(self) -> int:
        return self._digits

    @property
    def modulus(self) -> int:
        return self._modulus

    def generate_password(self, counter: int) -> int:
        """Generates the password corresponding to the given counter."""
        check_counter(counter)
        keyed_hash = self._template.copy()
        keyed_hash.update(_counter_struct.pack(counter))
        digest = keyed_hash.digest()

        # dynamic truncation, RFC 4226 section 5.3
        offset = digest[-1] & 0x0F
        value = _truncate_struct.unpack_from(digest, offset)[0] & 0x7FFFFFFF
        return value % self._modulus

    def generate_password_string(self, counter: int) -> str:
        """
        Generates the password corresponding to the given counter as a string,
        left-padded with zeros to exactly :attr:`digits` characters.
        """
        return self.format_password(self.generate_password(counter))

    def format_password(self, password: int) -> str:
        return "%0*d" % (self._digits, password)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}"
            f"(algorithm={self._algorithm.name}, digits={self._digits})"
        )
