from __future__ import annotations

from typing import TYPE_CHECKING

from libotp.errors import ConfigurationError

if TYPE_CHECKING:
    from libotp._utils.bytes import StrOrBytes

MIN_DIGITS = 6
MAX_DIGITS = 8


def validate_digits(digits: int) -> None:
    if isinstance(digits, bool) or not isinstance(digits, int):
        msg = f"invalid digit count: {digits!r}"
        raise ConfigurationError(msg)
    if digits < MIN_DIGITS or digits > MAX_DIGITS:
        msg = f"invalid digit count: {digits} (must be between {MIN_DIGITS} - {MAX_DIGITS})"
        raise ConfigurationError(msg)


def validate_secret(secret: StrOrBytes | None) -> None:
    if secret is None:
        raise ConfigurationError("secret must be specified")
    if not isinstance(secret, (str, bytes)):
        msg = f"secret must be str or bytes, not {type(secret).__name__}"
        raise ConfigurationError(msg)
    if not secret:
        raise ConfigurationError("empty secret")


def validate_positive(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, not {type(value).__name__}"
        raise ConfigurationError(msg)
    if value <= 0:
        msg = f"{name} must be positive"
        raise ConfigurationError(msg)
