"""
libotp.provisioning -- ``otpauth://`` uris for configuring authenticator apps.

See Google Authenticator's
`KeyUriFormat <https://github.com/google/google-authenticator/wiki/Key-Uri-Format>`_.
Parameters equal to the defaults most apps hardcode (SHA1, 6 digits, 30 seconds)
are left out of the uri.
"""

from __future__ import annotations

from urllib.parse import quote

from libotp._utils.base32 import b32encode
from libotp._utils.bytes import StrOrBytes, as_bytes
from libotp._utils.validation import validate_digits, validate_positive, validate_secret
from libotp.errors import ConfigurationError
from libotp.hotp import MAX_COUNTER, Algorithm

__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_DIGITS",
    "DEFAULT_PERIOD",
    "counter_based_uri",
    "time_based_uri",
]

DEFAULT_ALGORITHM = Algorithm.SHA1
DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30


def time_based_uri(
    label: str,
    secret: StrOrBytes,
    *,
    algorithm: Algorithm = DEFAULT_ALGORITHM,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
) -> str:
    """
    Creates a uri for a time-based one-time password.

    :param label: display name for the token inside the authenticator app.
    :param secret: the shared secret.
    :param period: length of the period one password stays valid, in seconds.

    Usage example::

        >>> time_based_uri("user@example.org", b"Hello!\\xde\\xad\\xbe\\xef")
        'otpauth://totp/user@example.org?secret=JBSWY3DPEHPK3PXP'
    """
    validate_positive(period, "period")
    args = _common_args(label, secret, algorithm, digits)
    if period != DEFAULT_PERIOD:
        args.append(("period", str(period)))
    return _render("totp", label, args)


def counter_based_uri(
    label: str,
    secret: StrOrBytes,
    *,
    algorithm: Algorithm = DEFAULT_ALGORITHM,
    digits: int = DEFAULT_DIGITS,
    counter: int = 0,
) -> str:
    """
    Creates a uri for a counter-based one-time password.

    :param counter: the counter the token is initialized with.
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        msg = f"counter must be an integer, not {type(counter).__name__}"
        raise ConfigurationError(msg)
    if counter < 0 or counter > MAX_COUNTER:
        raise ConfigurationError("counter must be non-negative")
    args = _common_args(label, secret, algorithm, digits)
    # counter is required for hotp, so it always follows the secret
    args.insert(1, ("counter", str(counter)))
    return _render("hotp", label, args)


def _common_args(
    label: str,
    secret: StrOrBytes,
    algorithm: Algorithm,
    digits: int,
) -> list[tuple[str, str]]:
    if not label:
        raise ConfigurationError("label must not be empty")
    validate_secret(secret)
    if not isinstance(algorithm, Algorithm):
        msg = f"unsupported algorithm: {algorithm!r}"
        raise ConfigurationError(msg)
    validate_digits(digits)

    args = [("secret", b32encode(as_bytes(secret)))]
    if algorithm is not DEFAULT_ALGORITHM:
        args.append(("algorithm", algorithm.name))
    if digits != DEFAULT_DIGITS:
        args.append(("digits", str(digits)))
    return args


def _render(type: str, label: str, args: list[tuple[str, str]]) -> str:
    # NOTE: not using urlencode() since it renders ' ' as '+',
    #       authenticator apps expect '%20'.
    argstr = "&".join(f"{key}={quote(value, safe='')}" for key, value in args)
    return f"otpauth://{type}/{quote(label, safe='@')}?{argstr}"
