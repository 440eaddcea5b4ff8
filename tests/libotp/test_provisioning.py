import pytest

from libotp.errors import ConfigurationError
from libotp.hotp import Algorithm
from libotp.provisioning import counter_based_uri, time_based_uri
from tests.utils_ import KEY_URI_SECRET


@pytest.mark.parametrize(
    ("kwargs", "uri"),
    [
        (
            {},
            "otpauth://totp/user@example.org?secret=JBSWY3DPEHPK3PXP",
        ),
        (
            {"algorithm": Algorithm.SHA1, "digits": 6, "period": 30},
            "otpauth://totp/user@example.org?secret=JBSWY3DPEHPK3PXP",
        ),
        (
            {"algorithm": Algorithm.SHA256},
            "otpauth://totp/user@example.org?secret=JBSWY3DPEHPK3PXP&algorithm=SHA256",
        ),
        (
            {"digits": 8},
            "otpauth://totp/user@example.org?secret=JBSWY3DPEHPK3PXP&digits=8",
        ),
        (
            {"period": 60},
            "otpauth://totp/user@example.org?secret=JBSWY3DPEHPK3PXP&period=60",
        ),
        (
            {"algorithm": Algorithm.SHA512, "digits": 7, "period": 15},
            "otpauth://totp/user@example.org"
            "?secret=JBSWY3DPEHPK3PXP&algorithm=SHA512&digits=7&period=15",
        ),
    ],
)
def test_time_based_uri(kwargs: dict, uri: str) -> None:
    assert time_based_uri("user@example.org", KEY_URI_SECRET, **kwargs) == uri


@pytest.mark.parametrize(
    ("kwargs", "uri"),
    [
        (
            {},
            "otpauth://hotp/alice?secret=JBSWY3DPEHPK3PXP&counter=0",
        ),
        (
            {"counter": 42},
            "otpauth://hotp/alice?secret=JBSWY3DPEHPK3PXP&counter=42",
        ),
        (
            {"algorithm": Algorithm.SHA512, "digits": 8, "counter": 7},
            "otpauth://hotp/alice?secret=JBSWY3DPEHPK3PXP&counter=7&algorithm=SHA512&digits=8",
        ),
    ],
)
def test_counter_based_uri(kwargs: dict, uri: str) -> None:
    assert counter_based_uri("alice", KEY_URI_SECRET, **kwargs) == uri


@pytest.mark.parametrize(
    ("label", "encoded"),
    [
        ("John Smith", "John%20Smith"),
        ("Example:alice@google.com", "Example%3Aalice@google.com"),
        ("a/b?c&d", "a%2Fb%3Fc%26d"),
        ("jürgen", "j%C3%BCrgen"),
    ],
)
def test_label_is_percent_encoded(label: str, encoded: str) -> None:
    assert time_based_uri(label, KEY_URI_SECRET).startswith(f"otpauth://totp/{encoded}?")


def test_secret_padding_is_stripped() -> None:
    # 1 byte encodes to 2 base32 chars + 6 padding chars
    assert time_based_uri("a", b"\xff") == "otpauth://totp/a?secret=74"


def test_str_secret() -> None:
    assert time_based_uri("a", "12345678901234567890") == (
        "otpauth://totp/a?secret=GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
    )


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"label": ""}, "label must not be empty"),
        ({"secret": b""}, "empty secret"),
        ({"digits": 5}, "invalid digit count"),
        ({"digits": 9}, "invalid digit count"),
        ({"period": 0}, "period must be positive"),
        ({"period": -30}, "period must be positive"),
        ({"algorithm": "SHA1"}, "unsupported algorithm"),
    ],
)
def test_time_based_uri_invalid(kwargs: dict, match: str) -> None:
    kwargs = {"label": "alice", "secret": KEY_URI_SECRET, **kwargs}
    with pytest.raises(ConfigurationError, match=match):
        time_based_uri(**kwargs)


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"label": ""}, "label must not be empty"),
        ({"secret": b""}, "empty secret"),
        ({"digits": 9}, "invalid digit count"),
        ({"counter": -1}, "counter must be non-negative"),
        ({"counter": 1.5}, "counter must be an integer"),
    ],
)
def test_counter_based_uri_invalid(kwargs: dict, match: str) -> None:
    kwargs = {"label": "alice", "secret": KEY_URI_SECRET, **kwargs}
    with pytest.raises(ConfigurationError, match=match):
        counter_based_uri(**kwargs)
