import base64


def b32encode(value: bytes) -> str:
    """
    wrapper around :func:`base64.b32encode` which strips padding,
    and returns a native string.
    """
    return base64.b32encode(value).rstrip(b"=").decode("ascii")
