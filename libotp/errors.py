__all__ = ["ConfigurationError", "LibOTPError"]


class LibOTPError(Exception):
    pass


class ConfigurationError(LibOTPError, ValueError):
    """Raised when a generator, validator or uri is built from invalid settings."""
