"""libotp -- HOTP / TOTP one-time password generation and validation"""

__version__ = "0.1.0"
