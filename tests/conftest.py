import pytest

from libotp.hotp import PasswordGenerator
from tests.utils_ import RFC_SECRET


@pytest.fixture
def rfc_generator() -> PasswordGenerator:
    return PasswordGenerator(RFC_SECRET)
