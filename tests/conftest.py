import pytest

from myx509.crypto.keys import generate_private_key


@pytest.fixture(scope="session")
def priv_key():
    return generate_private_key()
