import os

import pytest

from myx509.common.utils import derive_cert_path


@pytest.mark.parametrize("key_path, cert_path", [
    ("out.key", "out.crt"),
    ("private_key.der", "private_key.crt"),
    ("a.b.key", "a.b.crt"),
    ("noext", "noext.crt"),
    (".key", ".crt"),
    (os.path.join("dir", ".key"), os.path.join("dir", ".crt")),
    (os.path.join("d.x", "key"), os.path.join("d.x", "key.crt")),
])
def test_derive_cert_path(key_path, cert_path):
    assert derive_cert_path(key_path) == cert_path
