# common/utils.py
import hashlib
import os
from datetime import datetime, timezone

from myx509.config import DEFAULT_CERT_EXT


def now_utc() -> datetime:
    # X.509 times carry whole seconds only
    return datetime.now(timezone.utc).replace(microsecond=0)


def sha256_hex(b: bytes) -> str:
    return hashlib.sha256(b).hexdigest()


def derive_cert_path(key_path: str) -> str:
    """Replace the key file's extension with .crt (out.key -> out.crt).

    The extension is everything from the last dot of the file name, so a
    dotfile such as ``dir/.key`` becomes ``dir/.crt``.
    """
    name = os.path.basename(key_path)
    dot = name.rfind(".")
    if dot >= 0:
        key_path = key_path[:len(key_path) - len(name) + dot]
    return key_path + DEFAULT_CERT_EXT
