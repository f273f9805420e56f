# storage/files.py
"""Read and write keys and certificates as DER files."""
import os
from pathlib import Path

from myx509.common.errors import (
    CertificateParseError,
    ParseError,
    PreconditionError,
    ReadError,
    WriteError,
)
from myx509.config import CERT_FILE_MODE, KEY_FILE_MODE
from myx509.crypto.keys import PrivateKey
from myx509.crypto.pki import Certificate


def _write_file(path, data: bytes, mode: int):
    # create with the target mode so the file is never readable more widely,
    # then chmod in case it already existed or umask stripped bits
    try:
        with open(path, "wb", opener=lambda p, flags: os.open(p, flags, mode)) as f:
            f.write(data)
        os.chmod(path, mode)
    except OSError as e:
        raise WriteError("failed to write DER data", path=str(path), cause=e) from e


def _read_file(path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ReadError("failed to read file", path=str(path), cause=e) from e


def save_key(key: PrivateKey, path):
    der = key.private_bytes()
    _write_file(path, der, KEY_FILE_MODE)


def save_certificate(cert: Certificate, path):
    if cert.der_bytes is None:
        raise PreconditionError("certificate DER bytes are not set, cannot save", path=str(path))
    _write_file(path, cert.der_bytes, CERT_FILE_MODE)


def load_key(path) -> PrivateKey:
    data = _read_file(path)
    try:
        return PrivateKey.from_der(data)
    except ParseError as e:
        raise ParseError(e.message, path=str(path), cause=e.cause) from e


def load_certificate(path) -> Certificate:
    data = _read_file(path)
    try:
        return Certificate.from_der(data)
    except CertificateParseError as e:
        raise CertificateParseError(e.message, path=str(path), cause=e.cause) from e
