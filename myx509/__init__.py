# myx509/__init__.py
"""Generate P-256 private keys and self-signed X.509 certificates in DER."""
from myx509.common.errors import X509Error
from myx509.crypto.keys import PrivateKey, generate_private_key
from myx509.crypto.pki import Certificate, build_self_signed
from myx509.storage.files import save_key, save_certificate, load_key, load_certificate

__version__ = "0.1.0"
