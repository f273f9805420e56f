# myx509/config.py
from cryptography.hazmat.primitives.asymmetric import ec

# key material
CURVE = ec.SECP256R1
SERIAL_NUMBER_BITS = 128

# file permissions
KEY_FILE_MODE = 0o600
CERT_FILE_MODE = 0o644

# command-line defaults
DEFAULT_KEY_PATH = "private_key.der"
DEFAULT_CERT_EXT = ".crt"
DEFAULT_COMMON_NAME = "Self Signed Cert"
DEFAULT_ORGANIZATION = "My Org"
DEFAULT_VALIDITY_DAYS = 365
