# crypto/keys.py
"""P-256 private keys using cryptography.

The concrete cryptography key object stays inside PrivateKey; callers get
only the operations they need (public key, signing, DER encoding).
"""
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec

from myx509.common.errors import KeyGenerationError, MarshalError, ParseError
from myx509.config import CURVE


def _is_sec1(data: bytes) -> bool:
    # ECPrivateKey ::= SEQUENCE { version INTEGER (1), privateKey OCTET STRING, ... }
    # PKCS#8 instead starts with version 0 and an AlgorithmIdentifier
    if len(data) < 2 or data[0] != 0x30:
        return False
    hdr = 2 if data[1] < 0x80 else 2 + (data[1] & 0x7F)
    return data[hdr:hdr + 4] == b"\x02\x01\x01\x04"


class PrivateKey:
    def __init__(self, key: ec.EllipticCurvePrivateKey):
        self._key = key

    @classmethod
    def from_der(cls, data: bytes) -> "PrivateKey":
        """Parse a SEC1 DER-encoded P-256 private key (PKCS#8 is rejected)."""
        if not _is_sec1(data):
            raise ParseError("not a SEC1 elliptic-curve private key")
        try:
            key = serialization.load_der_private_key(data, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise ParseError("failed to parse DER-encoded private key", cause=e) from e
        if not isinstance(key, ec.EllipticCurvePrivateKey):
            raise ParseError(f"not an elliptic-curve private key: {type(key).__name__}")
        if key.curve.name != CURVE.name:
            raise ParseError(f"unexpected curve {key.curve.name}, want {CURVE.name}")
        return cls(key)

    @property
    def curve_name(self) -> str:
        return self._key.curve.name

    def public_key(self) -> ec.EllipticCurvePublicKey:
        return self._key.public_key()

    def public_bytes(self) -> bytes:
        return self.public_key().public_bytes(
            serialization.Encoding.DER,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def private_bytes(self) -> bytes:
        # SEC1 ECPrivateKey structure
        try:
            return self._key.private_bytes(
                encoding=serialization.Encoding.DER,
                format=serialization.PrivateFormat.TraditionalOpenSSL,
                encryption_algorithm=serialization.NoEncryption(),
            )
        except (ValueError, TypeError) as e:
            raise MarshalError("failed to marshal private key to DER", cause=e) from e

    def sign(self, data: bytes) -> bytes:
        return self._key.sign(data, ec.ECDSA(hashes.SHA256()))

    def sign_certificate(self, builder):
        return builder.sign(private_key=self._key, algorithm=hashes.SHA256())

    def __repr__(self):
        return f"PrivateKey(curve={self.curve_name})"


def generate_private_key() -> PrivateKey:
    try:
        key = ec.generate_private_key(CURVE())
    except Exception as e:
        raise KeyGenerationError("failed to generate private key", cause=e) from e
    return PrivateKey(key)
