import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from myx509.common.errors import KeyGenerationError, ParseError
from myx509.crypto import keys
from myx509.crypto.keys import PrivateKey, generate_private_key


def test_generate_uses_p256(priv_key):
    assert priv_key.curve_name == "secp256r1"
    assert isinstance(priv_key.public_key().curve, ec.SECP256R1)


def test_generated_keys_differ():
    assert generate_private_key().public_bytes() != generate_private_key().public_bytes()


def test_sign_verifies_with_public_key(priv_key):
    data = b"some data to sign"
    sig = priv_key.sign(data)
    # raises InvalidSignature on failure
    priv_key.public_key().verify(sig, data, ec.ECDSA(hashes.SHA256()))


def test_der_round_trip_keeps_public_key(priv_key):
    der = priv_key.private_bytes()
    loaded = PrivateKey.from_der(der)
    assert loaded.public_bytes() == priv_key.public_bytes()


def test_private_bytes_is_sec1(priv_key):
    der = priv_key.private_bytes()
    # SEC1 ECPrivateKey: SEQUENCE { INTEGER 1, OCTET STRING ... }
    assert der[0] == 0x30
    assert b"\x02\x01\x01\x04\x20" in der[:16]


def test_from_der_rejects_garbage():
    with pytest.raises(ParseError):
        PrivateKey.from_der(b"not a key")


def test_from_der_rejects_other_curve():
    other = ec.generate_private_key(ec.SECP384R1())
    der = other.private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption(),
    )
    with pytest.raises(ParseError, match="curve"):
        PrivateKey.from_der(der)


def test_from_der_rejects_non_ec_key():
    other = ed25519.Ed25519PrivateKey.generate()
    der = other.private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )
    with pytest.raises(ParseError, match="elliptic-curve"):
        PrivateKey.from_der(der)


def test_generate_failure_is_wrapped(monkeypatch):
    def boom(curve):
        raise OSError("no entropy")

    monkeypatch.setattr(keys.ec, "generate_private_key", boom)
    with pytest.raises(KeyGenerationError) as exc:
        generate_private_key()
    assert isinstance(exc.value.cause, OSError)
    assert "no entropy" in str(exc.value)


def test_from_der_rejects_pkcs8():
    pkcs8 = ec.generate_private_key(ec.SECP256R1()).private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )
    with pytest.raises(ParseError, match="SEC1"):
        PrivateKey.from_der(pkcs8)
