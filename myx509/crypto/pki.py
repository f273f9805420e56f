# crypto/pki.py
"""Self-signed X.509 certificates (build, parse, verify, fingerprint)."""
import ipaddress
import secrets
from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from cryptography import x509
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import ExtendedKeyUsageOID, NameOID

from myx509.common.errors import (
    CertificateCreationError,
    CertificateParseError,
    InvalidArgumentError,
    PreconditionError,
    SerialNumberError,
)
from myx509.common.protocol import CertificateRequest
from myx509.common.utils import now_utc, sha256_hex
from myx509.config import SERIAL_NUMBER_BITS
from myx509.crypto.keys import PrivateKey


class Certificate:
    """A parsed certificate together with the DER bytes it was parsed from."""

    def __init__(self, cert: x509.Certificate, der_bytes: bytes):
        self._cert = cert
        self._der = der_bytes

    @classmethod
    def from_der(cls, data: bytes) -> "Certificate":
        return cls(load_cert(data), bytes(data))

    @property
    def cert(self) -> x509.Certificate:
        return self._cert

    @property
    def der_bytes(self) -> Optional[bytes]:
        return self._der

    @property
    def serial_number(self) -> int:
        return self._cert.serial_number

    @property
    def common_name(self) -> str:
        attrs = self._cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
        return attrs[0].value if attrs else ""

    @property
    def organizations(self) -> List[str]:
        return [a.value for a in self._cert.subject.get_attributes_for_oid(NameOID.ORGANIZATION_NAME)]

    @property
    def not_valid_before(self) -> datetime:
        return self._cert.not_valid_before_utc

    @property
    def not_valid_after(self) -> datetime:
        return self._cert.not_valid_after_utc

    @property
    def is_ca(self) -> bool:
        try:
            bc = self._cert.extensions.get_extension_for_class(x509.BasicConstraints)
        except x509.ExtensionNotFound:
            return False
        return bc.value.ca

    def fingerprint(self) -> str:
        if self._der is None:
            raise PreconditionError("certificate DER bytes are not set, cannot fingerprint")
        return cert_fingerprint_sha256(self._der)

    def __repr__(self):
        return f"Certificate(cn={self.common_name!r}, serial={self.serial_number:x})"


def load_cert(der_bytes: bytes) -> x509.Certificate:
    try:
        return x509.load_der_x509_certificate(der_bytes)
    except (ValueError, TypeError) as e:
        raise CertificateParseError("failed to parse certificate", cause=e) from e


def cert_fingerprint_sha256(der_bytes: bytes) -> str:
    return sha256_hex(der_bytes)


def random_serial_number() -> int:
    # uniform in [1, 2**128); X.509 serials must be positive
    try:
        return secrets.randbelow((1 << SERIAL_NUMBER_BITS) - 1) + 1
    except (OSError, NotImplementedError) as e:
        raise SerialNumberError("failed to generate serial number", cause=e) from e


def _subject(common_name: str, organizations: Sequence[str]) -> x509.Name:
    attrs = [x509.NameAttribute(NameOID.ORGANIZATION_NAME, org) for org in organizations]
    if common_name:
        attrs.append(x509.NameAttribute(NameOID.COMMON_NAME, common_name))
    return x509.Name(attrs)


def _key_usage(is_ca: bool) -> x509.KeyUsage:
    return x509.KeyUsage(
        digital_signature=True,
        content_commitment=False,
        key_encipherment=False,
        data_encipherment=False,
        key_agreement=False,
        key_cert_sign=is_ca,
        crl_sign=False,
        encipher_only=False,
        decipher_only=False,
    )


def build_self_signed(
    priv_key: PrivateKey,
    common_name: str,
    organizations: Sequence[str],
    dns_names: Sequence[str],
    ip_addresses: Sequence,
    valid_for: timedelta,
    is_ca: bool,
) -> Certificate:
    """Create a certificate whose issuer is its own subject, signed by priv_key.

    Extended key usage is always server and client authentication, CA or not.
    The DER output is parsed back before returning, so the returned object and
    its bytes always agree.
    """
    if valid_for <= timedelta(0):
        raise InvalidArgumentError(f"validity duration must be positive, got {valid_for}")
    try:
        ips = [ipaddress.ip_address(ip) for ip in ip_addresses]
    except ValueError as e:
        raise InvalidArgumentError("invalid IP address", cause=e) from e

    serial = random_serial_number()
    now = now_utc()

    try:
        name = _subject(common_name, organizations)
        builder = (
            x509.CertificateBuilder()
            .subject_name(name)
            .issuer_name(name)
            .public_key(priv_key.public_key())
            .serial_number(serial)
            .not_valid_before(now)
            .not_valid_after(now + valid_for)
            .add_extension(x509.BasicConstraints(ca=is_ca, path_length=None), critical=True)
            .add_extension(_key_usage(is_ca), critical=True)
            .add_extension(
                x509.ExtendedKeyUsage([ExtendedKeyUsageOID.SERVER_AUTH, ExtendedKeyUsageOID.CLIENT_AUTH]),
                critical=False,
            )
        )
        sans = [x509.DNSName(n) for n in dns_names] + [x509.IPAddress(ip) for ip in ips]
        if sans:
            builder = builder.add_extension(x509.SubjectAlternativeName(sans), critical=False)
        der = priv_key.sign_certificate(builder).public_bytes(serialization.Encoding.DER)
    except (ValueError, TypeError, OverflowError) as e:
        raise CertificateCreationError("failed to create certificate", cause=e) from e

    return Certificate(load_cert(der), der)


def build_from_request(priv_key: PrivateKey, request: CertificateRequest) -> Certificate:
    return build_self_signed(
        priv_key,
        request.common_name,
        request.organizations,
        request.dns_names,
        request.ip_addresses,
        request.valid_for,
        request.is_ca,
    )


def verify_self_signed(cert: Certificate, at: datetime = None) -> (bool, str):
    c = cert.cert
    if c.issuer != c.subject:
        return False, "issuer_mismatch"
    at = at or now_utc()
    if cert.not_valid_before > at or cert.not_valid_after < at:
        return False, "expired_or_not_yet_valid"
    pub = c.public_key()
    if not isinstance(pub, ec.EllipticCurvePublicKey):
        return False, "not_ec_key"
    try:
        pub.verify(c.signature, c.tbs_certificate_bytes, ec.ECDSA(c.signature_hash_algorithm))
    except InvalidSignature:
        return False, "bad_signature"
    return True, "ok"
