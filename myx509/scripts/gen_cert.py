# scripts/gen_cert.py
"""Generate a P-256 key and a self-signed X.509 certificate, both DER. Usage:
myx509-gencert -key certs/server.key -cn example.com -org Example -days 30
"""
import argparse
import os
from datetime import timedelta

from pydantic import ValidationError

from myx509.common.console import fail, info
from myx509.common.errors import InvalidArgumentError, X509Error
from myx509.common.protocol import CertificateRequest
from myx509.common.utils import derive_cert_path
from myx509.config import (
    DEFAULT_COMMON_NAME,
    DEFAULT_KEY_PATH,
    DEFAULT_ORGANIZATION,
    DEFAULT_VALIDITY_DAYS,
)
from myx509.crypto.keys import generate_private_key
from myx509.crypto.pki import build_from_request
from myx509.storage.files import load_key, save_certificate, save_key


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="myx509-gencert", allow_abbrev=False)
    p.add_argument("-key", default=DEFAULT_KEY_PATH, help="output file path for the private key (DER)")
    p.add_argument("-cert", default="", help="output file path for the certificate (DER), defaults to <key_name>.crt")
    p.add_argument("-cn", default=DEFAULT_COMMON_NAME, help="subject common name")
    p.add_argument("-org", default=DEFAULT_ORGANIZATION, help="subject organization")
    p.add_argument("-days", type=int, default=DEFAULT_VALIDITY_DAYS, help="validity in days")
    p.add_argument("-dns", action="append", default=[], help="subject alternative DNS name (repeatable)")
    p.add_argument("-ip", action="append", default=[], help="subject alternative IP address (repeatable)")
    p.add_argument("-ca", action="store_true", help="mark the certificate as a CA")
    p.add_argument("-reuse", action="store_true", help="sign with the existing key at -key instead of a new one")
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)

    if not args.key:
        fail(InvalidArgumentError("private key output file path cannot be empty"), usage=p.print_usage)
    cert_path = args.cert or derive_cert_path(args.key)
    if os.path.abspath(cert_path) == os.path.abspath(args.key):
        fail(InvalidArgumentError(f"certificate path would overwrite the private key: {cert_path}"), usage=p.print_usage)

    try:
        request = CertificateRequest(
            common_name=args.cn,
            organizations=[args.org],
            dns_names=args.dns,
            ip_addresses=args.ip,
            valid_for=timedelta(days=args.days),
            is_ca=args.ca,
        )
    except (ValidationError, OverflowError) as e:
        fail(InvalidArgumentError("invalid certificate parameters", cause=e), usage=p.print_usage)

    try:
        if args.reuse:
            key = load_key(args.key)
            info(f"Loaded private key from {args.key}")
        else:
            key = generate_private_key()
            save_key(key, args.key)
            info(f"Wrote private key to {args.key}")

        cert = build_from_request(key, request)
        save_certificate(cert, cert_path)
    except X509Error as e:
        fail(e)

    info(f"Wrote certificate to {cert_path}")
    info(f"  subject: {cert.cert.subject.rfc4514_string()}")
    info(f"  serial: {cert.serial_number:x}")
    info(f"  valid: {cert.not_valid_before.isoformat()} .. {cert.not_valid_after.isoformat()}")
    info(f"  sha256: {cert.fingerprint()}")


if __name__ == "__main__":
    main()
