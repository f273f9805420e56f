# scripts/gen_key.py
"""Generate a P-256 private key and write it as DER. Usage:
myx509-genkey -o certs/server.der
"""
import argparse

from myx509.common.console import fail, info
from myx509.common.errors import InvalidArgumentError, X509Error
from myx509.config import DEFAULT_KEY_PATH
from myx509.crypto.keys import generate_private_key
from myx509.storage.files import save_key


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="myx509-genkey", allow_abbrev=False)
    p.add_argument("-o", default=DEFAULT_KEY_PATH, help="output file path for the private key (DER)")
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)

    if not args.o:
        fail(InvalidArgumentError("private key output file path cannot be empty"), usage=p.print_usage)

    try:
        key = generate_private_key()
        save_key(key, args.o)
    except X509Error as e:
        fail(e)
    info(f"Wrote private key to {args.o}")


if __name__ == "__main__":
    main()
