# common/errors.py
"""Exceptions raised by key, certificate and file operations.

Every error records the operation that failed, the file involved (if any)
and the underlying cause, so the command-line layer can report it without
the core code printing anything itself.
"""


class X509Error(Exception):
    op = "x509"

    def __init__(self, message: str, path: str = None, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def __str__(self):
        s = self.message
        if self.path:
            s += f" ({self.path})"
        if self.cause is not None:
            s += f": {self.cause}"
        return s


class KeyGenerationError(X509Error):
    op = "generate_key"


class SerialNumberError(X509Error):
    op = "serial_number"


class CertificateCreationError(X509Error):
    op = "create_certificate"


class CertificateParseError(X509Error):
    op = "parse_certificate"


class MarshalError(X509Error):
    op = "marshal_key"


class ReadError(X509Error):
    op = "read"


class WriteError(X509Error):
    op = "write"


class ParseError(X509Error):
    op = "parse_key"


class InvalidArgumentError(X509Error):
    op = "arguments"


class PreconditionError(X509Error):
    op = "precondition"
