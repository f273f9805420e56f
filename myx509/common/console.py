# common/console.py
"""Console output for the command-line tools."""
import sys

from rich.console import Console
from rich.markup import escape

from myx509.common.errors import X509Error

# one message per line, never wrapped at the terminal width
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def info(msg: str):
    console.print(f"[green]{escape(msg)}[/]")


def fail(err: X509Error, usage=None):
    """Report err on stderr and exit with status 1."""
    err_console.print(f"[bold red]error[/] [red]({err.op}): {escape(str(err))}[/]")
    if usage is not None:
        usage(sys.stderr)
    raise SystemExit(1)
