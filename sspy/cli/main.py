"""sspy CLI - key generation, encryption and decryption commands."""
import getpass
import io
import os
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, Optional

import typer
from rich.console import Console
from rich.markup import escape

from sspy.core.config import KeygenConfig, CipherConfig
from sspy.core.crypto import (
    RandomState,
    KeyCodec,
    generate_keypair,
    encrypt_file,
    decrypt_file,
)
from sspy.core.exceptions import SSException
from sspy.core.logging import get_logger

app = typer.Typer(
    name="ss",
    help="Schmidt-Samoa public-key encryption",
    add_completion=False
)
# Diagnostics go to stderr so stdout can carry ciphertext or plaintext
console = Console(stderr=True)
logger = get_logger(__name__)


def get_owner() -> str:
    """Login name of the current user, recorded in the public key."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return os.environ.get("USER", "unknown")


def open_private_key_for_writing(path: str, mode: int):
    """Opens the private key file for writing with restricted permissions."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    if hasattr(os, "fchmod"):
        os.fchmod(fd, mode)
    return os.fdopen(fd, "w")


def fail(message: str):
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(1)


def format_value(value: int) -> str:
    """Decimal form of value, or hex past the interpreter's int-to-str digit limit."""
    try:
        return str(value)
    except ValueError:
        return f"{value:#x}"


def print_value(label: str, value: int):
    console.print(f"{label} ({value.bit_length()} bits) = {format_value(value)}", highlight=False)


def open_input(stack: ExitStack, path: Optional[Path]) -> BinaryIO:
    if path is None:
        return sys.stdin.buffer
    return stack.enter_context(open(path, "rb"))


def open_output(stack: ExitStack, path: Optional[Path]) -> BinaryIO:
    if path is None:
        return sys.stdout.buffer
    return stack.enter_context(open(path, "wb"))


@app.command()
def keygen(
    bits: int = typer.Option(256, "--bits", "-b", help="Minimum bits needed for public key n"),
    iters: int = typer.Option(50, "--iters", "-i", help="Miller-Rabin iterations for testing primes"),
    pbfile: str = typer.Option("ss.pub", "--pbfile", "-n", help="Public key file"),
    pvfile: str = typer.Option("ss.priv", "--pvfile", "-d", help="Private key file"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed for testing (default: current time)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Display verbose program output"),
):
    """Generate an SS public/private key pair."""
    try:
        config = KeygenConfig(
            bits=bits,
            iters=iters,
            public_key_path=pbfile,
            private_key_path=pvfile,
            seed=seed,
        )
    except ValueError as e:
        fail(str(e))

    owner = get_owner()
    rng = RandomState(config.seed)
    logger.info(f"Generating {config.bits}-bit key for {owner} (seed={rng.seed})")

    try:
        keys = generate_keypair(config.bits, config.iters, owner, rng, config.prime)

        # Key files are only replaced once both keys have serialized
        pub_text = io.StringIO()
        priv_text = io.StringIO()
        KeyCodec.write_pub(keys.public, pub_text)
        KeyCodec.write_priv(keys.private, priv_text)

        with open(config.public_key_path, "w") as pub_file:
            pub_file.write(pub_text.getvalue())
        with open_private_key_for_writing(config.private_key_path, config.private_key_mode) as priv_file:
            priv_file.write(priv_text.getvalue())
    except (SSException, ValueError, OSError) as e:
        fail(str(e))

    if verbose:
        console.print(f"user = {owner}", highlight=False)
        print_value("p ", keys.p)
        print_value("q ", keys.q)
        print_value("n ", keys.public.n)
        print_value("d ", keys.private.d)
        print_value("pq", keys.private.pq)


@app.command()
def encrypt(
    infile: Optional[Path] = typer.Option(None, "--infile", "-i", help="Input file of data to encrypt (default: stdin)"),
    outfile: Optional[Path] = typer.Option(None, "--outfile", "-o", help="Output file for encrypted data (default: stdout)"),
    pbfile: str = typer.Option(CipherConfig.public_key_path, "--pbfile", "-n", help="Public key file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Display verbose program output"),
):
    """Encrypt data using SS encryption."""
    try:
        with open(pbfile, "r") as f:
            public_key = KeyCodec.read_pub(f)
    except OSError as e:
        fail(f"unable to open public key file -- '{pbfile}': {e.strerror or e}")
    except SSException as e:
        fail(str(e))

    if verbose:
        console.print(f"user = {public_key.owner}", highlight=False)
        print_value("n", public_key.n)

    try:
        with ExitStack() as stack:
            source = open_input(stack, infile)
            target = open_output(stack, outfile)
            encrypt_file(source, target, public_key.n)
            target.flush()
    except (SSException, OSError) as e:
        fail(str(e))


@app.command()
def decrypt(
    infile: Optional[Path] = typer.Option(None, "--infile", "-i", help="Input file of data to decrypt (default: stdin)"),
    outfile: Optional[Path] = typer.Option(None, "--outfile", "-o", help="Output file for decrypted data (default: stdout)"),
    pvfile: str = typer.Option(CipherConfig.private_key_path, "--pvfile", "-n", help="Private key file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Display verbose program output"),
):
    """Decrypt data encrypted by `ss encrypt`."""
    try:
        with open(pvfile, "r") as f:
            private_key = KeyCodec.read_priv(f)
    except OSError as e:
        fail(f"unable to open private key file -- '{pvfile}': {e.strerror or e}")
    except SSException as e:
        fail(str(e))

    if verbose:
        print_value("pq", private_key.pq)
        print_value("d ", private_key.d)

    try:
        with ExitStack() as stack:
            source = open_input(stack, infile)
            target = open_output(stack, outfile)
            decrypt_file(source, target, private_key.d, private_key.pq)
            target.flush()
    except (SSException, OSError) as e:
        fail(str(e))


if __name__ == "__main__":
    app()
