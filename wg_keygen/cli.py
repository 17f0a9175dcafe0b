"""
WireGuard key generator command line

Generates WireGuard-compatible private/public keys using Curve25519 and prints
them base64 encoded, in the same format as the `wg genkey` and `wg pubkey`
commands.

Usage:
    wg-keygen genkey
    wg-keygen genkey | wg-keygen pubkey
    wg-keygen genpair
    wg-keygen validate <public key>
    wg-keygen verify <private key> <public key>
"""

import argparse
import logging
import sys

from . import __version__
from .exceptions import WireGuardKeyError
from .utils.crypto_utils import (
    derive_public_key,
    generate_private_key,
    generate_wireguard_keypair,
    validate_public_key,
    verify_keypair,
)

logger = logging.getLogger(__name__)

def cmd_genkey(args):
    print(generate_private_key())
    return 0

def cmd_pubkey(args):
    """Read a private key from stdin and print its public key."""
    private_key = args.input.read().strip()
    print(derive_public_key(private_key))
    return 0

def cmd_genpair(args):
    keypair = generate_wireguard_keypair()
    print(f"PRIVATE_KEY={keypair.private_key}")
    print(f"PUBLIC_KEY={keypair.public_key}")
    return 0

def cmd_validate(args):
    if validate_public_key(args.key):
        print("valid")
        return 0
    print("invalid")
    return 1

def cmd_verify(args):
    if verify_keypair(args.private_key, args.public_key):
        print("match")
        return 0
    print("mismatch")
    return 1

def build_parser():
    parser = argparse.ArgumentParser(
        prog="wg-keygen",
        description="Generate and validate WireGuard keys"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    genkey = subparsers.add_parser("genkey", help="Generate a private key")
    genkey.set_defaults(func=cmd_genkey)

    pubkey = subparsers.add_parser("pubkey", help="Derive the public key of a private key read from stdin")
    pubkey.set_defaults(func=cmd_pubkey, input=sys.stdin)

    genpair = subparsers.add_parser("genpair", help="Generate a private/public key pair")
    genpair.set_defaults(func=cmd_genpair)

    validate = subparsers.add_parser("validate", help="Check that a string is a valid public key")
    validate.add_argument("key", help="Base64 encoded public key")
    validate.set_defaults(func=cmd_validate)

    verify = subparsers.add_parser("verify", help="Check that a public key belongs to a private key")
    verify.add_argument("private_key", help="Base64 encoded private key")
    verify.add_argument("public_key", help="Base64 encoded public key")
    verify.set_defaults(func=cmd_verify)

    return parser

def main(argv=None):
    """Main entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr
    )
    logger.debug(f"Running command: {args.command}")

    try:
        return args.func(args)
    except WireGuardKeyError as e:
        logger.debug(f"Command {args.command} failed with {e.code}")
        print(f"error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
