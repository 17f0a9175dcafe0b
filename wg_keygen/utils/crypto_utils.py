import base64
import binascii
import os
from typing import NamedTuple

from nacl.public import PrivateKey

from ..exceptions import EntropyUnavailable, InvalidEncoding, InvalidKeyLength

# Curve25519 keys are 32 bytes, 44 characters once base64 encoded
KEY_SIZE = PrivateKey.SIZE
ENCODED_KEY_LENGTH = 44


class WireGuardKeyPair(NamedTuple):
    private_key: str
    public_key: str


def encode_key(raw: bytes) -> str:
    """Encode a raw 32-byte key as standard base64 (with padding)."""
    if len(raw) != KEY_SIZE:
        raise InvalidKeyLength(len(raw), KEY_SIZE)
    return base64.b64encode(raw).decode("ascii")


def decode_key(encoded: str) -> bytes:
    """
    Decode a base64 key string into its raw 32 bytes.

    Decoding is strict: characters outside the standard alphabet, missing
    padding and embedded whitespace are rejected with InvalidEncoding.
    A well-formed string of the wrong size raises InvalidKeyLength.
    """
    if not isinstance(encoded, str):
        raise InvalidEncoding(f"Key must be a base64 string, not {type(encoded).__name__}")

    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding(f"Key is not valid base64: {e}") from e

    if len(raw) != KEY_SIZE:
        raise InvalidKeyLength(len(raw), KEY_SIZE)
    return raw


def generate_private_key() -> str:
    """
    Generate a WireGuard private key.
    Returns 32 fresh bytes from the OS secure random source, base64 encoded.
    """
    try:
        private_key_bytes = os.urandom(KEY_SIZE)
    except (NotImplementedError, OSError) as e:
        raise EntropyUnavailable(f"Secure random source unavailable: {e}") from e

    return encode_key(private_key_bytes)


def derive_public_key(private_key: str) -> str:
    """
    Derive the WireGuard public key for a base64 private key.

    The private key is used as an X25519 scalar and multiplied against the
    Curve25519 base point by libsodium (PyNaCl). The same private key always
    yields the same public key.

    Raises:
        InvalidEncoding: private_key is not valid base64
        InvalidKeyLength: private_key does not decode to 32 bytes
    """
    private_key_bytes = decode_key(private_key)

    public_key_bytes = bytes(PrivateKey(private_key_bytes).public_key)

    return encode_key(public_key_bytes)


def validate_public_key(public_key) -> bool:
    """
    Validate if a value is a WireGuard public key (base64, 44 chars, 32 bytes).
    Never raises.
    """
    if not isinstance(public_key, str) or len(public_key) != ENCODED_KEY_LENGTH:
        return False

    try:
        decode_key(public_key)
    except (InvalidEncoding, InvalidKeyLength):
        return False
    return True


def verify_keypair(private_key, public_key) -> bool:
    """Check that public_key is the key derived from private_key. Never raises."""
    if not validate_public_key(public_key):
        return False

    try:
        derived_public_key = derive_public_key(private_key)
    except (InvalidEncoding, InvalidKeyLength):
        return False
    # compare bytes, not strings, so non-canonical padding bits still match
    return decode_key(derived_public_key) == decode_key(public_key)


def generate_wireguard_keypair() -> WireGuardKeyPair:
    """
    Generate a Curve25519 (X25519) key pair for WireGuard.
    Returns base64-encoded private and public keys.
    """
    private_key = generate_private_key()
    public_key = derive_public_key(private_key)

    return WireGuardKeyPair(private_key=private_key, public_key=public_key)
