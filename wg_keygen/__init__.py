"""Generate and validate WireGuard (Curve25519 / X25519) keys."""

from .exceptions import (
    EntropyUnavailable,
    InvalidEncoding,
    InvalidKeyLength,
    WireGuardKeyError,
)
from .utils.crypto_utils import (
    ENCODED_KEY_LENGTH,
    KEY_SIZE,
    WireGuardKeyPair,
    decode_key,
    derive_public_key,
    encode_key,
    generate_private_key,
    generate_wireguard_keypair,
    validate_public_key,
    verify_keypair,
)

__version__ = "1.0.1"

__all__ = [
    "ENCODED_KEY_LENGTH",
    "KEY_SIZE",
    "EntropyUnavailable",
    "InvalidEncoding",
    "InvalidKeyLength",
    "WireGuardKeyError",
    "WireGuardKeyPair",
    "decode_key",
    "derive_public_key",
    "encode_key",
    "generate_private_key",
    "generate_wireguard_keypair",
    "validate_public_key",
    "verify_keypair",
]
