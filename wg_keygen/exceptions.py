class WireGuardKeyError(Exception):
    """Base class for WireGuard key errors."""

    code = "wireguard_key_error"


class InvalidEncoding(WireGuardKeyError, ValueError):
    """The key string is not valid standard base64."""

    code = "invalid_encoding"


class InvalidKeyLength(WireGuardKeyError, ValueError):
    """The decoded key is not exactly the expected number of bytes."""

    code = "invalid_key_length"

    def __init__(self, length: int, expected: int = 32):
        self.length = length
        self.expected = expected
        super().__init__(f"Key must be {expected} bytes long, got {length}")


class EntropyUnavailable(WireGuardKeyError, RuntimeError):
    """The operating system's secure random source could not be read."""

    code = "entropy_unavailable"
