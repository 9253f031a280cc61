"""Private key normalization, public key derivation and key generation."""

from eth_account import Account
from eth_keys import keys
from eth_keys.constants import SECPK1_N

from zilkit.crypto.validation import is_hex, is_private_key
from zilkit.exceptions import CurveError, HexDecodeError, IncorrectPrivateKeyError


def decode_hex(value: str) -> bytes:
    """Decode a hex string, raising HexDecodeError on malformed input."""
    if not is_hex(value):
        raise HexDecodeError(f"Invalid hex payload: {value!r}")

    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise HexDecodeError(f"Invalid hex payload: {e}") from e


def normalize_private_key(private_key: str) -> str:
    """Return the canonical form of a private key.

    The canonical form is 64 lowercase hex characters without ``0x``.

    Raises:
        IncorrectPrivateKeyError: If the key is not 64 hex characters.
    """
    if not is_private_key(private_key):
        raise IncorrectPrivateKeyError()

    return private_key.lower().removeprefix("0x")


def get_public_key_from_private_key(private_key: str) -> str:
    """Derive the compressed secp256k1 public key of a private key.

    Args:
        private_key: Hex private key (with or without 0x prefix).

    Returns:
        Compressed public key as 66 lowercase hex characters.

    Raises:
        IncorrectPrivateKeyError: If the key fails the grammar check.
        HexDecodeError: If the key cannot be hex-decoded.
        CurveError: If the scalar is zero or not below the group order.
    """
    secret = decode_hex(normalize_private_key(private_key))

    scalar = int.from_bytes(secret, "big")
    if not 0 < scalar < SECPK1_N:
        raise CurveError("Private key scalar is out of range for secp256k1")

    public_key = keys.PrivateKey(secret).public_key
    return public_key.to_compressed_bytes().hex()


def generate_private_key() -> str:
    """Generate a new random private key in canonical form."""
    # HexBytes.hex() carries a 0x prefix on older releases only
    return normalize_private_key(Account.create().key.hex())
