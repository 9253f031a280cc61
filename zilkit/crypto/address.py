"""Address derivation and mixed-case checksum encoding.

Each letter of a 40-character hex address is upper- or lowercased
according to a single bit of the SHA-256 digest of the raw address
bytes. The bit for character ``i`` is ``255 - 6 * i``, counted from the
least significant end of the big-endian digest. Digits are left as-is.
"""

import hashlib

from zilkit.crypto.keys import decode_hex
from zilkit.crypto.validation import is_address
from zilkit.exceptions import InvalidAddressError


def to_checksum_address(address: str) -> str:
    """Encode an address in its checksummed form.

    Args:
        address: 40 hex characters, with or without 0x prefix, any case.

    Returns:
        ``0x`` followed by the 40 checksum-cased characters.

    Raises:
        InvalidAddressError: If the address is not 40 hex characters.
    """
    stripped = address.removeprefix("0x")
    if not is_address(stripped):
        raise InvalidAddressError(address)

    digest = hashlib.sha256(decode_hex(stripped.lower())).digest()
    v = int.from_bytes(digest, "big")

    chars = []
    for i, c in enumerate(stripped):
        if c.isdigit():
            chars.append(c)
        elif v & (1 << (255 - 6 * i)):
            chars.append(c.upper())
        else:
            chars.append(c.lower())

    return "0x" + "".join(chars)


def is_valid_checksum_address(address: str) -> bool:
    """Check that an address is exactly its own checksummed form.

    Raises:
        InvalidAddressError: If the address is not 40 hex characters.
    """
    return to_checksum_address(address) == address


def get_address_from_public_key(public_key: str) -> str:
    """Derive the checksummed address of a public key.

    The address is the last 20 bytes of the SHA-256 digest of the
    public key bytes.

    Raises:
        HexDecodeError: If the public key cannot be hex-decoded.
        InvalidAddressError: If the truncated digest is not a valid address.
    """
    normalized = public_key.lower().removeprefix("0x")

    digest = hashlib.sha256(decode_hex(normalized)).hexdigest()
    return to_checksum_address(digest[24:])
