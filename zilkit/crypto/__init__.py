"""Key and address derivation.

Pure functions; safe to call from any thread.
"""

from zilkit.crypto.address import (
    get_address_from_public_key,
    is_valid_checksum_address,
    to_checksum_address,
)
from zilkit.crypto.keys import (
    generate_private_key,
    get_public_key_from_private_key,
    normalize_private_key,
)
from zilkit.crypto.validation import is_address, is_private_key, is_public_key

__all__ = [
    "generate_private_key",
    "get_address_from_public_key",
    "get_public_key_from_private_key",
    "is_address",
    "is_private_key",
    "is_public_key",
    "is_valid_checksum_address",
    "normalize_private_key",
    "to_checksum_address",
]
