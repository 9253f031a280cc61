"""Grammar checks for keys and addresses."""

import re

PRIVATE_KEY_PATTERN = re.compile(r"^(0[xX])?[0-9a-fA-F]{64}$")
ADDRESS_PATTERN = re.compile(r"^[0-9a-fA-F]{40}$")
PUBLIC_KEY_PATTERN = re.compile(r"^(0[xX])?0[23][0-9a-fA-F]{64}$")
HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")


def is_private_key(value: str) -> bool:
    """Check for 64 hex characters, optionally prefixed with ``0x``."""
    return PRIVATE_KEY_PATTERN.fullmatch(value) is not None


def is_address(value: str) -> bool:
    """Check for exactly 40 hex characters (no prefix)."""
    return ADDRESS_PATTERN.fullmatch(value) is not None


def is_public_key(value: str) -> bool:
    """Check for a compressed public key: ``02``/``03`` followed by 32 bytes."""
    return PUBLIC_KEY_PATTERN.fullmatch(value) is not None


def is_hex(value: str) -> bool:
    """Check for hex digits only: no prefix, separators or whitespace."""
    return HEX_PATTERN.fullmatch(value) is not None
