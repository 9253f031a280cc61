"""Accounts: key material plus transaction signing."""

import hashlib
from dataclasses import dataclass, field

from eth_keys import keys
from eth_keys.exceptions import BadSignature, ValidationError

from zilkit.crypto.address import get_address_from_public_key
from zilkit.crypto.keys import (
    decode_hex,
    generate_private_key,
    get_public_key_from_private_key,
    normalize_private_key,
)
from zilkit.exceptions import HexDecodeError
from zilkit.models import Transaction


@dataclass(frozen=True)
class Account:
    """A private key with its derived public key and checksummed address."""

    address: str
    public_key: str
    private_key: str = field(repr=False)  # canonical hex, no 0x prefix

    @classmethod
    def from_private_key(cls, private_key: str) -> "Account":
        """Build an account from a raw private key.

        Args:
            private_key: Hex private key (with or without 0x prefix, any case).

        Raises:
            IncorrectPrivateKeyError: If the key fails the grammar check.
            CurveError: If the scalar is out of range.
        """
        normalized = normalize_private_key(private_key)
        public_key = get_public_key_from_private_key(normalized)
        return cls(
            address=get_address_from_public_key(public_key),
            public_key=public_key,
            private_key=normalized,
        )

    @classmethod
    def create(cls) -> "Account":
        """Build an account from a freshly generated private key."""
        return cls.from_private_key(generate_private_key())

    @property
    def short_address(self) -> str:
        """Return shortened address for display (0x1234...5678)."""
        return f"{self.address[:6]}...{self.address[-4:]}"

    def _signing_key(self) -> keys.PrivateKey:
        return keys.PrivateKey(decode_hex(self.private_key))

    def sign_transaction(self, tx: Transaction) -> Transaction:
        """Sign a transaction with this account's key.

        The returned copy carries this account's public key and a hex
        signature over the SHA-256 digest of its signing payload.
        """
        unsigned = tx.model_copy(update={"pub_key": self.public_key, "signature": None})
        msg_hash = hashlib.sha256(unsigned.signing_payload()).digest()
        signature = self._signing_key().sign_msg_hash(msg_hash)
        return unsigned.model_copy(update={"signature": signature.to_bytes().hex()})

    def verify_transaction(self, tx: Transaction) -> bool:
        """Check that a transaction was signed by this account."""
        if tx.signature is None or tx.pub_key != self.public_key:
            return False

        try:
            signature = keys.Signature(decode_hex(tx.signature))
        except (HexDecodeError, ValidationError, BadSignature):
            return False

        msg_hash = hashlib.sha256(tx.signing_payload()).digest()
        return signature.verify_msg_hash(msg_hash, self._signing_key().public_key)
