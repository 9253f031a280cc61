"""Tests for Account."""

import dataclasses

import pytest

from zilkit.crypto.validation import is_private_key
from zilkit.exceptions import IncorrectPrivateKeyError
from zilkit.models import Transaction
from zilkit.signers import Account

PRIVATE_KEY = "d96e9eb5b782a80ea153c937fa83e5948485fbfc8b7e7c069d7b914dbc350aba"
PUBLIC_KEY = "03bfad0f0b53cff5213b5947f3ddd66acee8906aba3610c111915aecc84092e052"
ADDRESS = "0x381f4008505e940AD7681EC3468a719060caF796"


@pytest.fixture
def account() -> Account:
    """Create the account of the known test key."""
    return Account.from_private_key(PRIVATE_KEY)


@pytest.fixture
def transfer() -> Transaction:
    """Create an unsigned transfer."""
    return Transaction(
        version=65537,
        nonce=3,
        to_addr="0x11223344556677889900AabbccdDeefF11223344",
        amount=1_000_000_000_000,
        gas_price=2_000_000_000,
        gas_limit=50,
    )


class TestAccountCreation:
    """Tests for building accounts."""

    def test_from_private_key(self, account: Account) -> None:
        """Test the derivation chain of a known key."""
        assert account.private_key == PRIVATE_KEY
        assert account.public_key == PUBLIC_KEY
        assert account.address == ADDRESS

    def test_from_prefixed_key(self) -> None:
        """Test the stored private key is normalized."""
        account = Account.from_private_key(f"0x{PRIVATE_KEY.upper()}")
        assert account.private_key == PRIVATE_KEY
        assert account.address == ADDRESS

    def test_invalid_key(self) -> None:
        """Test invalid keys are rejected."""
        with pytest.raises(IncorrectPrivateKeyError):
            Account.from_private_key("0x1234")

    def test_create(self) -> None:
        """Test a generated account is consistent with its key."""
        account = Account.create()
        assert is_private_key(account.private_key)
        assert Account.from_private_key(account.private_key) == account

    def test_repr_hides_private_key(self, account: Account) -> None:
        """Test the private key never appears in repr."""
        assert PRIVATE_KEY not in repr(account)
        assert ADDRESS in repr(account)

    def test_immutable(self, account: Account) -> None:
        """Test accounts cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            account.address = "0x0"  # type: ignore[misc]

    def test_short_address(self, account: Account) -> None:
        """Test short address formatting."""
        assert account.short_address == "0x381f...F796"


class TestAccountSigning:
    """Tests for transaction signing."""

    def test_sign_sets_pub_key_and_signature(
        self, account: Account, transfer: Transaction
    ) -> None:
        """Test a signed copy carries the signer's key and a signature."""
        signed = account.sign_transaction(transfer)

        assert signed.is_signed
        assert signed.pub_key == PUBLIC_KEY
        assert len(signed.signature or "") == 130  # 65 bytes
        assert signed.nonce == transfer.nonce
        assert signed.amount == transfer.amount

    def test_sign_does_not_mutate_input(
        self, account: Account, transfer: Transaction
    ) -> None:
        """Test the original transaction stays unsigned."""
        account.sign_transaction(transfer)
        assert transfer.signature is None
        assert transfer.pub_key is None

    def test_signature_verifies(self, account: Account, transfer: Transaction) -> None:
        """Test the signer can verify its own signature."""
        signed = account.sign_transaction(transfer)
        assert account.verify_transaction(signed) is True

    def test_tampered_transaction_fails(
        self, account: Account, transfer: Transaction
    ) -> None:
        """Test changing a signed field breaks verification."""
        signed = account.sign_transaction(transfer)
        tampered = signed.model_copy(update={"amount": signed.amount + 1})
        assert account.verify_transaction(tampered) is False

    def test_other_account_fails(self, account: Account, transfer: Transaction) -> None:
        """Test another account does not accept the signature."""
        signed = account.sign_transaction(transfer)
        assert Account.create().verify_transaction(signed) is False

    def test_unsigned_or_garbage_fails(
        self, account: Account, transfer: Transaction
    ) -> None:
        """Test unsigned and malformed signatures are rejected."""
        assert account.verify_transaction(transfer) is False

        garbage = transfer.model_copy(update={"pub_key": PUBLIC_KEY, "signature": "zz"})
        assert account.verify_transaction(garbage) is False

        short = transfer.model_copy(update={"pub_key": PUBLIC_KEY, "signature": "00" * 10})
        assert account.verify_transaction(short) is False

    def test_resigning_replaces_signature(
        self, account: Account, transfer: Transaction
    ) -> None:
        """Test signing ignores any existing signature."""
        signed = account.sign_transaction(transfer)
        resigned = account.sign_transaction(signed)
        assert account.verify_transaction(resigned) is True
