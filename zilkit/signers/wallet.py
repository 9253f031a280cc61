"""Wallet: a local collection of accounts used to sign transactions."""

from collections.abc import Iterable

from loguru import logger

from zilkit.crypto.address import get_address_from_public_key
from zilkit.crypto.keys import generate_private_key
from zilkit.exceptions import (
    AccountDoesNotExistError,
    NeitherPubKeyNorDefaultAccountProvidedError,
)
from zilkit.interfaces.provider import BaseProvider
from zilkit.models import Transaction
from zilkit.signers.account import Account


class Wallet:
    """Holds accounts keyed by checksummed address and signs transactions.

    The default account is tracked by its address. It is set when the
    first account is added, changed by set_default(), and cleared when
    that account is removed. It is never promoted automatically.

    Not safe for concurrent mutation; confine a wallet to one task or
    guard it externally.

    Usage:
        async with HTTPProvider() as provider:
            wallet = Wallet(provider)
            address = wallet.add_by_private_key(private_key)
            signed = await wallet.sign_transaction(Transaction(to_addr=..., amount=1))
    """

    def __init__(self, provider: BaseProvider) -> None:
        """Initialize an empty wallet.

        Args:
            provider: RPC provider used to look up account nonces.
        """
        self._provider = provider
        self._accounts: dict[str, Account] = {}
        self._default_address: str | None = None

    @classmethod
    def with_accounts(
        cls, accounts: Iterable[Account], provider: BaseProvider
    ) -> "Wallet":
        """Build a wallet from existing accounts.

        The first account becomes the default. A later account with the
        same address replaces the earlier one.
        """
        wallet = cls(provider)
        for account in accounts:
            wallet._insert(account)
        return wallet

    @property
    def provider(self) -> BaseProvider:
        """Get the RPC provider."""
        return self._provider

    @property
    def default_account(self) -> Account | None:
        """Get the account used when a transaction names no signer."""
        if self._default_address is None:
            return None
        return self._accounts[self._default_address]

    @property
    def accounts(self) -> list[Account]:
        """Get all accounts in insertion order."""
        return list(self._accounts.values())

    @property
    def addresses(self) -> list[str]:
        """Get all account addresses in insertion order."""
        return list(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, address: object) -> bool:
        return address in self._accounts

    def get(self, address: str) -> Account | None:
        """Get the account stored at an address, if any."""
        return self._accounts.get(address)

    def _insert(self, account: Account) -> str:
        self._accounts[account.address] = account
        if self._default_address is None:
            self._default_address = account.address
            logger.info("Default account set to {}", account.short_address)
        return account.address

    def create(self) -> str:
        """Generate a new account and add it to the wallet.

        Returns:
            The new account's address.
        """
        return self.add_by_private_key(generate_private_key())

    def add_by_private_key(self, private_key: str) -> str:
        """Add the account derived from a private key.

        An account already stored at the same address is replaced.

        Args:
            private_key: Hex private key (with or without 0x prefix).

        Returns:
            The account's checksummed address.

        Raises:
            IncorrectPrivateKeyError: If the key fails the grammar check.
            CurveError: If the scalar is out of range.
        """
        account = Account.from_private_key(private_key)
        address = self._insert(account)
        logger.info("Added account {}", account.short_address)
        return address

    def remove(self, address: str) -> Account | None:
        """Remove and return the account at an address.

        Returns:
            The removed account, or None if the address is not held.
        """
        account = self._accounts.pop(address, None)
        if account is None:
            return None

        if self._default_address == address:
            self._default_address = None
            logger.info("Default account {} removed", account.short_address)

        logger.info("Removed account {}", account.short_address)
        return account

    def set_default(self, address: str) -> None:
        """Make the account at an address the default.

        Raises:
            AccountDoesNotExistError: If the address is not held.
        """
        if address not in self._accounts:
            raise AccountDoesNotExistError(address)

        self._default_address = address
        logger.info("Default account set to {}", self._accounts[address].short_address)

    async def nonce(self, account: Account) -> int:
        """Fetch the last nonce used by an account.

        Raises:
            TransportError: Propagated unchanged from the provider.
        """
        response = await self._provider.get_balance(account.address)
        return response.nonce

    def _resolve_signer(self, tx: Transaction) -> Account:
        if tx.pub_key is not None:
            address = get_address_from_public_key(tx.pub_key)
            account = self._accounts.get(address)
            if account is None:
                raise AccountDoesNotExistError(address)
            return account

        if self._default_address is not None:
            return self._accounts[self._default_address]

        raise NeitherPubKeyNorDefaultAccountProvidedError()

    async def sign_transaction(self, tx: Transaction) -> Transaction:
        """Sign a transaction with one of the wallet's accounts.

        The signer is the account matching ``tx.pub_key`` if set, else the
        default account. A nonce of 0 is replaced by the signer's last
        nonce plus one, fetched from the provider.

        Returns:
            A signed copy of the transaction.

        Raises:
            AccountDoesNotExistError: If ``tx.pub_key`` names an account not held.
            NeitherPubKeyNorDefaultAccountProvidedError: If no signer can be resolved.
            TransportError: If the nonce lookup fails.
        """
        account = self._resolve_signer(tx)

        if not tx.has_nonce:
            nonce = await self.nonce(account) + 1
            logger.debug("Assigned nonce {} for {}", nonce, account.short_address)
            tx = tx.model_copy(update={"nonce": nonce})

        return account.sign_transaction(tx)
