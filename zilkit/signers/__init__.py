"""Account and wallet signers.

Provides account derivation and transaction signing.
"""

from zilkit.signers.account import Account
from zilkit.signers.wallet import Wallet

__all__ = ["Account", "Wallet"]
