"""zilkit: account derivation, checksummed addresses and wallet signing."""

__version__ = "0.1.0"
