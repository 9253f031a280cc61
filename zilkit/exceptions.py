"""Custom exceptions for the zilkit account and signing toolkit."""


# =============================================================================
# Crypto Layer Exceptions
# =============================================================================


class CryptoError(Exception):
    """Base exception for key and address derivation errors."""

    pass


class IncorrectPrivateKeyError(CryptoError):
    """Raised when a private key fails the 64-hex-character grammar."""

    def __init__(self, message: str = "Incorrect private key") -> None:
        super().__init__(message)


class InvalidAddressError(CryptoError):
    """Raised when an address fails the 40-hex-character grammar.

    Attributes:
        address: The offending input value.
    """

    def __init__(self, address: str) -> None:
        super().__init__(f"Invalid address: {address}")
        self.address = address


class HexDecodeError(CryptoError):
    """Raised when a hexadecimal payload cannot be decoded."""

    pass


class CurveError(CryptoError):
    """Raised when a scalar is outside the secp256k1 group order."""

    pass


# =============================================================================
# Account Layer Exceptions
# =============================================================================


class AccountError(Exception):
    """Base exception for wallet and account errors."""

    pass


class AccountDoesNotExistError(AccountError):
    """Raised when an address is not held by the wallet.

    Attributes:
        address: The address that was looked up.
    """

    def __init__(self, address: str) -> None:
        super().__init__(f"Account does not exist: {address}")
        self.address = address


class NeitherPubKeyNorDefaultAccountProvidedError(AccountError):
    """Raised when a transaction has no signer and the wallet has no default."""

    def __init__(
        self,
        message: str = "Neither pub key nor default account is provided",
    ) -> None:
        super().__init__(message)


# =============================================================================
# Transport Layer Exceptions
# =============================================================================


class TransportError(Exception):
    """Base exception for RPC transport errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RPCError(TransportError):
    """Raised when the node answers with a JSON-RPC error object.

    Attributes:
        code: JSON-RPC error code reported by the node.
    """

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message, status_code=200)
        self.code = code


class ProviderConnectionError(TransportError):
    """Raised when the node cannot be reached."""

    pass


class ProviderTimeoutError(TransportError):
    """Raised when a request to the node times out."""

    def __init__(self, message: str = "Request timeout") -> None:
        super().__init__(message)
