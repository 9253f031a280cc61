"""Domain models for the zilkit toolkit."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from zilkit.crypto.validation import is_public_key

# A nonce of zero means "not assigned yet"; the wallet fills it in.
UNSET_NONCE = 0
MAX_NONCE = 2**64 - 1


class RPCMethod(str, Enum):
    """JSON-RPC method names understood by the node."""

    GET_BALANCE = "GetBalance"


class Transaction(BaseModel):
    """An outgoing transaction.

    Immutable; signing produces a new Transaction with ``pub_key`` and
    ``signature`` set.
    """

    model_config = {"frozen": True}

    version: int = Field(default=0, ge=0, description="Chain id and message version")
    nonce: int = Field(
        default=UNSET_NONCE,
        ge=0,
        le=MAX_NONCE,
        description="Sender sequence number (0 = let the wallet assign it)",
    )
    to_addr: str = Field(default="", description="Recipient address")
    amount: int = Field(default=0, ge=0, description="Amount in the smallest unit")
    gas_price: int = Field(default=0, ge=0)
    gas_limit: int = Field(default=0, ge=0)
    code: str | None = Field(default=None, description="Contract code for deployments")
    data: str | None = Field(default=None, description="Contract call payload")
    priority: bool = False
    pub_key: str | None = Field(default=None, description="Signer public key (hex)")
    signature: str | None = Field(default=None, description="Signature (hex)")

    @field_validator("pub_key")
    @classmethod
    def validate_pub_key(cls, v: str | None) -> str | None:
        """Ensure pub_key is a compressed public key."""
        if v is not None and not is_public_key(v):
            raise ValueError(f"pub_key must be a compressed public key, got {v!r}")
        return v

    @property
    def is_signed(self) -> bool:
        """Whether the transaction carries a signature."""
        return self.signature is not None

    @property
    def has_nonce(self) -> bool:
        """Whether a nonce was set explicitly."""
        return self.nonce != UNSET_NONCE

    def signing_payload(self) -> bytes:
        """Serialize every field except the signature for signing."""
        return self.model_dump_json(exclude={"signature"}).encode("utf-8")


class BalanceResponse(BaseModel):
    """Result of the GetBalance RPC call."""

    model_config = {"coerce_numbers_to_str": True}

    balance: str = Field(..., description="Balance in the smallest unit")
    nonce: int = Field(..., ge=0, description="Last nonce used by the account")
