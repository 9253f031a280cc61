"""Abstract base class defining the RPC provider interface."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from zilkit.exceptions import TransportError
from zilkit.models import BalanceResponse, RPCMethod


class BaseProvider(ABC):
    """Abstract base class for node RPC transports.

    The wallet only depends on this interface. Implementations decide on
    connection handling, timeouts and retries.
    """

    @abstractmethod
    async def send(self, method: str, params: list[Any]) -> Any:
        """Send a JSON-RPC request and return its ``result`` member.

        Args:
            method: RPC method name.
            params: Positional parameters.

        Returns:
            The decoded ``result`` value.

        Raises:
            TransportError: If the request fails or the node reports an error.
        """
        raise NotImplementedError

    async def get_balance(self, address: str) -> BalanceResponse:
        """Fetch balance and nonce of an account.

        Args:
            address: Account address.

        Returns:
            BalanceResponse with the balance and last used nonce.

        Raises:
            TransportError: If the request fails or the result is malformed.
        """
        result = await self.send(RPCMethod.GET_BALANCE.value, [address])
        try:
            return BalanceResponse.model_validate(result)
        except ValidationError as e:
            raise TransportError(f"Malformed GetBalance result: {e}") from e
