"""Type registry interface for chainsigner."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Union
import logging

from ..constants import DEFAULT_SS58_FORMAT, PAYLOAD_HASH_THRESHOLD
from ..exceptions import ValidationError
from ..types.common import AccountId
from ..types.signer import SignerPayloadJSON
from ..utils.encoding import blake2_256, bytes_to_hex

__all__ = ["TypeRegistry"]

logger = logging.getLogger(__name__)


class TypeRegistry(ABC):
    """
    Abstract type registry.

    The registry owns the chain's type knowledge: how an address maps to
    an account id, and how an extrinsic payload is encoded for signing.
    The signer only consumes these two capabilities.
    """

    def __init__(self, ss58_format: int = DEFAULT_SS58_FORMAT) -> None:
        """
        Initialize registry.

        Args:
            ss58_format: Network prefix of the chain
        """
        self.ss58_format = ss58_format
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def create_account_id(self, address: Union[str, bytes]) -> AccountId:
        """
        Decode an address to the chain's account id.

        Raises:
            ValidationError: If the address cannot be decoded
        """
        raise NotImplementedError

    def account_id_equals(self, a: Union[str, bytes], b: Union[str, bytes]) -> bool:
        """
        Compare two addresses the way the chain's AccountId type does.

        Returns False when either side cannot be decoded.
        """
        try:
            return self.create_account_id(a) == self.create_account_id(b)
        except ValidationError:
            return False

    @abstractmethod
    async def encode_payload(self, payload: SignerPayloadJSON, version: int) -> bytes:
        """
        Encode an extrinsic payload.

        Args:
            payload: Payload to encode
            version: Extrinsic protocol version

        Returns:
            Encoded payload bytes

        Raises:
            RegistryError: If the payload or version cannot be encoded
        """
        raise NotImplementedError

    async def signing_payload(self, payload: SignerPayloadJSON, version: int) -> bytes:
        """Bytes to sign: the encoded payload, hashed when longer than 256 bytes."""
        encoded = await self.encode_payload(payload, version)
        if len(encoded) > PAYLOAD_HASH_THRESHOLD:
            return blake2_256(encoded)
        return encoded

    def signed_payload(self, payload: SignerPayloadJSON, signature: bytes) -> Dict[str, Any]:
        """
        Build the signed-payload structure returned to the caller.

        Subclasses may attach extra metadata next to the signature.
        """
        return {"signature": bytes_to_hex(signature)}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(ss58_format={self.ss58_format})"
