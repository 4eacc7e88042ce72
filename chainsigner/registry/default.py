"""Reference type registry."""

from typing import Union

from scalecodec.base import RuntimeConfigurationObject
from scalecodec.type_registry import load_type_registry_preset

from ..constants import DEFAULT_SS58_FORMAT, SUPPORTED_PAYLOAD_VERSIONS
from ..exceptions import RegistryError, ValidationError
from ..registry.base import TypeRegistry
from ..types.common import AccountId
from ..types.signer import SignerPayloadJSON
from ..utils.encoding import hex_to_bytes
from ..utils.validation import decode_account_id

__all__ = ["DefaultRegistry"]


class DefaultRegistry(TypeRegistry):
    """
    Registry for chains using 32-byte account ids and version 4 payloads.

    Payload layout: ``method || era || Compact<Index>(nonce) ||
    Compact<Balance>(tip) || u32(specVersion) || u32(transactionVersion) ||
    H256(genesisHash) || H256(blockHash)``. ``method`` and ``era`` are
    already SCALE encoded by the caller.
    """

    def __init__(self, ss58_format: int = DEFAULT_SS58_FORMAT) -> None:
        super().__init__(ss58_format)
        self._runtime_config = RuntimeConfigurationObject()
        self._runtime_config.update_type_registry(load_type_registry_preset("core"))

    def create_account_id(self, address: Union[str, bytes]) -> AccountId:
        return decode_account_id(address)

    async def encode_payload(self, payload: SignerPayloadJSON, version: int) -> bytes:
        if version not in SUPPORTED_PAYLOAD_VERSIONS:
            raise RegistryError(f"Unsupported extrinsic payload version: {version}")

        try:
            encoded = b"".join([
                hex_to_bytes(payload.method),
                hex_to_bytes(payload.era),
                self._encode("Compact<u64>", _to_int(payload.nonce)),
                self._encode("Compact<u128>", _to_int(payload.tip)),
                self._encode("u32", _to_int(payload.spec_version)),
                self._encode("u32", _to_int(payload.transaction_version)),
                self._encode("H256", _hash(payload.genesis_hash, "genesisHash")),
                self._encode("H256", _hash(payload.block_hash, "blockHash")),
            ])
        except (ValidationError, ValueError, TypeError, OverflowError) as e:
            raise RegistryError(f"Cannot encode payload for {payload.address}: {e}") from e

        self._logger.debug(f"Encoded v{version} payload ({len(encoded)} bytes)")
        return encoded

    def _encode(self, type_string: str, value) -> bytes:
        scale_object = self._runtime_config.create_scale_object(type_string)
        return bytes(scale_object.encode(value).data)


def _to_int(value: Union[int, str]) -> int:
    if isinstance(value, bool):
        raise TypeError("Expected integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value, 16) if value.startswith("0x") else int(value)
    raise TypeError(f"Expected integer or string, got {type(value).__name__}")


def _hash(value: str, name: str) -> str:
    data = hex_to_bytes(value)
    if len(data) != 32:
        raise ValidationError(f"{name} must be 32 bytes, got {len(data)}")
    return "0x" + data.hex()
