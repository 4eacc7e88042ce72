"""Signer protocol types for chainsigner."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from ..exceptions import ValidationError
from ..types.common import BytesLike, HexStr

__all__ = [
    "SignerPayloadRaw",
    "SignerPayloadJSON",
    "SignerResult",
]


@dataclass(frozen=True)
class SignerPayloadRaw:
    """Request to sign arbitrary bytes."""

    address: str
    data: BytesLike
    type: str = "bytes"

    @classmethod
    def from_dict(cls, data: Union["SignerPayloadRaw", Mapping[str, Any]]) -> "SignerPayloadRaw":
        if isinstance(data, SignerPayloadRaw):
            return data
        try:
            return cls(address=data["address"], data=data["data"], type=data.get("type", "bytes"))
        except (KeyError, TypeError) as e:
            raise ValidationError(f"Raw signer payload requires 'address' and 'data': {e}") from e


# camelCase wire name -> attribute name
_PAYLOAD_FIELDS = {
    "address": "address",
    "blockHash": "block_hash",
    "blockNumber": "block_number",
    "era": "era",
    "genesisHash": "genesis_hash",
    "method": "method",
    "nonce": "nonce",
    "signedExtensions": "signed_extensions",
    "specVersion": "spec_version",
    "tip": "tip",
    "transactionVersion": "transaction_version",
    "version": "version",
}


@dataclass(frozen=True)
class SignerPayloadJSON:
    """
    Structured extrinsic payload as handed over by a transaction layer.

    Numeric fields may be ints or 0x-hex strings; hashes, era and method
    are 0x-hex strings. Unknown wire fields are kept in ``extra``.
    """

    address: str
    version: int
    method: HexStr = HexStr("0x")
    era: HexStr = HexStr("0x00")
    nonce: Union[int, str] = 0
    tip: Union[int, str] = 0
    spec_version: Union[int, str] = 0
    transaction_version: Union[int, str] = 0
    genesis_hash: HexStr = HexStr("0x" + "00" * 32)
    block_hash: HexStr = HexStr("0x" + "00" * 32)
    block_number: Union[int, str] = 0
    signed_extensions: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Union["SignerPayloadJSON", Mapping[str, Any]]) -> "SignerPayloadJSON":
        """
        Build from a camelCase (or snake_case) mapping.

        Raises:
            ValidationError: If address or version is missing
        """
        if isinstance(data, SignerPayloadJSON):
            return data
        if not isinstance(data, Mapping):
            raise ValidationError(f"Signer payload must be a mapping, got {type(data).__name__}")

        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        attributes = set(_PAYLOAD_FIELDS.values())
        for key, value in data.items():
            if key in _PAYLOAD_FIELDS:
                kwargs[_PAYLOAD_FIELDS[key]] = value
            elif key in attributes:
                kwargs[key] = value
            else:
                extra[key] = value

        if "address" not in kwargs or "version" not in kwargs:
            raise ValidationError("Signer payload requires 'address' and 'version'")

        version = kwargs["version"]
        if isinstance(version, str):
            try:
                version = int(version, 16) if version.startswith("0x") else int(version)
            except ValueError as e:
                raise ValidationError(f"Invalid payload version: {version!r}") from e
        kwargs["version"] = version

        return cls(extra=extra, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """camelCase wire representation."""
        result = {wire: getattr(self, attr) for wire, attr in _PAYLOAD_FIELDS.items()}
        result.update(self.extra)
        return result


@dataclass(frozen=True)
class SignerResult:
    """Result of one signing request."""

    id: int
    signature: HexStr
    signed_transaction: Optional[HexStr] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"id": self.id, "signature": self.signature}
        if self.signed_transaction is not None:
            result["signedTransaction"] = self.signed_transaction
        return result
