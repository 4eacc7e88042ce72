"""Signer protocol implementation backed by an in-memory keyring."""

import logging
import threading
from typing import Any, Iterable, List, Mapping, Optional, Union

from .constants import DEFAULT_SS58_FORMAT
from .keyring import KeyPair, Keyring
from .provisioner import AccountProvisioner
from .registry import DefaultRegistry, TypeRegistry
from .types.config import AccountSpec, RawAccountSpec, parse_account_specs
from .types.signer import SignerPayloadJSON, SignerPayloadRaw, SignerResult
from .utils.encoding import bytes_to_hex, to_bytes

__all__ = ["Signer", "RequestCounter"]

logger = logging.getLogger(__name__)


class RequestCounter:
    """Thread-safe monotonic request id source; the first id is 1."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Last id handed out (0 before the first request)."""
        return self._value

    def next(self) -> int:
        with self._lock:
            self._value += 1
            return self._value


class Signer:
    """
    Wallet-style signer over a keyring.

    Exposes ``sign_raw`` and ``sign_payload``. Both resolve the signing
    pair by address through the registry's account id equality and tag
    results with ids from one shared counter.

    Example:
        >>> signer = Signer(DefaultRegistry(), ["//Alice", "//Bob"])
        >>> signer.setup()
        >>> result = await signer.sign_raw({"address": address, "data": "0x1234"})
    """

    def __init__(
        self,
        registry: Optional[TypeRegistry] = None,
        config: Optional[Iterable[RawAccountSpec]] = None,
        ss58_format: int = DEFAULT_SS58_FORMAT,
    ) -> None:
        """
        Initialize signer.

        Args:
            registry: Type registry (default: DefaultRegistry)
            config: Ordered account config entries
            ss58_format: Network prefix for stored pairs
        """
        self._keyring = Keyring(ss58_format=ss58_format)
        self._counter = RequestCounter()
        self._lock = threading.Lock()
        self._registry: TypeRegistry = DefaultRegistry(ss58_format)
        self._config: List[AccountSpec] = []
        self.init(registry or self._registry, config)

    @property
    def keyring(self) -> Keyring:
        return self._keyring

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def config(self) -> List[AccountSpec]:
        return list(self._config)

    @property
    def last_request_id(self) -> int:
        return self._counter.value

    def init(
        self,
        registry: TypeRegistry,
        config: Optional[Iterable[RawAccountSpec]] = None,
    ) -> None:
        """
        Attach a registry and parse the account config.

        Raises:
            AccountConfigError: If a config entry has the wrong shape
        """
        self._config = parse_account_specs(config)
        self._registry = registry
        self._keyring.set_address_equals(registry.account_id_equals)

    def setup(self) -> None:
        """
        Provision the configured accounts into the keyring.

        Must complete before signing starts.

        Raises:
            InvalidSecretError: If an account cannot be derived
        """
        AccountProvisioner(self._keyring).provision(self._config)
        logger.info(f"Signer ready with {len(self._keyring)} key pairs")

    def get_pairs(self) -> List[KeyPair]:
        return self._keyring.get_pairs()

    def add_pair(self, pair: KeyPair) -> KeyPair:
        return self._keyring.add_pair(pair)

    def find_keyring_pair(self, address: str) -> KeyPair:
        """
        Resolve an address to its pair.

        Raises:
            AddressNotFoundError: If no pair matches
        """
        return self._keyring.find_by_address(address)

    async def sign_raw(
        self,
        raw: Union[SignerPayloadRaw, Mapping[str, Any]]
    ) -> SignerResult:
        """
        Sign raw bytes.

        Args:
            raw: ``{address, data}`` where data is bytes, 0x-hex or text

        Returns:
            Result with the next request id and the hex signature

        Raises:
            AddressNotFoundError: If no pair matches the address
            PairLockedError: If the pair is locked
        """
        raw = SignerPayloadRaw.from_dict(raw)
        with self._lock:
            pair = self.find_keyring_pair(raw.address)
            signature = pair.sign(to_bytes(raw.data))
            request_id = self._counter.next()

        logger.debug(f"Signed raw request {request_id} for {pair.address}")
        return SignerResult(id=request_id, signature=bytes_to_hex(signature))

    async def sign_payload(
        self,
        payload: Union[SignerPayloadJSON, Mapping[str, Any]]
    ) -> SignerResult:
        """
        Sign an extrinsic payload.

        The payload is encoded by the registry for its declared version;
        registry failures propagate unchanged.

        Args:
            payload: Structured payload with ``address`` and ``version``

        Returns:
            Result with the next request id and the registry's signed structure

        Raises:
            AddressNotFoundError: If no pair matches the address
            RegistryError: If the payload cannot be encoded
        """
        payload = SignerPayloadJSON.from_dict(payload)
        with self._lock:
            pair = self.find_keyring_pair(payload.address)
        data = await self._registry.signing_payload(payload, version=payload.version)

        with self._lock:
            signature = pair.sign(data, with_type=True)
            request_id = self._counter.next()

        signed = self._registry.signed_payload(payload, signature)
        logger.debug(f"Signed payload request {request_id} for {pair.address}")
        return SignerResult(
            id=request_id,
            signature=signed["signature"],
            signed_transaction=signed.get("signedTransaction"),
        )

    def __repr__(self) -> str:
        return f"Signer(registry={self._registry!r}, pairs={len(self._keyring)})"
