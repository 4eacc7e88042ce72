"""In-memory keyring store."""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..constants import DEFAULT_SS58_FORMAT
from ..exceptions import AddressNotFoundError, DuplicateAddressError
from ..keyring.pair import KeyPair, derive_pair
from ..types.common import Address
from ..utils.validation import addresses_equal

__all__ = ["Keyring", "AddressEquals"]

logger = logging.getLogger(__name__)

AddressEquals = Callable[[str, str], bool]


class Keyring:
    """
    Ordered collection of key pairs, looked up by address.

    Lookups compare account ids, not address strings, so an SS58 address
    with a different network prefix or a hex account id finds the same
    pair. A pair whose account id is already stored replaces the stored
    entry only when it holds the same secret key.
    """

    def __init__(
        self,
        ss58_format: int = DEFAULT_SS58_FORMAT,
        address_equals: Optional[AddressEquals] = None,
    ) -> None:
        """
        Initialize keyring.

        Args:
            ss58_format: Network prefix for pairs created by ``add_from_uri``
            address_equals: Address equality rule, defaults to account id comparison
        """
        self.ss58_format = ss58_format
        self._address_equals = address_equals or addresses_equal
        self._pairs: List[KeyPair] = []

    def set_address_equals(self, address_equals: AddressEquals) -> None:
        """Swap the equality rule, e.g. for one supplied by a type registry."""
        self._address_equals = address_equals

    def add_pair(self, pair: KeyPair) -> KeyPair:
        """
        Add a pair to the keyring.

        Args:
            pair: Pair to store

        Returns:
            The stored pair

        Raises:
            DuplicateAddressError: If a different secret is stored at the same account id
        """
        for i, existing in enumerate(self._pairs):
            if existing.account_id != pair.account_id:
                continue
            if not existing.same_secret(pair):
                raise DuplicateAddressError(
                    f"A different key pair is already stored for {pair.address}"
                )
            self._pairs[i] = pair
            logger.debug(f"Replaced key pair {pair.address}")
            return pair

        self._pairs.append(pair)
        logger.debug(f"Added key pair {pair.address}")
        return pair

    def add_from_uri(self, suri: str, meta: Optional[Dict[str, Any]] = None) -> KeyPair:
        """Derive a pair from a secret URI and add it."""
        return self.add_pair(derive_pair(suri, ss58_format=self.ss58_format, meta=meta))

    def get_pairs(self) -> List[KeyPair]:
        """Snapshot of all pairs in insertion order."""
        return list(self._pairs)

    def find_by_address(self, address: str) -> KeyPair:
        """
        Find the pair whose address equals ``address``.

        Raises:
            AddressNotFoundError: If no stored pair matches
        """
        for pair in self._pairs:
            if self._address_equals(pair.address, address):
                return pair
        raise AddressNotFoundError(address)

    get_pair = find_by_address

    def remove_pair(self, address: str) -> KeyPair:
        """
        Remove and return the pair matching ``address``.

        Raises:
            AddressNotFoundError: If no stored pair matches
        """
        pair = self.find_by_address(address)
        self._pairs.remove(pair)
        logger.debug(f"Removed key pair {pair.address}")
        return pair

    def addresses(self) -> List[Address]:
        """Addresses of all pairs in insertion order."""
        return [pair.address for pair in self._pairs]

    def __contains__(self, address: object) -> bool:
        if not isinstance(address, str):
            return False
        return any(self._address_equals(pair.address, address) for pair in self._pairs)

    def __iter__(self) -> Iterator[KeyPair]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"Keyring(pairs={len(self._pairs)}, ss58_format={self.ss58_format})"
