"""Keyring store and key pairs."""

from ..keyring.pair import KeyPair, derive_pair
from ..keyring.keyring import Keyring, AddressEquals

__all__ = ["KeyPair", "Keyring", "AddressEquals", "derive_pair"]
