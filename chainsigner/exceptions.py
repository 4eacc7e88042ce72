"""chainsigner exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "ChainSignerError",
    "ValidationError",
    "AccountConfigError",
    "CryptoError",
    "InvalidSecretError",
    "KeyringError",
    "AddressNotFoundError",
    "DuplicateAddressError",
    "PairLockedError",
    "RegistryError",
]


class ChainSignerError(Exception):
    """Base exception for all chainsigner errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(ChainSignerError):
    """Raised when validation fails."""
    pass


class AccountConfigError(ValidationError):
    """Raised when an account configuration entry has the wrong shape."""
    pass


class CryptoError(ChainSignerError):
    """Raised when cryptographic operation fails."""
    pass


class InvalidSecretError(ChainSignerError):
    """Raised when a secret URI or mnemonic cannot be turned into a key pair."""

    def __init__(self, uri: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Invalid secret URI or mnemonic: {_mask(uri)}"
        super().__init__(message, code=1, data={"uri": uri})
        self.uri = uri


class KeyringError(ChainSignerError):
    """Raised when a keyring operation fails."""
    pass


class AddressNotFoundError(KeyringError):
    """Raised when no key pair in the keyring matches an address."""

    def __init__(self, address: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Can't find the keyring pair for {address}"
        super().__init__(message, code=2, data={"address": address})
        self.address = address


class DuplicateAddressError(KeyringError):
    """Raised when a different secret is added under an existing address."""
    pass


class PairLockedError(KeyringError):
    """Raised when signing with a locked key pair."""
    pass


class RegistryError(ChainSignerError):
    """Raised when the type registry cannot encode a payload."""
    pass


def _mask(uri: str) -> str:
    # Keep the derivation path readable, hide the phrase or seed and the password
    if not isinstance(uri, str):
        return f"<{type(uri).__name__}>"
    phrase, sep, rest = uri.partition("/")
    if phrase:
        phrase = "0x****" if phrase.startswith("0x") else "****"
    path, password_sep, _ = (sep + rest).partition("///")
    return phrase + path + ("///****" if password_sep else "")
