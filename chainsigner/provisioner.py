"""Account provisioning: populate a keyring from account configuration."""

import logging
from typing import Iterable

from .exceptions import CryptoError, InvalidSecretError, ValidationError
from .keyring import Keyring, derive_pair
from .types.config import AccountSpec, HDSpec, SimpleURI

__all__ = ["AccountProvisioner"]


class AccountProvisioner:
    """
    Drives the derivation engine over a list of account specs.

    Specs are processed in order and provisioning stops at the first
    failure. Pairs added by earlier specs stay in the keyring.

    Provisioning must finish before any signing request is issued; this
    is not enforced here.
    """

    def __init__(self, keyring: Keyring) -> None:
        self.keyring = keyring
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def provision(self, specs: Iterable[AccountSpec]) -> None:
        """
        Derive and store the pairs described by ``specs``.

        Raises:
            InvalidSecretError: If a URI or mnemonic cannot be derived
        """
        before = len(self.keyring)
        for spec in specs:
            if isinstance(spec, SimpleURI):
                self._provision_uri(spec)
            elif isinstance(spec, HDSpec):
                if not self._provision_hd(spec):
                    break
            else:
                raise TypeError(f"Unsupported account spec: {type(spec).__name__}")

        self._logger.info(f"Provisioned {len(self.keyring) - before} key pairs")

    def _provision_uri(self, spec: SimpleURI) -> None:
        try:
            pair = derive_pair(
                spec.uri,
                ss58_format=self.keyring.ss58_format,
                meta={"name": spec.label},
            )
        except (InvalidSecretError, ValidationError, CryptoError) as e:
            raise self._invalid_secret(spec.uri) from e

        pair.keep_unlocked = True
        pair.unlock()
        self.keyring.add_pair(pair)

    def _provision_hd(self, spec: HDSpec) -> bool:
        """
        Provision one HD spec.

        Returns False when the index range is empty, which ends the
        whole provisioning run.
        """
        try:
            root = derive_pair(spec.mnemonic, ss58_format=self.keyring.ss58_format)

            if not spec.path:
                self.keyring.add_pair(root)
                return True

            if spec.initial_index >= spec.count:
                self._logger.warning(
                    f"Empty HD range [{spec.initial_index}, {spec.count}) for path "
                    f"{spec.path}; skipping remaining accounts"
                )
                return False

            for i in range(spec.initial_index, spec.count):
                derived_path = f"{spec.path}/{i}"
                child = root.derive(derived_path)
                child.suri = spec.mnemonic + derived_path
                child.keep_unlocked = True
                child.unlock()
                self.keyring.add_pair(child)
        except (InvalidSecretError, ValidationError, CryptoError) as e:
            raise self._invalid_secret(spec.mnemonic) from e

        return True

    def _invalid_secret(self, secret: str) -> InvalidSecretError:
        error = InvalidSecretError(secret)
        # The message masks the secret, the cause may not
        self._logger.error(error.message)
        return error
