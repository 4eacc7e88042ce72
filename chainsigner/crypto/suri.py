"""Secret URI parsing for chainsigner.

A secret URI has the form ``<phrase>(/soft|//hard)*(///password)?``.
The phrase may be omitted, in which case the development phrase is used.
"""

import re
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from substrateinterface.key import DeriveJunction as SubstrateJunction

from ..constants import DEV_PHRASE
from ..exceptions import ValidationError
from ..types.common import ChainCode

__all__ = ["DeriveJunction", "SecretUri", "parse_suri", "parse_derivation_path"]

SURI_PATTERN = re.compile(r"^(?P<phrase>[\w ]+)?(?P<path>(//?[^/]+)*)(///(?P<password>.*))?$")
PATH_PATTERN = re.compile(r"^(//?[^/]+)*$")
JUNCTION_PATTERN = re.compile(r"/(/?)([^/]+)")


@dataclass(frozen=True)
class DeriveJunction:
    """One soft (``/name``) or hard (``//name``) path component."""

    name: str
    hard: bool
    chain_code: ChainCode = field(repr=False)

    @classmethod
    def from_name(cls, name: str, hard: bool) -> "DeriveJunction":
        """
        Build junction from its textual name.

        Numeric names encode as little-endian integers, anything else as a
        SCALE string; long codes are blake2b-256 hashed.
        """
        junction = SubstrateJunction.from_derive_path(name, hard)
        return cls(name=name, hard=hard, chain_code=ChainCode(bytes(junction.chain_code)))

    def __str__(self) -> str:
        return ("//" if self.hard else "/") + self.name


@dataclass(frozen=True)
class SecretUri:
    """Parsed secret URI."""

    phrase: Optional[str]
    junctions: Tuple[DeriveJunction, ...] = ()
    password: Optional[str] = None

    @property
    def effective_phrase(self) -> str:
        """Phrase used for seeding, falling back to the development phrase."""
        return self.phrase if self.phrase else DEV_PHRASE

    @property
    def path(self) -> str:
        return "".join(str(j) for j in self.junctions)

    def join(self, junctions: Tuple[DeriveJunction, ...]) -> "SecretUri":
        """Return a new URI with extra junctions appended to the path."""
        return replace(self, junctions=self.junctions + tuple(junctions))

    def __str__(self) -> str:
        uri = (self.phrase or "") + self.path
        if self.password is not None:
            uri += "///" + self.password
        return uri


def parse_derivation_path(path: str) -> Tuple[DeriveJunction, ...]:
    """
    Parse a bare derivation path such as ``//test/3``.

    Raises:
        ValidationError: If the path is malformed
    """
    if not isinstance(path, str) or not PATH_PATTERN.match(path):
        raise ValidationError(f"Invalid derivation path: {path!r}")
    return tuple(
        DeriveJunction.from_name(name, hard=bool(hard))
        for hard, name in JUNCTION_PATTERN.findall(path)
    )


def parse_suri(suri: str) -> SecretUri:
    """
    Parse a secret URI.

    Args:
        suri: Secret URI string

    Returns:
        Parsed SecretUri

    Raises:
        ValidationError: If the URI does not match the grammar
    """
    if not isinstance(suri, str) or not suri:
        raise ValidationError("Secret URI must be a non-empty string")

    match = SURI_PATTERN.match(suri)
    if match is None:
        raise ValidationError("Secret URI is malformed")

    return SecretUri(
        phrase=match.group("phrase"),
        junctions=parse_derivation_path(match.group("path") or ""),
        password=match.group("password"),
    )
