"""Account configuration types for chainsigner."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..constants import DEFAULT_HD_COUNT, DEFAULT_HD_INITIAL_INDEX
from ..exceptions import AccountConfigError

__all__ = [
    "SimpleURI",
    "HDSpec",
    "AccountSpec",
    "RawAccountSpec",
    "parse_account_spec",
    "parse_account_specs",
]


@dataclass(frozen=True)
class SimpleURI:
    """A single account given by its secret URI, e.g. ``//Alice``."""

    uri: str

    @property
    def label(self) -> str:
        """Diagnostic name for the account."""
        return self.uri.replace("//", "_", 1).lower()


@dataclass(frozen=True)
class HDSpec:
    """
    A mnemonic expanded into a range of HD accounts.

    Children are derived at ``path/i`` for ``i`` in
    ``[initial_index, count)``.
    """

    mnemonic: str
    path: Optional[str] = None
    initial_index: int = DEFAULT_HD_INITIAL_INDEX
    count: int = DEFAULT_HD_COUNT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HDSpec":
        """
        Build from a config mapping.

        Accepts both ``initialIndex`` and ``initial_index``.

        Raises:
            AccountConfigError: If a field is missing or has the wrong type
        """
        mnemonic = data.get("mnemonic")
        if not isinstance(mnemonic, str):
            raise AccountConfigError("HD account config requires a 'mnemonic' string")

        path = data.get("path")
        if path is not None and not isinstance(path, str):
            raise AccountConfigError("HD account 'path' must be a string")

        initial_index = data.get("initialIndex", data.get("initial_index"))
        count = data.get("count")

        return cls(
            mnemonic=mnemonic,
            path=path or None,
            initial_index=_index(initial_index, "initialIndex", DEFAULT_HD_INITIAL_INDEX),
            count=_index(count, "count", DEFAULT_HD_COUNT) or DEFAULT_HD_COUNT,
        )


AccountSpec = Union[SimpleURI, HDSpec]
RawAccountSpec = Union[str, Mapping[str, Any], SimpleURI, HDSpec]


def _index(value: Any, name: str, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise AccountConfigError(f"HD account '{name}' must be an integer")
    if value < 0:
        raise AccountConfigError(f"HD account '{name}' must be non-negative")
    return value


def parse_account_spec(raw: RawAccountSpec) -> AccountSpec:
    """
    Turn one raw config entry into a tagged account spec.

    Raises:
        AccountConfigError: If the entry is neither a string nor an HD mapping
    """
    if isinstance(raw, (SimpleURI, HDSpec)):
        return raw
    if isinstance(raw, str):
        return SimpleURI(raw)
    if isinstance(raw, Mapping):
        return HDSpec.from_dict(raw)
    raise AccountConfigError(f"Unsupported account config entry: {type(raw).__name__}")


def parse_account_specs(raw: Optional[Iterable[RawAccountSpec]]) -> List[AccountSpec]:
    """Parse an ordered account list; ``None`` means no accounts."""
    if raw is None:
        return []
    if isinstance(raw, (str, Mapping)):
        raise AccountConfigError("Account config must be a list of entries")
    return [parse_account_spec(entry) for entry in raw]
