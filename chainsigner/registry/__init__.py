"""Type registries used for address equality and payload encoding."""

from ..registry.base import TypeRegistry
from ..registry.default import DefaultRegistry

__all__ = ["TypeRegistry", "DefaultRegistry"]
