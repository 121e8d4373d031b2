"""Data models for component, condition and pack identifiers."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

DEFAULT_CONDITION_TAG = "require"


class VariantOwner(Enum):
    """Segment that supplied the Cvariant of a decomposed component id."""
    NONE = "none"
    GROUP = "group"
    SUB = "sub"


@dataclass(frozen=True)
class ComponentDescriptor:
    """Attribute source for a component or condition.

    Any object exposing the same attribute names can be passed to the codec.
    """
    vendor: str = ""
    cclass: str = ""
    bundle: str = ""
    group: str = ""
    sub: str = ""
    variant: str = ""
    version: str = ""
    tag: str = DEFAULT_CONDITION_TAG


@dataclass(frozen=True)
class PackDescriptor:
    """Attribute source for a software pack."""
    vendor: str = ""
    name: str = ""
    version: str = ""


@dataclass(frozen=True)
class ComponentAttributes:
    """Result of decomposing a component identifier.

    ``None`` marks an attribute that the identifier did not carry at all.
    """
    cvendor: Optional[str] = None
    cclass: Optional[str] = None
    cbundle: Optional[str] = None
    cgroup: Optional[str] = None
    csub: Optional[str] = None
    cvariant: Optional[str] = None
    cversion: Optional[str] = None
    variant_owner: VariantOwner = VariantOwner.NONE
    ambiguous_variant: bool = False

    def as_dict(self) -> Dict[str, str]:
        """Return the attribute map keyed by the descriptor attribute names."""
        pairs = (
            ("Cvendor", self.cvendor),
            ("Cclass", self.cclass),
            ("Cbundle", self.cbundle),
            ("Cgroup", self.cgroup),
            ("Csub", self.csub),
            ("Cvariant", self.cvariant),
            ("Cversion", self.cversion),
        )
        return {key: value for key, value in pairs if value is not None}
