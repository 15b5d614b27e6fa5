"""
Named attribute functions over Vana'diel instants.

Each attribute maps an Instant to a flat dict of fields; info() and the
`vanatime info` command merge the dicts of the requested names in order.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Sequence

if TYPE_CHECKING:
    from ..core.instant import Instant

AttrFunc = Callable[["Instant"], Dict[str, Any]]
_ATTRIBUTES: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    """Add or replace the attribute called name."""
    _ATTRIBUTES[name] = fn

def list_attributes() -> List[str]:
    return sorted(_ATTRIBUTES)

def compute_attributes(t: "Instant", names: Sequence[str]) -> Dict[str, Any]:
    unknown = [n for n in names if n not in _ATTRIBUTES]
    if unknown:
        raise KeyError(f"Unknown attribute(s) {unknown}. Available: {list_attributes()}")
    fields: Dict[str, Any] = {}
    for name in names:
        fields.update(_ATTRIBUTES[name](t))
    return fields
