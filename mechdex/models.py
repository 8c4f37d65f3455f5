"""
Domain records for the KeySwitch catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

# Attribute name -> field name used in the stored JSON documents.
WIRE_FIELDS = {
    "switch_name": "switchName",
    "switch_type": "switchType",
    "company": "company",
    "actuation_force": "actuationForce",
    "switch_travel": "switchTravel",
}


def _as_text(value: Any) -> Optional[str]:
    # Values written by other clients are not guaranteed to be strings.
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


@dataclass
class KeySwitch:
    id: Optional[str] = None
    switch_name: Optional[str] = None
    switch_type: Optional[str] = None
    company: Optional[str] = None
    actuation_force: Optional[str] = None
    switch_travel: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        """True until the store has assigned an id."""
        return self.id is None

    def to_payload(self) -> dict:
        """Return the request body for the store. The id is never included."""
        return {wire: getattr(self, attr) for attr, wire in WIRE_FIELDS.items()}

    @classmethod
    def from_payload(
        cls, data: Optional[dict[str, Any]], key_switch_id: Optional[str] = None
    ) -> "KeySwitch":
        data = data or {}
        values = {
            attr: _as_text(data.get(wire)) for attr, wire in WIRE_FIELDS.items()
        }
        return cls(id=key_switch_id, **values)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "switch_name": self.switch_name,
            "switch_type": self.switch_type,
            "company": self.company,
            "actuation_force": self.actuation_force,
            "switch_travel": self.switch_travel,
        }
