"""
Pydantic schemas for the KeySwitch view API.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from mechdex.models import KeySwitch


class KeySwitchSchema(BaseModel):
    id: Optional[str] = None
    switch_name: Optional[str] = None
    switch_type: Optional[str] = None
    company: Optional[str] = None
    actuation_force: Optional[str] = None
    switch_travel: Optional[str] = None

    @classmethod
    def from_record(cls, key_switch: KeySwitch) -> "KeySwitchSchema":
        return cls(**key_switch.as_dict())

    def to_record(self) -> KeySwitch:
        return KeySwitch(**self.model_dump())


class MessageSchema(BaseModel):
    severity: Literal["info", "error"]
    summary: str
    detail: Optional[str] = None


class ViewStateRequest(BaseModel):
    selected: Optional[KeySwitchSchema] = None


class ViewStateResponse(BaseModel):
    key_switches: list[KeySwitchSchema]
    selected: Optional[KeySwitchSchema] = None
    messages: list[MessageSchema] = Field(default_factory=list)
    updates: list[str] = Field(default_factory=list)
