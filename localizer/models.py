from __future__ import annotations

from typing import Dict, Optional
from pydantic import BaseModel, Field, StrictStr


# Wire shapes of a translation document. Field names are significant:
# producers disagree on casing, so both spellings are modelled.

class KeyValueEntry(BaseModel):
    key: StrictStr
    value: StrictStr


class CapitalizedKeyValueEntry(BaseModel):
    Key: StrictStr
    Value: StrictStr


# API envelopes

class NormalizeReport(BaseModel):
    shape: str
    encoding: Optional[str] = Field(default=None, examples=["utf_8"])
    entries: int = 0
    keys: int = 0
    collisions: int = 0


class NormalizeResponse(BaseModel):
    localization: Dict[str, str] = Field(default_factory=dict)
    report: NormalizeReport


class LocalizeRequest(BaseModel):
    localization: Dict[str, str] = Field(default_factory=dict)
    key: str
    default: Optional[str] = None


class LocalizeResponse(BaseModel):
    key: str
    value: str
    found: bool


class HealthResponse(BaseModel):
    ok: bool = True
