from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class KeyValueParam(BaseModel):
    key: str
    value: str = ""


class SignRequest(BaseModel):
    consumer_key: str
    consumer_secret: str = ""
    token: str = ""
    token_secret: str = ""
    method: str = "GET"
    url: str
    params: List[KeyValueParam] = Field(default_factory=list)
    nonce: Optional[str] = None
    timestamp: Optional[str] = None


class SignResponse(BaseModel):
    header: str
    signature: str
    signature_base: str
    nonce: str
    timestamp: str


class LogPackage(BaseModel):
    sink: str
    level: str = "info"
    path: Optional[str] = None
