from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ConfigureRequest(BaseModel):
    address: str = Field(..., min_length=1)


class ConfigResponse(BaseModel):
    address: Optional[str] = None
    state: str


class StatusResponse(BaseModel):
    state: str
    status: str


class ParameterModel(BaseModel):
    name: str
    label: str
    min: float
    max: float
    step: float
    value: Optional[float] = None
    critical: bool = False
    status: str


class ParametersResponse(BaseModel):
    state: str
    status: str
    safety: str
    parameters: List[ParameterModel] = Field(default_factory=list)
    snapshot: Optional[Dict[str, Any]] = None


class LogsResponse(BaseModel):
    events: List[Dict[str, Any]] = Field(default_factory=list)
