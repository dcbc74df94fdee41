# agent_parser/schemas.py

from pydantic import BaseModel, Field
from typing import Dict, List, Literal
from agent_parser.models import Browser, OperatingSystem, DeviceType


class ParsedAgent(BaseModel):
    """Classification of one User-Agent string. Every facet is always set."""

    browser: Browser = Browser.UNKNOWN
    os: OperatingSystem = OperatingSystem.UNKNOWN
    device_type: DeviceType = DeviceType.UNKNOWN

    class Config:
        frozen = True

    @property
    def is_bot(self) -> bool:
        return self.device_type is DeviceType.BOT

    @property
    def is_mobile(self) -> bool:
        """Handheld devices, phones and tablets alike"""
        return self.device_type in (DeviceType.MOBILE, DeviceType.TABLET)


class ParseRequest(BaseModel):
    """Incoming item for the parse endpoint"""

    user_agent: str

    class Config:
        extra = "ignore"  # Callers often forward whole log records


class FacetSummary(BaseModel):
    """Label counts per facet"""

    total: int = 0
    by_browser: Dict[str, int] = Field(default_factory=dict)
    by_os: Dict[str, int] = Field(default_factory=dict)
    by_device_type: Dict[str, int] = Field(default_factory=dict)


class ParseBatchResponse(BaseModel):
    status: Literal["ok", "partial", "error"]
    processed: int
    errors: int = 0
    results: List[ParsedAgent] = Field(default_factory=list)
    summary: FacetSummary = Field(default_factory=FacetSummary)
