# agent_parser/__init__.py

from agent_parser.classifier import parse
from agent_parser.models import Browser, DeviceType, OperatingSystem
from agent_parser.schemas import ParsedAgent

__version__ = "1.0.0"

__all__ = ["parse", "ParsedAgent", "Browser", "OperatingSystem", "DeviceType"]
