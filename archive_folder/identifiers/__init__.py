"""OAI-PMH identifier formats."""

from .base import IdentifierStrategy
from .context import IdentifierContext
from .factory import (
    IDENTIFIER_FORMATS,
    create_identifier_strategy,
    create_identifier_strategy_from_config,
    get_identifier_formats,
)
from .hash import HashMd5, HashSha1
from .models import HierarchyDescriptor, Record, parse_descriptor
from .path import Path, PathColon, PathColonItem, PathItem
from .position import Position, PositionFolder
from .short_name import ShortName

__all__ = [
    "IDENTIFIER_FORMATS",
    "HashMd5",
    "HashSha1",
    "HierarchyDescriptor",
    "IdentifierContext",
    "IdentifierStrategy",
    "Path",
    "PathColon",
    "PathColonItem",
    "PathItem",
    "Position",
    "PositionFolder",
    "Record",
    "ShortName",
    "create_identifier_strategy",
    "create_identifier_strategy_from_config",
    "get_identifier_formats",
    "parse_descriptor",
]
