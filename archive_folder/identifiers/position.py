"""Positional identifier formats.

They are usable for updates only if new documents are listed at the end.
"""

from typing import override

from .base import IdentifierStrategy
from .models import HierarchyDescriptor, order_key


class Position(IdentifierStrategy):
    """Position of the record in the import: repository_id:17."""

    @override
    def _create(self, descriptor: HierarchyDescriptor) -> str:
        return self._identifier(str(self.context.number))


class PositionFolder(IdentifierStrategy):
    """Order of the item and of the file in the folder: repository_id:17:14."""

    @override
    def _create(self, descriptor: HierarchyDescriptor) -> str:
        return self._identifier(":".join(str(order_key(level)) for level in descriptor))
