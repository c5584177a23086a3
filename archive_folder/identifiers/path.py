"""Identifier formats built from the paths or names of the records."""

from typing import override

from .base import IdentifierStrategy
from .models import HierarchyDescriptor, level_record


class Path(IdentifierStrategy):
    """Path in the folder of the record only: repository_id:my_file."""

    separator = "/"
    add_item = False

    @override
    def _create(self, descriptor: HierarchyDescriptor) -> str:
        levels = descriptor if self.add_item else descriptor[-1:]
        # A record without path uses its name.
        labels = [level_record(level).label for level in levels]
        return self._identifier(self.separator.join(labels))


class PathItem(Path):
    """Path in the folder, with the item for files: repository_id:my_subfolder/my_file."""

    add_item = True


class PathColon(Path):
    """Path of the record only, with colon: repository_id:my_file."""

    separator = ":"


class PathColonItem(Path):
    """Path with colon, with the item for files: repository_id:my_subfolder:my_file."""

    separator = ":"
    add_item = True
