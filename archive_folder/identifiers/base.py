"""Base class of the OAI-PMH identifier formats."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from ..helpers.logger import LOG
from .context import IdentifierContext
from .models import HierarchyDescriptor, parse_descriptor


class IdentifierStrategy(ABC):
    """Create the identifier of a record from its levels in the folder hierarchy."""

    def __init__(self) -> None:
        """Create the identifier format with its own session context."""
        self.context = IdentifierContext()

    def set_context(self, uri: str, parameters: Mapping[str, str] | None = None) -> None:
        """Save the folder data used to build identifiers.

        :param uri: the uri of the folder
        :param parameters: the folder parameters, with the optional repository_identifier
        """
        self.context.set(uri, parameters)

    @property
    def number(self) -> int:
        """Return the number of identifiers created in this session."""
        return self.context.number

    def create(self, descriptor: Sequence[Mapping[Any, Any]]) -> str:
        """Return the identifier of a record from a list of unique order / record.

        The counter is incremented before the identifier is built, so the first
        identifier of a session sees the counter value 1.

        :param descriptor: list of mappings of order key to record, outermost level first
        :returns: the OAI-PMH identifier
        """
        levels = parse_descriptor(descriptor)
        self.context.increment()
        identifier = self._create(levels)
        LOG.debug("Created identifier %r for record number %d.", identifier, self.context.number)
        return identifier

    def _identifier(self, suffix: str) -> str:
        return f"{self.context.repository_identifier}:{suffix}"

    @abstractmethod
    def _create(self, descriptor: HierarchyDescriptor) -> str:
        """Return the identifier of a record from its validated hierarchy.

        :param descriptor: the hierarchy descriptor
        :returns: the OAI-PMH identifier
        """
