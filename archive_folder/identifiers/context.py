"""Identifier generation session context."""

from typing import Mapping

REPOSITORY_IDENTIFIER = "repository_identifier"


class IdentifierContext:
    """Folder data and sequence counter of one identifier generation session.

    A context belongs to a single identifier format instance. Concurrent
    imports must use distinct instances so that their counters stay apart.
    """

    def __init__(self) -> None:
        """Create an empty context with the counter at zero."""
        self.uri = ""
        self.parameters: dict[str, str] = {}
        self.number = 0

    def set(self, uri: str, parameters: Mapping[str, str] | None = None) -> None:
        """Save the folder data used by the identifier formats.

        :param uri: the uri of the folder
        :param parameters: the folder parameters
        """
        self.uri = uri
        self.parameters = dict(parameters or {})

    def get_parameter(self, name: str) -> str | None:
        """Get parameter by name.

        :param name: the parameter name
        :returns: the value, if any, else None
        """
        return self.parameters.get(name)

    @property
    def repository_identifier(self) -> str:
        """Return the repository identifier, or an empty string when it is not set."""
        return self.get_parameter(REPOSITORY_IDENTIFIER) or ""

    def increment(self) -> int:
        """Advance the sequence counter.

        :returns: the counter value of the identifier being created
        """
        self.number += 1
        return self.number
