"""Identifier generation exceptions."""

from typing import Any


class IdentifierException(Exception):
    """Exception raised when an identifier cannot be generated."""

    def __init__(self, message: str) -> None:
        """Initialize exception."""
        self.message = message
        super().__init__(message)


class MissingAttributeException(IdentifierException):
    """Exception raised when a record lacks an attribute required by the identifier format."""

    def __init__(self, attribute: str, order_key: Any) -> None:
        """Initialize exception."""
        self.attribute = attribute
        self.order_key = order_key
        super().__init__(f"A {attribute} is missing for record {order_key}.")


class UnknownIdentifierFormatException(IdentifierException):
    """Exception raised for an identifier format that is not registered."""

    def __init__(self, name: str) -> None:
        """Initialize exception."""
        self.name = name
        super().__init__(f"Unknown identifier format '{name}'.")
