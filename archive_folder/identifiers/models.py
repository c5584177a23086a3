"""Hierarchy models read by the identifier formats."""

from typing import Annotated, Any, Mapping, Sequence

import ujson
from pydantic import BaseModel, Field, TypeAdapter

OrderKey = int | str


class Record(BaseModel):
    """A resource of one hierarchy level (collection, item or file)."""

    model_config = {"extra": "allow"}  # Other record metadata is kept.

    name: str | None = None
    path: str | None = None

    @property
    def label(self) -> str:
        """Return the path of the record, else its name."""
        if self.path is not None:
            return self.path
        return self.name or ""


# A level holds the resource of the record, so it cannot be empty.
HierarchyLevel = Annotated[dict[OrderKey, Record], Field(min_length=1)]
HierarchyDescriptor = list[HierarchyLevel]

_descriptor_adapter = TypeAdapter(HierarchyDescriptor)


def parse_descriptor(raw: Sequence[Mapping[Any, Any]]) -> HierarchyDescriptor:
    """Validate the levels of a resource, outermost first.

    :param raw: list of mappings of order key to record, or to record attributes
    :returns: the validated hierarchy descriptor
    """
    return _descriptor_adapter.validate_python(raw)


def order_key(level: HierarchyLevel) -> OrderKey:
    """Return the order key of the resource of a level."""
    return next(iter(level))


def level_record(level: HierarchyLevel) -> Record:
    """Return the record of the resource of a level."""
    return next(iter(level.values()))


def canonical_json(descriptor: HierarchyDescriptor) -> str:
    """Serialize a hierarchy descriptor to compact ASCII JSON.

    Order keys are written as strings and unset record attributes are left out,
    so a same descriptor is always serialized the same way.

    :param descriptor: the hierarchy descriptor
    :returns: the JSON string
    """
    content = [
        {str(key): record.model_dump(mode="json", exclude_none=True) for key, record in level.items()}
        for level in descriptor
    ]
    return ujson.dumps(content, ensure_ascii=True, escape_forward_slashes=True)
