"""Test the hierarchy models."""

import pytest
from pydantic import ValidationError

from archive_folder.identifiers.context import IdentifierContext
from archive_folder.identifiers.models import (
    Record,
    canonical_json,
    level_record,
    order_key,
    parse_descriptor,
)


def test_parse_descriptor():
    descriptor = parse_descriptor([{10: {"name": "foo"}}, {"a": Record(name="bar", path="foo/bar")}])

    assert order_key(descriptor[0]) == 10
    assert level_record(descriptor[0]) == Record(name="foo")
    assert order_key(descriptor[1]) == "a"
    assert level_record(descriptor[1]).path == "foo/bar"


def test_parse_invalid_descriptor():
    with pytest.raises(ValidationError):
        parse_descriptor([{1: {"name": 3.5}}])


def test_parse_empty_level():
    with pytest.raises(ValidationError):
        parse_descriptor([{1: {"name": "a"}}, {}])


def test_record_label():
    assert Record(name="name", path="path").label == "path"
    assert Record(name="name").label == "name"
    assert Record(path="").label == ""
    assert Record().label == ""


def test_record_keeps_metadata():
    record = Record.model_validate({"name": "foo", "title": "Foo"})

    assert record.model_dump(exclude_none=True) == {"name": "foo", "title": "Foo"}


def test_canonical_json():
    descriptor = parse_descriptor([{10: {"name": "foo"}}, {20: {"name": "bar", "path": "http://example.org/foo/bar"}}])

    assert canonical_json(descriptor) == (
        '[{"10":{"name":"foo"}},{"20":{"name":"bar","path":"http:\\/\\/example.org\\/foo\\/bar"}}]'
    )


def test_canonical_json_ascii():
    descriptor = parse_descriptor([{1: {"name": "été"}}])

    assert canonical_json(descriptor) == '[{"1":{"name":"\\u00e9t\\u00e9"}}]'


def test_context():
    context = IdentifierContext()
    assert context.number == 0
    assert context.repository_identifier == ""

    context.set("http://example.org/foo", {"repository_identifier": "repo"})

    assert context.uri == "http://example.org/foo"
    assert context.get_parameter("repository_identifier") == "repo"
    assert context.get_parameter("missing") is None
    assert context.repository_identifier == "repo"
    assert context.increment() == 1
    assert context.increment() == 2
    assert context.number == 2


def test_context_without_parameters():
    context = IdentifierContext()
    context.set("http://example.org/foo")

    assert context.parameters == {}
    assert context.repository_identifier == ""
