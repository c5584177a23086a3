"""Hashed identifier formats.

The sequence counter is part of the hashed string, so a re-import gives new
identifiers and records imported with these formats cannot be updated.
"""

import hashlib
from typing import override

from .base import IdentifierStrategy
from .models import HierarchyDescriptor, canonical_json


class HashIdentifier(IdentifierStrategy):
    """Hash of the repository identifier, the counter and the serialized hierarchy."""

    algorithm: str

    @override
    def _create(self, descriptor: HierarchyDescriptor) -> str:
        data = f"{self.context.repository_identifier}:{self.context.number}:{canonical_json(descriptor)}"
        digest = hashlib.new(self.algorithm, data.encode("utf-8")).hexdigest()
        return self._identifier(digest)


class HashMd5(HashIdentifier):
    """MD5 hash of the record."""

    algorithm = "md5"


class HashSha1(HashIdentifier):
    """SHA1 hash of the record."""

    algorithm = "sha1"
