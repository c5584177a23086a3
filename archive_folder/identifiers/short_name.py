"""Short hashed name identifier format."""

import hashlib
from typing import override

from ..exceptions import MissingAttributeException
from ..helpers.base_convert import BASE36, HEXADECIMAL, convert_base
from .base import IdentifierStrategy
from .models import HierarchyDescriptor, level_record, order_key

SHORT_NAME_LENGTH = 25


class ShortName(IdentifierStrategy):
    """Hashed names of the record and of its parents: repository_id:9gsktam27m2b6qc3f0qvct663.

    OAI-PMH identifiers should be simple, case insensitive and ASCII, so the MD5
    sum is written in base 36 with a fixed length.
    """

    @override
    def _create(self, descriptor: HierarchyDescriptor) -> str:
        names = []
        for level in descriptor:
            record = level_record(level)
            if record.name is None:
                raise MissingAttributeException("name", order_key(level))
            names.append(record.name)

        return self._identifier(self.short_md5(":".join(names)))

    def short_md5(self, value: str) -> str:
        """Return the short MD5 sum of a string, salted with the repository and the counter.

        :param value: the string to hash
        :returns: a string of 25 lowercase alphanumeric characters
        """
        data = f"{self.context.repository_identifier}:{self.context.number}:{value}"
        digest = hashlib.md5(data.encode("utf-8")).hexdigest().lower()
        short = convert_base(digest, HEXADECIMAL, BASE36)
        # Pad, then keep the rightmost characters.
        return ("0" * SHORT_NAME_LENGTH + short)[-SHORT_NAME_LENGTH:]
