"""Selection of the identifier format of a folder."""

from typing import Mapping, NamedTuple

from ..conf.identifier import IdentifierConfig, identifier_config
from ..exceptions import UnknownIdentifierFormatException
from ..helpers.logger import LOG, log_debug_json
from .base import IdentifierStrategy
from .context import REPOSITORY_IDENTIFIER
from .hash import HashMd5, HashSha1
from .path import Path, PathColon, PathColonItem, PathItem
from .position import Position, PositionFolder
from .short_name import ShortName

DEFAULT_IDENTIFIER_FORMAT = "short_name"


class IdentifierFormat(NamedTuple):
    """A registered identifier format."""

    strategy: type[IdentifierStrategy]
    description: str


IDENTIFIER_FORMATS: dict[str, IdentifierFormat] = {
    "short_name": IdentifierFormat(
        ShortName, "Hashed names of the record and its parents: repository_id:9gsktam27m2b6qc3f0qvct663"
    ),
    # Usable for update only if new documents are listed at end.
    "position_folder": IdentifierFormat(PositionFolder, "Alphabetic position of item and file: repository_id:17:14"),
    "position": IdentifierFormat(Position, "Alphabetic position of record: repository_id:17"),
    "hash_md5": IdentifierFormat(HashMd5, "MD5 hash of the record"),
    "hash_sha1": IdentifierFormat(HashSha1, "SHA1 hash of the record"),
    "path": IdentifierFormat(Path, "Path in the folder: repository_id:my_file"),
    "path_item": IdentifierFormat(PathItem, "Path in the folder, with item for files"),
    "path_colon": IdentifierFormat(PathColon, "Path with colon: repository_id:my_subfolder:my_file"),
    "path_colon_item": IdentifierFormat(PathColonItem, "Path with colon, with item for files"),
}


def get_identifier_formats() -> dict[str, str]:
    """Get the available identifier formats.

    :returns: Mapping of format name to description
    """
    return {name: identifier_format.description for name, identifier_format in IDENTIFIER_FORMATS.items()}


def create_identifier_strategy(
    name: str = DEFAULT_IDENTIFIER_FORMAT, uri: str = "", parameters: Mapping[str, str] | None = None
) -> IdentifierStrategy:
    """Create a new identifier format instance for one import session.

    :param name: the identifier format name
    :param uri: the uri of the folder
    :param parameters: the folder parameters
    :raises: UnknownIdentifierFormatException if the format is not registered
    :returns: the identifier format, with its context set
    """
    if name not in IDENTIFIER_FORMATS:
        LOG.error("Unknown identifier format: %r.", name)
        raise UnknownIdentifierFormatException(name)

    strategy = IDENTIFIER_FORMATS[name].strategy()
    strategy.set_context(uri, parameters)

    LOG.info("Identifier format %r selected for folder %r.", name, uri)
    log_debug_json(strategy.context.parameters)
    return strategy


def create_identifier_strategy_from_config(config: IdentifierConfig | None = None) -> IdentifierStrategy:
    """Create a new identifier format instance from the configuration.

    :param config: the identifier configuration, defaults to the environment configuration
    :returns: the identifier format, with its context set
    """
    if config is None:
        config = identifier_config
    return create_identifier_strategy(
        config.OAI_IDENTIFIER_FORMAT,
        config.REPOSITORY_URI,
        {REPOSITORY_IDENTIFIER: config.REPOSITORY_IDENTIFIER},
    )
