"""Identifier generation configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

# Names of the formats registered in identifiers.factory.IDENTIFIER_FORMATS.
IdentifierFormatName = Literal[
    "short_name",
    "position_folder",
    "position",
    "hash_md5",
    "hash_sha1",
    "path",
    "path_item",
    "path_colon",
    "path_colon_item",
]


class IdentifierConfig(BaseSettings):
    """Identifier generation configuration."""

    model_config = {"extra": "allow"}  # Allow creation using the constructor.

    OAI_IDENTIFIER_FORMAT: IdentifierFormatName = Field(
        default="short_name", description="The format of the OAI-PMH identifiers."
    )
    REPOSITORY_IDENTIFIER: str = Field(default="", description="The namespace prefix of the OAI-PMH identifiers.")
    REPOSITORY_URI: str = Field(default="", description="The URI of the imported folder.")


identifier_config = IdentifierConfig()
