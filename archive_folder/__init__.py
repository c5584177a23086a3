"""Archive Folder OAI-PMH identifier generation."""

__title__ = "Archive Folder OAI-PMH identifiers"
__version__ = VERSION = "1.0.0"
__author__ = "Archive Folder developers"
