"""Exceptions raised at the file / command-line boundary."""

from __future__ import annotations


class VocabError(Exception):
    """Base class for vocabtrie errors."""


class MissingArgument(VocabError):
    """A required command-line input was not supplied."""

    def __init__(self, name: str):
        super().__init__(f"missing {name}")
        self.name = name


class FileReadFailure(VocabError):
    """The dictionary file could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"could not read {path}: {reason}")
        self.path = path
        self.reason = reason
