from __future__ import annotations


class AutoCommitMsgError(Exception):
    """Base error for the project."""


class ParseError(AutoCommitMsgError):
    pass


class InvalidInputError(AutoCommitMsgError):
    pass
