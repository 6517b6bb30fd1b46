from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture()
def diff_index_lines() -> list[str]:
    """
    A small, mixed `git diff-index --name-status HEAD` output:
      - 2 created, 1 updated, 1 deleted
      - 1 rename inside a directory
    """
    return [
        "A\tsrc/new.py",
        "A\tdocs/guide.md",
        "M\tREADME.md",
        "D\told.txt",
        "R100\tsrc/app.py\tsrc/main.py",
    ]


@pytest.fixture()
def status_lines() -> list[str]:
    """The same kind of changes as `git status --porcelain=v1` reports them."""
    return [
        "A  src/new.py",
        " M README.md",
        "D  old.txt",
        "R  src/app.py -> src/main.py",
        "?? notes.txt",
    ]


@pytest.fixture()
def make_lines():
    """
    Helper: build diff-index lines for one action over many paths.
    """
    def _maker(action: str, *paths: str) -> list[str]:
        return [f"{action}\t{p}" for p in paths]
    return _maker


def _check_schema(obj: Any, schema: Any, where: str = "$") -> None:
    if isinstance(schema, dict):
        assert isinstance(obj, dict), f"{where}: expected dict, got {type(obj).__name__}"
        for key, sub in schema.items():
            assert key in obj, f"{where}: missing key '{key}'"
            _check_schema(obj[key], sub, f"{where}.{key}")
    elif isinstance(schema, list):
        # single element = schema of every item
        assert isinstance(obj, list), f"{where}: expected list, got {type(obj).__name__}"
        for i, item in enumerate(obj):
            if schema:
                _check_schema(item, schema[0], f"{where}[{i}]")
    elif isinstance(schema, type):
        assert isinstance(obj, schema), f"{where}: expected {schema.__name__}, got {type(obj).__name__}"
    elif callable(schema):
        assert schema(obj), f"{where}: check failed for {obj!r}"
    else:
        raise TypeError(f"Unsupported schema at {where}: {schema!r}")


@pytest.fixture()
def assert_schema():
    """
    Structural matcher for tool output. A schema is a type, a predicate,
    a dict of schemas, or a one-item list giving the schema of each element.
    Values that vary (message wording) are checked by predicate only.
    """
    return _check_schema
