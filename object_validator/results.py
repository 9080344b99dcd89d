"""Helpers for reading result trees.

A result tree mirrors the validated value: dicts for objects, lists for
arrays, ``{constraint: bool}`` dicts or ``True`` for scalars, and ``False``
wherever a shape did not match or a key was unknown or missing.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

ResultTree = dict[str, Any] | list[Any] | bool


def is_valid(result: ResultTree) -> bool:
    """Return True if every leaf of the result tree is True."""
    if isinstance(result, dict):
        return all(is_valid(child) for child in result.values())
    if isinstance(result, list):
        return all(is_valid(child) for child in result)
    return result is True


def collect_failures(result: ResultTree) -> list[str]:
    """List JSONPath-style locations of every failing leaf.

    Examples:
        {"age": {"string": False}} -> ["age.string"]
        {"tags": [True, False]} -> ["tags[1]"]
        False -> [""]
    """
    failures: list[str] = []
    _collect(result, (), failures)
    return failures


class Index(int):
    """Sequence position in a path; any other segment is a mapping key."""

    __slots__ = ()


PathSegment = Any


def _collect(result: ResultTree, path: tuple[PathSegment, ...], failures: list[str]) -> None:
    if isinstance(result, dict):
        for key, child in result.items():
            _collect(child, (*path, key), failures)
    elif isinstance(result, list):
        for index, child in enumerate(result):
            _collect(child, (*path, Index(index)), failures)
    elif result is not True:
        failures.append(format_path(path))


def format_path(path: Iterable[PathSegment]) -> str:
    """Format path segments as a JSONPath-style string.

    Only ``Index`` segments render as ``[n]``; mapping keys are always
    dotted, whatever their type.

    Examples:
        () -> ""
        ("tags", Index(0), "string") -> "tags[0].string"
        ("scores", 1) -> "scores.1"
    """
    rendered = ""
    for segment in path:
        if isinstance(segment, Index):
            rendered += f"[{int(segment)}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = str(segment)
    return rendered
