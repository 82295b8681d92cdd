"""Parsers for line-oriented git branch listings.

Two shapes are handled:

- hash-then-ref lines, as printed by `git show-ref --heads` and
  `git ls-remote --heads`:

      1b2c3d4e5f...  refs/heads/main

- starred lines, as printed by `git branch`:

      * main
        feature/x
      + other-worktree
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from gitkit.core.result import Err, Ok, Result
from gitkit.git.errors import ParseFailed

__all__ = [
    "ListedBranch",
    "parse_branch_list",
    "parse_starred_branch_entries",
    "parse_starred_branch_list",
]

_BRANCH_LIST_RE = re.compile(r"^[0-9a-f]{5,40}\s+(.*)$")
_STARRED_BRANCH_LIST_RE = re.compile(r"^\s*([*+])?\s*([^\s*+]\S*)")

_HEADS_PREFIX = "refs/heads/"


@dataclass(frozen=True, slots=True)
class ListedBranch:
    """One line of `git branch` output.

    Attributes:
        name: Branch token as printed (may carry a `remotes/` prefix)
        is_current: True if the line was marked with `*`
    """

    name: str
    is_current: bool = False


def _lines(output: str) -> list[str]:
    trimmed = output.strip()
    if not trimmed:
        return []
    return trimmed.split("\n")


def parse_branch_list(output: str) -> Result[list[str], ParseFailed]:
    """Parse hash-then-ref lines into branch names, in order.

    The first `refs/heads/` in each ref is removed.
    """
    branches: list[str] = []
    for line in _lines(output):
        match = _BRANCH_LIST_RE.match(line)
        if match is None or not match.group(1):
            return Err(ParseFailed("parse branch list", f"invalid line format: {line!r}"))
        branches.append(match.group(1).replace(_HEADS_PREFIX, "", 1).strip())
    return Ok(branches)


def parse_starred_branch_entries(output: str) -> Result[list[ListedBranch], ParseFailed]:
    """Parse `git branch` lines, keeping the current-branch marker."""
    entries: list[ListedBranch] = []
    for line in _lines(output):
        match = _STARRED_BRANCH_LIST_RE.match(line)
        if match is None:
            return Err(ParseFailed("parse branch list", f"invalid line format: {line!r}"))
        entries.append(ListedBranch(name=match.group(2), is_current=match.group(1) == "*"))
    return Ok(entries)


def parse_starred_branch_list(output: str) -> Result[list[str], ParseFailed]:
    """Parse `git branch` lines into branch names, in order."""
    return parse_starred_branch_entries(output).map(lambda entries: [e.name for e in entries])
