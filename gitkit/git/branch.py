"""What every branch can do, and the logic shared by both kinds.

LocalBranch and RemoteBranch satisfy the `Branch` protocol structurally;
they share behaviour through the functions below rather than a base class.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from gitkit.core.result import Err, Ok, Result
from gitkit.git.errors import GitError, NotFound

if TYPE_CHECKING:
    from gitkit.git.commit import Commit
    from gitkit.git.repository import Repository

__all__ = ["Branch", "find_main_branch", "is_merged"]


class Branch(Protocol):
    """A named line of history, local or on a remote."""

    @property
    def name(self) -> str: ...

    @property
    def full_name(self) -> str:
        """Name including the remote, if any."""
        ...

    def head_commit(self) -> Result[Commit, GitError]: ...

    def is_main_branch(self) -> Result[bool, GitError]: ...

    def is_merged_to(self, target: Branch) -> Result[bool, GitError]: ...

    def delete(self) -> Result[None, GitError]: ...


def is_merged(repository: Repository, branch: Branch, target: Branch) -> Result[bool, GitError]:
    """Check whether `branch` is fully contained in `target`.

    Branches pointing at the same commit are merged by definition and no
    merge-base is computed. Otherwise `branch` is merged when the merge-base
    of both heads is the head of `branch`.
    """
    head = branch.head_commit()
    if isinstance(head, Err):
        return head
    target_head = target.head_commit()
    if isinstance(target_head, Err):
        return target_head

    if head.value == target_head.value:
        return Ok(True)

    a, b = head.value.hash, target_head.value.hash
    result = repository.execute(f"find merge-base between {a} and {b}", ["merge-base", a, b])
    if isinstance(result, Err):
        return result
    return Ok(result.value.strip() == a)


def find_main_branch(
    repository: Repository,
    has_branch: Callable[[str], Result[bool, GitError]],
) -> Result[str, GitError]:
    """Return the first main branch candidate for which `has_branch` holds.

    Candidates: the configured default branch (if set), then the configured
    fallbacks, `master, main, primary` unless overridden.
    """
    configured = repository.configured_default_branch()
    if isinstance(configured, Err):
        return configured

    candidates: list[str] = []
    if configured.value:
        candidates.append(configured.value)
    for name in repository.config.branches.main_fallbacks:
        if name not in candidates:
            candidates.append(name)

    for candidate in candidates:
        exists = has_branch(candidate)
        if isinstance(exists, Err):
            return exists
        if exists.value:
            return Ok(candidate)

    return Err(NotFound("main branch among", ", ".join(candidates)))
