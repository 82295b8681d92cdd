"""Object model over the git command line.

- Repository: entry point bound to a working copy
- LocalBranch / RemoteBranch: the two kinds of Branch
- Remote: a named remote and its branches
- Commit: a hash with accessors for its metadata

Usage:
    from gitkit.git import Repository

    repo = Repository(Path("/path/to/repo"))
    current = repo.current_branch()
    if current.is_ok():
        print(f"On {current.unwrap().name}")
"""

from gitkit.git.branch import Branch, find_main_branch, is_merged
from gitkit.git.commit import Commit, is_valid_commit_hash, new_commit
from gitkit.git.errors import (
    CommandFailed,
    GitError,
    InvalidCommitHash,
    MissingWorkingDirectory,
    NotFound,
    ParseFailed,
)
from gitkit.git.local_branch import LocalBranch
from gitkit.git.parsing import (
    ListedBranch,
    parse_branch_list,
    parse_starred_branch_entries,
    parse_starred_branch_list,
)
from gitkit.git.remote import Remote
from gitkit.git.remote_branch import RemoteBranch
from gitkit.git.repository import Repository, open_repository
from gitkit.git.version import (
    SHOW_CURRENT_MIN_VERSION,
    GitVersion,
    clear_version_cache,
    parse_git_version,
    query_git_version,
)

__all__ = [
    # Model
    "Branch",
    "Commit",
    "LocalBranch",
    "Remote",
    "RemoteBranch",
    "Repository",
    "find_main_branch",
    "is_merged",
    "is_valid_commit_hash",
    "new_commit",
    "open_repository",
    # Errors
    "CommandFailed",
    "GitError",
    "InvalidCommitHash",
    "MissingWorkingDirectory",
    "NotFound",
    "ParseFailed",
    # Parsing
    "ListedBranch",
    "parse_branch_list",
    "parse_starred_branch_entries",
    "parse_starred_branch_list",
    # Version
    "GitVersion",
    "SHOW_CURRENT_MIN_VERSION",
    "clear_version_cache",
    "parse_git_version",
    "query_git_version",
]
