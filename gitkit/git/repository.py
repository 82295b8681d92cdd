"""Git repository abstraction.

Repository is the entry point: it is bound to a working copy path and hands
out Remote, LocalBranch and Commit objects that query git through it.
All operations return Result types.

Usage:
    repo = Repository(Path("/path/to/repo"))

    match repo.main_branch():
        case Ok(main):
            for branch in repo.branches().unwrap_or([]):
                if branch != main and branch.is_merged_to(main).unwrap_or(False):
                    print(f"{branch.name} is merged")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from gitkit.core.config import GitConfig
from gitkit.core.result import Err, Ok, Result
from gitkit.git.branch import find_main_branch
from gitkit.git.commit import Commit, new_commit
from gitkit.git.errors import CommandFailed, GitError, MissingWorkingDirectory, NotFound
from gitkit.git.local_branch import LocalBranch
from gitkit.git.parsing import parse_branch_list
from gitkit.git.remote import Remote
from gitkit.git.version import SHOW_CURRENT_MIN_VERSION, GitVersion, query_git_version
from gitkit.platform.process import ProcessError
from gitkit.platform.process import run as run_process

__all__ = ["Repository", "open_repository"]

logger = logging.getLogger(__name__)

# git exits 128 when it dies (not a repository, bad path, ...)
_GIT_FATAL = 128

# stable English messages and no credential prompts on ls-remote or push
_GIT_ENV = {"LC_ALL": "C", "GIT_TERMINAL_PROMPT": "0"}


class Repository:
    """Git working copy.

    Construction never touches the filesystem; an invalid path surfaces as an
    error from the first operation. The main branch is resolved once and
    remembered for the lifetime of this object.

    Attributes:
        path: Path to the working copy, None if unset
        config: Tool and branch settings
    """

    def __init__(self, path: Path | str, config: GitConfig | None = None) -> None:
        self.path: Path | None = Path(path) if str(path) else None
        self.config = config or GitConfig()
        self._main_branch_name: str | None = None

    # -------------------------------------------------------------------------
    # Command execution
    # -------------------------------------------------------------------------

    def execute(
        self,
        operation: str,
        args: list[str],
        *,
        input: str | None = None,
        accept: Iterable[int] = (),
    ) -> Result[str, GitError]:
        """Run a git command in this repository and return its stdout.

        Args:
            operation: Description used in the error, e.g. "list remotes"
            args: Arguments after `git`
            input: Text fed to stdin
            accept: Non-zero exit codes that still count as success
        """
        if self.path is None:
            return Err(MissingWorkingDirectory())

        result = self._run(self.path, args, input=input)
        if isinstance(result, Ok):
            return result

        e = result.error
        if e.returncode in set(accept):
            return Ok(e.stdout)
        return Err(_command_failed(operation, e))

    def probe(self, operation: str, args: list[str]) -> Result[bool, GitError]:
        """Run an existence check: exit 0 means yes, other exits mean no.

        Fatal failures (git missing, not a repository) are errors, not "no".
        """
        if self.path is None:
            return Err(MissingWorkingDirectory())

        result = self._run(self.path, args)
        if isinstance(result, Ok):
            return Ok(True)
        if not result.error.started or result.error.returncode == _GIT_FATAL:
            return Err(_command_failed(operation, result.error))
        return Ok(False)

    def git_version(self) -> Result[GitVersion, GitError]:
        if self.path is None:
            return Err(MissingWorkingDirectory())
        return query_git_version(
            self.config.tool.executable, self.path, timeout=self.config.tool.timeout
        )

    def _run(
        self, path: Path, args: list[str], *, input: str | None = None
    ) -> Result[str, ProcessError]:
        logger.debug("git %s (in %s)", " ".join(args), path)
        result = run_process(
            [self.config.tool.executable, "-C", str(path), *args],
            cwd=path,
            env=_GIT_ENV,
            input=input,
            timeout=self.config.tool.timeout,
        )
        if isinstance(result, Err):
            logger.debug("git %s exited with %d", args[0] if args else "", result.error.returncode)
        return result

    # -------------------------------------------------------------------------
    # Remotes
    # -------------------------------------------------------------------------

    def has_remote(self, name: str) -> Result[bool, GitError]:
        return self.probe(f"check remote {name}", ["remote", "get-url", name])

    def remote(self, name: str) -> Result[Remote, GitError]:
        existing = self.has_remote(name)
        if isinstance(existing, Err):
            return existing
        if not existing.value:
            return Err(NotFound("remote", name))
        return Ok(Remote(name, self))

    def remotes(self) -> Result[list[Remote], GitError]:
        result = self.execute("list remotes", ["remote", "show"])
        if isinstance(result, Err):
            return result
        names = [line.strip() for line in result.value.splitlines() if line.strip()]
        return Ok([Remote(name, self) for name in names])

    # -------------------------------------------------------------------------
    # Local branches
    # -------------------------------------------------------------------------

    def has_branch(self, name: str) -> Result[bool, GitError]:
        return self.probe(
            f"check local branch {name}",
            ["show-ref", "--verify", "--quiet", f"refs/heads/{name}"],
        )

    def branch(self, name: str) -> Result[LocalBranch, GitError]:
        existing = self.has_branch(name)
        if isinstance(existing, Err):
            return existing
        if not existing.value:
            return Err(NotFound("local branch", name))
        return Ok(LocalBranch(name, self))

    def branches(self) -> Result[list[LocalBranch], GitError]:
        # show-ref exits 1 without output when there are no branches yet
        result = self.execute("list local branches", ["show-ref", "--heads"], accept=(1,))
        if isinstance(result, Err):
            return result

        names = parse_branch_list(result.value)
        if isinstance(names, Err):
            return names
        return Ok([LocalBranch(name, self) for name in names.value])

    def current_branch(self) -> Result[LocalBranch, GitError]:
        """The checked out branch.

        Uses `git branch --show-current` on git 2.22 and later and
        `git rev-parse --abbrev-ref HEAD` before that. A detached HEAD is
        reported as NotFound.
        """
        version = self.git_version()
        if isinstance(version, Err):
            return version

        if version.value >= SHOW_CURRENT_MIN_VERSION:
            args = ["branch", "--show-current"]
        else:
            args = ["rev-parse", "--abbrev-ref", "HEAD"]

        result = self.execute("get current branch", args)
        if isinstance(result, Err):
            return result

        name = result.value.strip()
        if not name or name == "HEAD":
            return Err(NotFound("current branch", "HEAD"))
        return Ok(LocalBranch(name, self))

    def current_commit(self) -> Result[Commit, GitError]:
        result = self.execute("get current commit", ["rev-parse", "HEAD"])
        if isinstance(result, Err):
            return result
        return new_commit(self, result.value.strip())

    def main_branch(self) -> Result[LocalBranch, GitError]:
        """The conventional main branch.

        The configured default branch is tried first, then `master`, `main`
        and `primary`; the first one that exists wins.
        """
        if self._main_branch_name is None:
            found = find_main_branch(self, self.has_branch)
            if isinstance(found, Err):
                return found
            self._main_branch_name = found.value
        return Ok(LocalBranch(self._main_branch_name, self))

    def configured_default_branch(self) -> Result[str, GitError]:
        """Value of the default branch config key, "" when unset."""
        key = self.config.branches.default_branch_key
        # git config exits 1 for an unset key
        result = self.execute(f"read {key} from config", ["config", key], accept=(1,))
        return result.map(str.strip)

    def __str__(self) -> str:
        return f"Repository at {self.path or ''}"

    def __repr__(self) -> str:
        return f"Repository({self.path!r})"


def open_repository(path: Path | str, config: GitConfig | None = None) -> Repository:
    """Bind a Repository to `path`. Nothing is checked until the first query."""
    return Repository(path, config)


def _command_failed(operation: str, e: ProcessError) -> CommandFailed:
    return CommandFailed(
        operation=operation,
        command=e.command,
        returncode=e.returncode,
        stderr=e.stderr,
    )
