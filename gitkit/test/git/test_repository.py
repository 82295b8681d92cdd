"""Tests for git/repository.py."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from gitkit.core.config import BranchesConfig, GitConfig, ToolConfig
from gitkit.core.result import Err, Ok
from gitkit.git.commit import Commit
from gitkit.git.errors import CommandFailed, InvalidCommitHash, MissingWorkingDirectory, NotFound
from gitkit.git.local_branch import LocalBranch
from gitkit.git.remote import Remote
from gitkit.git.repository import Repository, open_repository
from gitkit.git.version import GitVersion
from gitkit.test.fakes import HEAD_A, HEAD_B, FakeGit


def _heads(*names: str) -> tuple[str, ...]:
    return tuple(f"refs/heads/{n}" for n in names)


class TestConstruction:
    def test_path_kept(self, tmp_path: Path) -> None:
        repo = open_repository(str(tmp_path))

        assert repo.path == tmp_path
        assert repo.config == GitConfig()
        assert str(repo) == f"Repository at {tmp_path}"

    def test_empty_path(self) -> None:
        repo = Repository("")

        assert repo.path is None
        assert repo.branches() == Err(MissingWorkingDirectory())
        assert repo.has_branch("main") == Err(MissingWorkingDirectory())
        assert repo.git_version() == Err(MissingWorkingDirectory())

    def test_runs_in_repository(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("remote", "show")

        Repository(tmp_path).remotes()

        assert fake_git.cwds == [str(tmp_path)]
        env = fake_git.envs[0]
        assert isinstance(env, dict)
        assert env["GIT_TERMINAL_PROMPT"] == "0"
        assert env["LC_ALL"] == "C"

    def test_custom_executable(self, tmp_path: Path) -> None:
        config = GitConfig(tool=ToolConfig(executable="/nonexistent/git-12345"))

        result = Repository(tmp_path, config).remotes()

        assert isinstance(result, Err)
        assert isinstance(result.error, CommandFailed)
        assert result.error.returncode == -1
        assert result.error.command[0] == "/nonexistent/git-12345"


class TestProbe:
    def test_fatal_exit_is_error(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add(
            "show-ref",
            "--verify",
            "--quiet",
            "refs/heads/main",
            returncode=128,
            stderr="fatal: not a git repository (or any of the parent directories): .git\n",
        )

        result = Repository(tmp_path).has_branch("main")

        assert isinstance(result, Err)
        assert result.error.message == (
            "could not check local branch main: "
            "fatal: not a git repository (or any of the parent directories): .git"
        )


class TestRemotes:
    def test_has_remote(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("remote", "get-url", "origin", stdout="git@example.com:x.git\n")
        fake_git.add(
            "remote", "get-url", "nope", returncode=2, stderr="error: No such remote 'nope'\n"
        )
        repo = Repository(tmp_path)

        assert repo.has_remote("origin") == Ok(True)
        assert repo.has_remote("nope") == Ok(False)
        assert repo.remote("origin") == Ok(Remote("origin", repo))
        assert repo.remote("nope") == Err(NotFound("remote", "nope"))

    def test_remotes(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("remote", "show", stdout="origin\nupstream\n")
        repo = Repository(tmp_path)

        assert repo.remotes() == Ok([Remote("origin", repo), Remote("upstream", repo)])

    def test_no_remotes(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("remote", "show")

        assert Repository(tmp_path).remotes() == Ok([])


class TestBranches:
    def test_branches(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add(
            "show-ref",
            "--heads",
            stdout=f"{HEAD_A} refs/heads/dev\n{HEAD_B} refs/heads/main\n",
        )
        repo = Repository(tmp_path)

        assert repo.branches() == Ok([LocalBranch("dev", repo), LocalBranch("main", repo)])

    def test_no_branches_yet(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("show-ref", "--heads", returncode=1)

        assert Repository(tmp_path).branches() == Ok([])

    def test_unparseable_listing(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("show-ref", "--heads", stdout="garbage\n")

        result = Repository(tmp_path).branches()

        assert isinstance(result, Err)
        assert "invalid line format" in result.error.message

    def test_branch(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("main"))
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("nope"), returncode=1)
        repo = Repository(tmp_path)

        assert repo.branch("main") == Ok(LocalBranch("main", repo))
        assert repo.branch("nope") == Err(NotFound("local branch", "nope"))


class TestCurrentBranch:
    def test_show_current_on_new_git(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("branch", "--show-current", stdout="feature\n")
        repo = Repository(tmp_path)

        assert repo.current_branch() == Ok(LocalBranch("feature", repo))
        assert repo.git_version() == Ok(GitVersion(2, 43, 0))

    def test_rev_parse_on_old_git(self, tmp_path: Path) -> None:
        fake = FakeGit(version="git version 2.21.0\n")
        fake.add("rev-parse", "--abbrev-ref", "HEAD", stdout="feature\n")
        repo = Repository(tmp_path)

        with patch("subprocess.run", side_effect=fake):
            result = repo.current_branch()

        assert result == Ok(LocalBranch("feature", repo))
        assert not fake.called("branch", "--show-current")

    def test_detached_head(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("branch", "--show-current", stdout="\n")

        result = Repository(tmp_path).current_branch()

        assert result == Err(NotFound("current branch", "HEAD"))

    def test_version_queried_once(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("branch", "--show-current", stdout="main\n")
        repo = Repository(tmp_path)

        repo.current_branch()
        repo.current_branch()
        Repository(tmp_path).current_branch()

        assert fake_git.count("version") == 1
        assert fake_git.count("branch", "--show-current") == 3


class TestCurrentCommit:
    def test_current_commit(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("rev-parse", "HEAD", stdout=f"{HEAD_A}\n")
        repo = Repository(tmp_path)

        assert repo.current_commit() == Ok(Commit(HEAD_A, repo))

    def test_unexpected_output(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("rev-parse", "HEAD", stdout="HEAD\n")

        assert Repository(tmp_path).current_commit() == Err(InvalidCommitHash("HEAD"))


class TestMainBranch:
    def test_fallback_order(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("config", "init.defaultBranch", returncode=1)
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("master"), returncode=1)
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("main"), returncode=1)
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("primary"))
        repo = Repository(tmp_path)

        assert repo.main_branch() == Ok(LocalBranch("primary", repo))
        checked = [c[-1] for c in fake_git.calls if c[0] == "show-ref"]
        assert checked == list(_heads("master", "main", "primary"))

    def test_configured_default_first(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("config", "init.defaultBranch", stdout="trunk\n")
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("trunk"))
        repo = Repository(tmp_path)

        assert repo.main_branch() == Ok(LocalBranch("trunk", repo))
        assert not fake_git.called("show-ref", "--verify", "--quiet", *_heads("master"))

    def test_configured_default_missing(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("config", "init.defaultBranch", stdout="trunk\n")
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("trunk"), returncode=1)
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("master"))
        repo = Repository(tmp_path)

        assert repo.main_branch() == Ok(LocalBranch("master", repo))

    def test_configured_default_not_tried_twice(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("config", "init.defaultBranch", stdout="main\n")
        for name in ("main", "master", "primary"):
            fake_git.add("show-ref", "--verify", "--quiet", *_heads(name), returncode=1)

        result = Repository(tmp_path).main_branch()

        assert result == Err(NotFound("main branch among", "main, master, primary"))
        assert fake_git.count("show-ref", "--verify", "--quiet", *_heads("main")) == 1

    def test_memoized(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("config", "init.defaultBranch", returncode=1)
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("master"))
        repo = Repository(tmp_path)

        repo.main_branch()
        repo.main_branch()

        assert fake_git.count("show-ref", "--verify", "--quiet", *_heads("master")) == 1
        assert fake_git.count("config", "init.defaultBranch") == 1

    def test_failure_not_memoized(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("config", "init.defaultBranch", returncode=1)
        for name in ("master", "main", "primary"):
            fake_git.add("show-ref", "--verify", "--quiet", *_heads(name), returncode=1)
        repo = Repository(tmp_path)

        assert isinstance(repo.main_branch(), Err)

        fake_git.add("show-ref", "--verify", "--quiet", *_heads("main"))
        assert repo.main_branch() == Ok(LocalBranch("main", repo))

    def test_custom_config(self, fake_git: FakeGit, tmp_path: Path) -> None:
        fake_git.add("config", "gitkit.main", returncode=1)
        fake_git.add("show-ref", "--verify", "--quiet", *_heads("develop"))
        config = GitConfig(
            branches=BranchesConfig(main_fallbacks=("develop",), default_branch_key="gitkit.main")
        )
        repo = Repository(tmp_path, config)

        assert repo.main_branch() == Ok(LocalBranch("develop", repo))
