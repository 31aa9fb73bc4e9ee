"""Shared test fixtures for shadow_build."""

from datetime import datetime

import pytest

from shadow_build.env import EnvironmentSnapshot
from shadow_build.vcs import GIT_AVAILABLE

FIXED_NOW = datetime(2020, 8, 16, 13, 48, 52)


class FakeToolchain:
    """Toolchain probe returning canned version strings."""

    def __init__(self, rustc="rustc 1.45.0 (5c1f21c3b 2020-07-13)",
                 cargo="cargo 1.45.0 (744bd1fbb 2020-06-15)",
                 rustup="stable-x86_64-unknown-linux-gnu (default)"):
        self.rustc = rustc
        self.cargo = cargo
        self.rustup = rustup

    def rustc_version(self):
        return self.rustc

    def cargo_version(self):
        return self.cargo

    def rustup_default(self):
        return self.rustup


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def empty_env():
    return EnvironmentSnapshot({})


@pytest.fixture
def cargo_env():
    """Environment as cargo exports it to a build script."""
    return EnvironmentSnapshot({
        "CARGO_PKG_NAME": "demo",
        "CARGO_PKG_VERSION": "0.3.13",
        "CARGO_PKG_DESCRIPTION": "A demo crate",
        "CARGO_CFG_TARGET_OS": "linux",
        "CARGO_CFG_TARGET_ARCH": "x86_64",
        "TARGET": "x86_64-unknown-linux-gnu",
        "PROFILE": "debug",
    })


@pytest.fixture
def toolchain():
    return FakeToolchain()


@pytest.fixture
def plain_dir(tmp_path):
    """Directory that is not a git checkout."""
    src = tmp_path / "plain"
    src.mkdir()
    (src / "main.rs").write_text("fn main() {}\n", encoding="utf-8")
    return src


@pytest.fixture
def git_repo(tmp_path):
    """Git repository on branch main with one commit by a fixed author."""
    if not GIT_AVAILABLE:
        pytest.skip("git executable not available")

    from git import Actor, Repo

    path = tmp_path / "repo"
    path.mkdir()
    repo = Repo.init(path)
    # Independent of the user's init.defaultBranch
    repo.git.symbolic_ref("HEAD", "refs/heads/main")

    (path / "README.md").write_text("# demo\n", encoding="utf-8")
    (path / "Cargo.lock").write_text("# lock\n", encoding="utf-8")
    repo.index.add(["README.md", "Cargo.lock"])
    author = Actor("Jane Doe", "jane@example.com")
    repo.index.commit("initial commit", author=author, committer=author)

    yield repo
    repo.close()
