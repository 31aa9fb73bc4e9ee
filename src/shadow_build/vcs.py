"""Version-control facts for the generated constants.

Facts are read from the git checkout with GitPython. When the source
directory is not a repository, git is not installed, or the history cannot be
read, every VCS constant falls back to an empty string so generation still
succeeds. On CI platforms the branch, tag and commit supplied through the
environment take precedence over the local checkout, which is frequently
shallow or on a detached HEAD.
"""

import os
from datetime import datetime
from typing import Dict, Mapping, Optional

try:
    from git import Repo
    from git.exc import GitError
    GIT_AVAILABLE = True
except ImportError:
    # GitPython refuses to import when no git executable can be found
    GIT_AVAILABLE = False

from .ci import CIPlatform
from .consts import (
    BRANCH,
    BUILD_TIME,
    CARGO_LOCK,
    COMMIT_AUTHOR,
    COMMIT_DATE,
    COMMIT_EMAIL,
    COMMIT_HASH,
    DATE_FORMAT,
    GIT_CLEAN,
    SHORT_COMMIT,
    TAG,
)
from .models import ConstVal

DEFAULT_LOCK_FILE = "Cargo.lock"
SHORT_COMMIT_LEN = 8

DESCRIPTIONS = {
    BRANCH: "display current branch",
    TAG: "display current tag",
    COMMIT_HASH: "display current commit_id",
    SHORT_COMMIT: "display current short commit_id",
    COMMIT_DATE: "display current commit date",
    COMMIT_AUTHOR: "display current commit author",
    COMMIT_EMAIL: "display current commit email",
    GIT_CLEAN: "display whether the working tree had no uncommitted changes",
    BUILD_TIME: "display project build time",
    CARGO_LOCK: "display project dependence cargo.lock detail",
}

# Constants read from the repository itself; BUILD_TIME and CARGO_LOCK are not.
_REPOSITORY_CONSTS = (
    BRANCH,
    TAG,
    COMMIT_HASH,
    SHORT_COMMIT,
    COMMIT_DATE,
    COMMIT_AUTHOR,
    COMMIT_EMAIL,
    GIT_CLEAN,
)

_REF_HEADS = "refs/heads/"
_REF_TAGS = "refs/tags/"


def extract(
    src_path: str,
    ci: CIPlatform,
    env: Mapping[str, str],
    lock_file: str = DEFAULT_LOCK_FILE,
    now: Optional[datetime] = None,
) -> Dict[str, ConstVal]:
    """Collect version-control facts for ``src_path``.

    Args:
        src_path: Source directory of the project being built.
        ci: CI platform detected for this build.
        env: Environment snapshot.
        lock_file: Dependency lock file name looked up in ``src_path``.
        now: Build timestamp (defaults to the current local time).

    Returns:
        Dict[str, ConstVal]: One entry for every VCS constant name.
    """
    values = {name: "" for name in _REPOSITORY_CONSTS}

    local = read_repository(src_path)
    if local is not None:
        values.update(local)
        values.update(ci_overrides(ci, env))
        values[SHORT_COMMIT] = values[COMMIT_HASH][:SHORT_COMMIT_LEN]

    fragment = {name: ConstVal.new(DESCRIPTIONS[name], values[name]) for name in _REPOSITORY_CONSTS}
    fragment[BUILD_TIME] = ConstVal.new(
        DESCRIPTIONS[BUILD_TIME], (now or datetime.now()).strftime(DATE_FORMAT)
    )
    fragment[CARGO_LOCK] = ConstVal.new_opt(
        DESCRIPTIONS[CARGO_LOCK], read_lock_file(src_path, lock_file)
    )
    return fragment


def read_repository(src_path: str) -> Optional[Dict[str, str]]:
    """Read commit facts from the git checkout containing ``src_path``.

    Returns:
        Optional[Dict[str, str]]: Facts keyed by constant name, or None when
        the directory is not a readable repository with at least one commit.
    """
    if not GIT_AVAILABLE:
        return None

    try:
        repo = Repo(src_path, search_parent_directories=True)
    except (GitError, OSError):
        return None

    try:
        commit = repo.head.commit
        if repo.head.is_detached:
            branch = "HEAD"
        else:
            branch = repo.active_branch.name

        return {
            BRANCH: branch,
            TAG: _head_tag(repo, commit),
            COMMIT_HASH: commit.hexsha,
            COMMIT_DATE: commit.committed_datetime.astimezone().strftime(DATE_FORMAT),
            COMMIT_AUTHOR: commit.author.name or "",
            COMMIT_EMAIL: commit.author.email or "",
            GIT_CLEAN: "false" if repo.is_dirty() else "true",
        }
    except (GitError, ValueError, OSError):
        # Unborn branch, corrupt objects or a failing git command
        return None
    finally:
        repo.close()


def _head_tag(repo, commit) -> str:
    for ref in repo.tags:
        try:
            if ref.commit == commit:
                return ref.name
        except ValueError:
            # Tag pointing at a tree or blob
            continue
    return ""


def ci_overrides(ci: CIPlatform, env: Mapping[str, str]) -> Dict[str, str]:
    """Branch, tag and commit values exposed by the CI platform.

    Only non-empty values are returned, so anything the platform does not
    provide keeps its locally derived value.
    """
    branch = tag = commit = ""

    if ci is CIPlatform.GITLAB:
        tag = env.get("CI_COMMIT_TAG", "")
        branch = tag or env.get("CI_COMMIT_REF_NAME", "")
        commit = env.get("CI_COMMIT_SHA", "")
    elif ci is CIPlatform.GITHUB:
        ref = env.get("GITHUB_REF", "")
        if ref.startswith(_REF_TAGS):
            tag = ref[len(_REF_TAGS):]
            branch = tag
        elif ref.startswith(_REF_HEADS):
            branch = ref[len(_REF_HEADS):]
        # Pull request builds check out a merge ref; the head ref names the branch
        branch = env.get("GITHUB_HEAD_REF", "") or branch
        commit = env.get("GITHUB_SHA", "")
    elif ci is CIPlatform.TRAVIS:
        tag = env.get("TRAVIS_TAG", "")
        branch = tag or env.get("TRAVIS_BRANCH", "")
        commit = env.get("TRAVIS_COMMIT", "")
    elif ci is CIPlatform.CIRCLECI:
        tag = env.get("CIRCLE_TAG", "")
        branch = tag or env.get("CIRCLE_BRANCH", "")
        commit = env.get("CIRCLE_SHA1", "")

    overrides = {BRANCH: branch, TAG: tag, COMMIT_HASH: commit}
    return {name: value for name, value in overrides.items() if value}


def read_lock_file(src_path: str, lock_file: str = DEFAULT_LOCK_FILE) -> str:
    """Return the lock file contents, or an empty string when absent or unreadable."""
    path = os.path.join(src_path, lock_file)
    if not os.path.isfile(path):
        return ""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError:
        return ""
