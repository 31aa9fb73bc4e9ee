"""Names of the constants written to the generated file.

Stored keys are lowercase; the generator upper-cases them in declarations.
Each collector owns a disjoint subset of these names.
"""

# Version control (shadow_build.vcs)
BRANCH = "branch"
TAG = "tag"
COMMIT_HASH = "commit_hash"
SHORT_COMMIT = "short_commit"
COMMIT_DATE = "commit_date"
COMMIT_AUTHOR = "commit_author"
COMMIT_EMAIL = "commit_email"
GIT_CLEAN = "git_clean"
BUILD_TIME = "build_time"
CARGO_LOCK = "cargo_lock"

# Project (shadow_build.collectors.project_facts)
PROJECT_NAME = "project_name"
PKG_VERSION = "pkg_version"
PKG_DESCRIPTION = "pkg_description"

# Build system (shadow_build.collectors.system_facts)
BUILD_OS = "build_os"
BUILD_TARGET = "build_target"
RUST_VERSION = "rust_version"
RUST_CHANNEL = "rust_channel"
CARGO_VERSION = "cargo_version"
BUILD_RUST_CHANNEL = "build_rust_channel"

VCS_CONSTS = (
    BRANCH,
    TAG,
    COMMIT_HASH,
    SHORT_COMMIT,
    COMMIT_DATE,
    COMMIT_AUTHOR,
    COMMIT_EMAIL,
    GIT_CLEAN,
    BUILD_TIME,
    CARGO_LOCK,
)

PROJECT_CONSTS = (PROJECT_NAME, PKG_VERSION, PKG_DESCRIPTION)

SYSTEM_CONSTS = (
    BUILD_OS,
    BUILD_TARGET,
    RUST_VERSION,
    RUST_CHANNEL,
    CARGO_VERSION,
    BUILD_RUST_CHANNEL,
)

ALL_CONSTS = VCS_CONSTS + PROJECT_CONSTS + SYSTEM_CONSTS

# Timestamp layout shared by COMMIT_DATE, BUILD_TIME and the file header
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
