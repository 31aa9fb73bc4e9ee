"""
shadow-build - Embed build provenance into generated Rust constants.

Usage (from a build step, with cargo's environment available):
    import os
    import shadow_build

    result = shadow_build.build(".", os.environ["OUT_DIR"])
    if not result.success:
        raise SystemExit("; ".join(result.errors))

The generated ``shadow.rs`` holds constants such as BRANCH, COMMIT_HASH,
BUILD_TIME and RUST_VERSION that the crate can ``include!`` at compile time.
"""

from .builder import BuildResult, Shadow, ShadowBuilder, build, output_path
from .ci import CIPlatform, detect
from .collectors import Toolchain, project_facts, system_facts
from .config import ShadowConfig
from .env import EnvironmentSnapshot
from .errors import ShadowError
from .generator import escape_str, generate, render
from .models import ConstType, ConstVal
from .store import FactStore, merge
from .vcs import extract
from .version import get_version

__version__ = get_version()

__all__ = [
    # Primary API
    "build",
    "Shadow",
    "ShadowBuilder",
    "BuildResult",
    "output_path",
    # Pipeline steps
    "detect",
    "extract",
    "project_facts",
    "system_facts",
    "merge",
    "generate",
    "render",
    "escape_str",
    # Models
    "CIPlatform",
    "ConstType",
    "ConstVal",
    "EnvironmentSnapshot",
    "FactStore",
    "ShadowConfig",
    "Toolchain",
    # Exceptions
    "ShadowError",
    # Utilities
    "get_version",
]
