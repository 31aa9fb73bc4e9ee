"""Project and build-system facts.

Project facts come from the variables cargo exports to build scripts.
System facts combine the target description from the environment with the
version strings the installed Rust toolchain reports about itself. Anything
missing is recorded as an empty string.
"""

import os
import subprocess
from typing import Dict, List, Mapping, Optional

from .consts import (
    BUILD_OS,
    BUILD_RUST_CHANNEL,
    BUILD_TARGET,
    CARGO_VERSION,
    PKG_DESCRIPTION,
    PKG_VERSION,
    PROJECT_NAME,
    RUST_CHANNEL,
    RUST_VERSION,
)
from .models import ConstVal
from .utils.helpers import detect_arch, detect_platform, find_tool

DESCRIPTIONS = {
    PROJECT_NAME: "display project name",
    PKG_VERSION: "display project version",
    PKG_DESCRIPTION: "display project description",
    BUILD_OS: "display build system os",
    BUILD_TARGET: "display build target triple",
    RUST_VERSION: "display build system rust version",
    RUST_CHANNEL: "display build system rust channel",
    CARGO_VERSION: "display build system cargo version",
    BUILD_RUST_CHANNEL: "display build rust channel, debug or release",
}

PROBE_TIMEOUT = 10


class Toolchain:
    """Runs toolchain commands and returns their self-reported versions."""

    def __init__(self, env: Optional[Mapping[str, str]] = None, timeout: int = PROBE_TIMEOUT):
        """Initialize the toolchain probe.

        Args:
            env: Environment snapshot; ``RUSTC`` and ``CARGO`` select the
                executables cargo is building with, and ``PATH`` is where
                they are looked up.
            timeout: Seconds to wait for each command.
        """
        env = env or {}
        self.rustc = env.get("RUSTC") or "rustc"
        self.cargo = env.get("CARGO") or "cargo"
        self.rustup = "rustup"
        self.search_path = env.get("PATH") or os.defpath
        self.timeout = timeout

    def run(self, args: List[str]) -> str:
        """Run a command and return its stripped stdout, or "" on any failure."""
        executable = find_tool(args[0], self.search_path) if args else None
        if executable is None:
            return ""
        try:
            result = subprocess.run(
                [executable] + list(args[1:]),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError):
            return ""
        if result.returncode != 0:
            return ""
        return result.stdout.strip()

    def rustc_version(self) -> str:
        return self.run([self.rustc, "-V"])

    def cargo_version(self) -> str:
        return self.run([self.cargo, "-V"])

    def rustup_default(self) -> str:
        return self.run([self.rustup, "default"])


def project_facts(env: Mapping[str, str]) -> Dict[str, ConstVal]:
    """Facts declared by the project, as exported by the build orchestration."""
    values = {
        PROJECT_NAME: env.get("CARGO_PKG_NAME", ""),
        PKG_VERSION: env.get("CARGO_PKG_VERSION", ""),
        PKG_DESCRIPTION: env.get("CARGO_PKG_DESCRIPTION", ""),
    }
    return {name: ConstVal.new(DESCRIPTIONS[name], value) for name, value in values.items()}


def build_os(env: Mapping[str, str]) -> str:
    """Return ``<os>-<arch>`` for the build, preferring cargo's target cfg."""
    os_name = env.get("CARGO_CFG_TARGET_OS") or detect_platform()
    arch = env.get("CARGO_CFG_TARGET_ARCH") or detect_arch()
    return f"{os_name}-{arch}"


def system_facts(env: Mapping[str, str], toolchain: Optional[Toolchain] = None) -> Dict[str, ConstVal]:
    """Facts about the build system and Rust toolchain.

    Args:
        env: Environment snapshot.
        toolchain: Probe used to query toolchain versions; defaults to one
            built from ``env``.

    Returns:
        Dict[str, ConstVal]: One entry for every system constant name.
    """
    if toolchain is None:
        toolchain = Toolchain(env)

    values = {
        BUILD_OS: build_os(env),
        BUILD_TARGET: env.get("TARGET", ""),
        RUST_VERSION: toolchain.rustc_version(),
        RUST_CHANNEL: toolchain.rustup_default(),
        CARGO_VERSION: toolchain.cargo_version(),
        BUILD_RUST_CHANNEL: env.get("PROFILE", ""),
    }
    return {name: ConstVal.new(DESCRIPTIONS[name], value) for name, value in values.items()}
