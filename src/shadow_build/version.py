"""Version management for shadow-build."""

import re
from pathlib import Path

# Build-time version constant (will be injected during packaging)
__BUILD_VERSION__ = None


def get_version() -> str:
    """
    Get the current version of shadow-build.

    First tries the build-time constant, then falls back to pyproject.toml parsing.

    Returns:
        str: Version string
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"

        if pyproject_path.exists():
            with open(pyproject_path, 'r', encoding='utf-8') as f:
                content = f.read()

            match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
            if match:
                version = match.group(1)
                # x.y.z or x.y.z{a|b|rc}N
                if re.match(r'^\d+\.\d+\.\d+(a\d+|b\d+|rc\d+)?$', version):
                    return version
    except OSError:
        pass

    # Installed as a regular (non-editable) distribution
    try:
        from importlib.metadata import PackageNotFoundError, version as dist_version
        return dist_version("shadow-build")
    except PackageNotFoundError:
        pass

    return "unknown"


__version__ = get_version()
