"""Configuration management for shadow-build.

Projects may place a ``shadow.yml`` next to their sources::

    output: shadow.rs
    lock_file: Cargo.lock
    generator: shadow-build generator
    author: https://www.github.com/baoyachi
    exclude:
      - cargo_lock
      - git_clean
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml

from .consts import ALL_CONSTS
from .generator import DEFAULT_AUTHOR, DEFAULT_GENERATOR
from .vcs import DEFAULT_LOCK_FILE

CONFIG_FILE = "shadow.yml"
SHADOW_RS = "shadow.rs"

# shadow.yml key -> ShadowConfig attribute
_FILE_KEYS = {
    "output": "output_file",
    "lock_file": "lock_file",
    "generator": "generator_name",
    "author": "author_url",
    "exclude": "exclude",
}


@dataclass
class ShadowConfig:
    """Configuration for one generation run."""
    output_file: str = SHADOW_RS
    lock_file: str = DEFAULT_LOCK_FILE
    generator_name: str = DEFAULT_GENERATOR
    author_url: str = DEFAULT_AUTHOR
    exclude: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def from_shadow_yml(cls, src_path: str = ".", config_file: Optional[str] = None, **overrides) -> 'ShadowConfig':
        """Create configuration from shadow.yml with command-line overrides.

        A missing file yields the defaults. An unreadable or malformed file
        also yields the defaults, with a warning recorded on the config.

        Args:
            src_path: Project source directory searched for ``shadow.yml``.
            config_file: Explicit configuration file path.
            **overrides: Values that override the file (``None`` is ignored).

        Returns:
            ShadowConfig: Configuration with file values and overrides applied.
        """
        config = cls()
        path = config_file or os.path.join(src_path, CONFIG_FILE)

        if config_file or os.path.exists(path):
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
                if not isinstance(data, dict):
                    raise ValueError("top level must be a mapping")
                config._apply(data)
            except (OSError, yaml.YAMLError, ValueError) as e:
                config.warnings.append(f"Ignoring configuration {path}: {e}")

        # Command-line overrides have the highest priority
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)

        config.exclude = list(config.exclude)
        config._check_exclude()
        return config

    def _apply(self, data: dict) -> None:
        # Validate everything before touching the config so a bad file changes nothing
        updates = {}
        unknown = []
        for key, value in data.items():
            attr = _FILE_KEYS.get(key)
            if attr is None:
                unknown.append(key)
                continue
            if attr == "exclude":
                if isinstance(value, str):
                    value = [value]
                if not isinstance(value, list):
                    raise ValueError("exclude must be a list of constant names")
                value = [str(v) for v in value]
            elif not isinstance(value, str) or not value:
                raise ValueError(f"{key} must be a non-empty string")
            updates[attr] = value

        for attr, value in updates.items():
            setattr(self, attr, value)
        for key in unknown:
            self.warnings.append(f"Unknown configuration key: {key}")

    def _check_exclude(self) -> None:
        for name in self.exclude:
            if name.lower() not in ALL_CONSTS:
                self.warnings.append(f"Unknown constant in exclude: {name}")
