"""Read-only snapshot of the process environment."""

import os
from collections import abc
from typing import Dict, Iterator, Mapping, Optional


class EnvironmentSnapshot(abc.Mapping):
    """Immutable mapping of environment variable names to values.

    Captured once at the start of a build and passed explicitly to every
    component that needs environment data. Nothing below the builder reads
    ``os.environ`` directly.
    """

    __slots__ = ("_vars",)

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        self._vars: Dict[str, str] = dict(variables or {})

    @classmethod
    def capture(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvironmentSnapshot":
        """Snapshot the given mapping, or the current process environment."""
        if environ is None:
            environ = os.environ
        return cls(environ)

    def __getitem__(self, key: str) -> str:
        return self._vars[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"EnvironmentSnapshot({len(self._vars)} variables)"
