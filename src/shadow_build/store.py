"""Fact store: merged mapping of constant names to values."""

from collections import abc
from typing import Dict, Iterable, Iterator, Mapping, Optional

from .models import ConstVal

Fragment = Mapping[str, ConstVal]


class FactStore(abc.Mapping):
    """Read-only mapping of constant name to :class:`ConstVal`.

    Iteration follows insertion order of the merged fragments.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Fragment] = None):
        self._entries: Dict[str, ConstVal] = dict(entries or {})

    def __getitem__(self, name: str) -> ConstVal:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FactStore({self._entries!r})"

    def value(self, name: str) -> str:
        """Return the collected value for ``name``, or an empty string."""
        entry = self._entries.get(name)
        return entry.v if entry is not None else ""

    def without(self, names: Iterable[str]) -> "FactStore":
        """Return a copy of the store lacking the given constant names.

        Names are compared case-insensitively so ``BRANCH`` and ``branch``
        both exclude the branch constant.
        """
        excluded = {n.lower() for n in names}
        return FactStore({k: v for k, v in self._entries.items() if k.lower() not in excluded})


def merge(fragments: Iterable[Fragment]) -> FactStore:
    """Merge fragments in order into a new store.

    A later fragment's entry for the same name replaces an earlier one, so
    re-applying a fragment leaves the result unchanged.

    Args:
        fragments: Ordered fragments (VCS, project, system).

    Returns:
        FactStore: The merged store.
    """
    entries: Dict[str, ConstVal] = {}
    for fragment in fragments:
        for name, value in fragment.items():
            entries[name] = value
    return FactStore(entries)
