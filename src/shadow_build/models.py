"""Typed values stored in the fact store."""

from dataclasses import dataclass
from enum import Enum


class ConstType(Enum):
    """Semantic type of a generated constant."""

    STR = "str"
    OPT_STR = "opt_str"

    def render_value(self, value: str) -> str:
        """Return the literal value to emit for this type.

        Optional strings are always emitted empty so every generated
        declaration stays an unconditional, non-optional constant.
        """
        if self is ConstType.OPT_STR:
            return ""
        return value


@dataclass(frozen=True)
class ConstVal:
    """A collected fact: description, literal value and type tag."""

    desc: str
    v: str = ""
    t: ConstType = ConstType.STR

    @classmethod
    def new(cls, desc: str, v: str = "") -> "ConstVal":
        """Create a plain string constant."""
        return cls(desc=desc, v=v, t=ConstType.STR)

    @classmethod
    def new_opt(cls, desc: str, v: str = "") -> "ConstVal":
        """Create an optional string constant (rendered empty)."""
        return cls(desc=desc, v=v, t=ConstType.OPT_STR)

    @property
    def rendered(self) -> str:
        """Value as it will appear in the generated declaration."""
        return self.t.render_value(self.v)
