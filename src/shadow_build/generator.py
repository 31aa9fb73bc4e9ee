"""Serialization of the fact store into Rust constant declarations.

Output layout::

    /// Code generated by shadow-build generator. DO NOT EDIT.
    /// Author by https://www.github.com/baoyachi
    /// create time by:2020-08-16 13:48:52

    /// display current branch
    pub const BRANCH :&str = "master";

"""

import re
from datetime import datetime
from typing import IO, Mapping, Optional, Union

from .consts import DATE_FORMAT
from .errors import ShadowError
from .models import ConstVal

DEFAULT_GENERATOR = "shadow-build generator"
DEFAULT_AUTHOR = "https://www.github.com/baoyachi"

VISIBILITY = "pub"
DECL_KIND = "const"
STR_TYPE = "&str"

# Rust literals must be valid UTF-8; lone surrogates (undecodable bytes in
# os.environ) become U+FFFD
REPLACEMENT = "\ufffd"
_SURROGATES = re.compile("[\ud800-\udfff]")

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def escape_str(value: str) -> str:
    """Escape ``value`` for use inside a Rust string literal."""
    out = []
    for ch in value:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{{{ord(ch):x}}}")
        elif 0xD800 <= ord(ch) <= 0xDFFF:
            out.append("\\u{fffd}")
        else:
            out.append(ch)
    return "".join(out)


def _comment_text(text: str) -> str:
    # Doc comments are line comments; keep the text on one line
    return _SURROGATES.sub(REPLACEMENT, " ".join(text.splitlines()))


def render_header(
    now: Optional[datetime] = None,
    generator_name: str = DEFAULT_GENERATOR,
    author_url: str = DEFAULT_AUTHOR,
) -> str:
    created = (now or datetime.now()).strftime(DATE_FORMAT)
    return (
        f"/// Code generated by {_comment_text(generator_name)}. DO NOT EDIT.\n"
        f"/// Author by {_comment_text(author_url)}\n"
        f"/// create time by:{created}\n"
        "\n"
    )


def render_const(name: str, val: ConstVal) -> str:
    """Render one doc comment and declaration, followed by a blank line.

    Raises:
        ValueError: If ``name`` does not form a valid identifier.
    """
    const_name = name.upper()
    if not const_name.isidentifier():
        raise ValueError(f"Invalid constant name: {name!r}")

    desc = _comment_text(val.desc)
    return (
        f"/// {desc}\n"
        f'{VISIBILITY} {DECL_KIND} {const_name} :{STR_TYPE} = "{escape_str(val.rendered)}";\n'
        "\n"
    )


def render(
    store: Mapping[str, ConstVal],
    now: Optional[datetime] = None,
    generator_name: str = DEFAULT_GENERATOR,
    author_url: str = DEFAULT_AUTHOR,
) -> str:
    """Render the complete generated file as a string.

    Raises:
        ValueError: If a name is not an identifier or two names collide
            once upper-cased.
    """
    parts = [render_header(now, generator_name, author_url)]
    seen = {}
    for name, val in store.items():
        const_name = name.upper()
        if const_name in seen:
            raise ValueError(f"Duplicate constant {const_name}: {seen[const_name]!r} and {name!r}")
        seen[const_name] = name
        parts.append(render_const(name, val))
    return "".join(parts)


def generate(
    store: Mapping[str, ConstVal],
    output: Union[str, IO[str]],
    now: Optional[datetime] = None,
    generator_name: str = DEFAULT_GENERATOR,
    author_url: str = DEFAULT_AUTHOR,
) -> None:
    """Write the generated constants for ``store`` to ``output``.

    Args:
        store: Facts to serialize.
        output: Path of the file to create (truncated if it exists) or an
            open text file handle.
        now: Timestamp written into the header.
        generator_name: Generator named in the header.
        author_url: Provenance URL named in the header.

    Raises:
        ShadowError: If the output cannot be created or written.
    """
    content = render(store, now, generator_name, author_url)

    if hasattr(output, "write"):
        target = getattr(output, "name", "<stream>")
        try:
            output.write(content)
            output.flush()
        except OSError as e:
            raise ShadowError(f"Failed to write {target}: {e}") from e
        return

    try:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise ShadowError(f"Failed to write {output}: {e}") from e
