"""Rendering of ranked results into output lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

import click

from docseek.core.records import RankedResult, ScoredCandidate
from docseek.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DELIMITER = "\t"


class Kind(str, Enum):
    """Entry kinds with a known glyph."""

    GUIDE = "guide"
    SECTION = "section"
    FUNCTION = "function"
    METHOD = "method"
    CLASS = "class"
    STRUCT = "struct"
    ENUM = "enum"
    CONSTANT = "constant"
    PROPERTY = "property"
    MACRO = "macro"
    INTERFACE = "interface"
    TYPEDEF = "typedef"
    ATTRIBUTE = "attribute"
    EVENT = "event"
    VARIABLE = "variable"
    MODULE = "module"
    CONSTRUCTOR = "constructor"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str) -> "Kind":
        """Map a stored type string to a Kind (UNKNOWN if unrecognized)."""
        key = raw.lower()
        key = KIND_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


KIND_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "_struct": "struct",
        "type": "typedef",
    }
)


@dataclass(frozen=True)
class Glyph:
    """A short marker shown in front of a result line.

    Attributes:
        symbol: Text of the glyph (often a Nerd Font code point)
        color: click color name, or None for no color
    """

    symbol: str
    color: Optional[str] = None

    def render(self, color: bool = True) -> str:
        if color and self.color:
            return click.style(self.symbol, fg=self.color)
        return self.symbol


DEFAULT_GLYPHS: Mapping[Kind, Glyph] = MappingProxyType(
    {
        Kind.GUIDE: Glyph("\U000f05da", "green"),
        Kind.SECTION: Glyph("§", "yellow"),
        Kind.FUNCTION: Glyph("ƒ", "cyan"),
        Kind.METHOD: Glyph("m", "blue"),
        Kind.CLASS: Glyph("\U0001f152", "magenta"),
        Kind.STRUCT: Glyph("\U0001f162", "red"),
        Kind.ENUM: Glyph("\U0001f134", "magenta"),
        Kind.CONSTANT: Glyph("\U0001d46a", "blue"),
        Kind.PROPERTY: Glyph("\uf084", "yellow"),
        Kind.MACRO: Glyph("μ", "cyan"),
        Kind.INTERFACE: Glyph("\U0001f138", "magenta"),
        Kind.TYPEDEF: Glyph("\U0001d64f", "cyan"),
        Kind.ATTRIBUTE: Glyph("\U000f04f9", "yellow"),
        Kind.EVENT: Glyph("\uea86", "cyan"),
        Kind.VARIABLE: Glyph("\U0001d69f", "blue"),
        Kind.MODULE: Glyph("\U000f03d6", "yellow"),
        Kind.CONSTRUCTOR: Glyph("\uf135", "red"),
    }
)


def build_glyph_table(
    overrides: Optional[Mapping[str, Any]] = None,
    base: Mapping[Kind, Glyph] = DEFAULT_GLYPHS,
) -> Mapping[Kind, Glyph]:
    """Return a read-only glyph table with overrides applied.

    Args:
        overrides: Mapping of kind name -> {"symbol": ..., "color": ...}
            (or a plain symbol string), usually from ``output.glyphs``
        base: Table to start from

    Returns:
        New read-only mapping of Kind -> Glyph
    """
    table: Dict[Kind, Glyph] = dict(base)

    for raw_kind, override in (overrides or {}).items():
        kind = Kind.parse(str(raw_kind))
        if kind is Kind.UNKNOWN:
            logger.warning(f"Ignoring glyph override for unknown kind '{raw_kind}'")
            continue

        current = table.get(kind, Glyph(""))
        if isinstance(override, str):
            table[kind] = Glyph(override, current.color)
        elif isinstance(override, Mapping):
            table[kind] = Glyph(
                str(override.get("symbol", current.symbol)),
                override.get("color", current.color),
            )
        else:
            logger.warning(
                f"Ignoring malformed glyph override for '{raw_kind}': {override!r}"
            )

    return MappingProxyType(table)


class ResultFormatter:
    """Format ranked candidates as delimited output lines.

    Lines have four columns: glyph, name, kind, path. Without decoration
    the glyph column is left empty so columns line up either way.

    Example:
        >>> formatter = ResultFormatter(decorate=True)
        >>> for line in formatter.format_all(result):
        ...     click.echo(line)
    """

    def __init__(
        self,
        decorate: bool = False,
        glyphs: Mapping[Kind, Glyph] = DEFAULT_GLYPHS,
        delimiter: str = DEFAULT_DELIMITER,
        color: bool = True,
    ):
        """Initialize formatter.

        Args:
            decorate: Prefix lines with kind glyphs
            glyphs: Kind -> Glyph table
            delimiter: Column separator
            color: Color glyphs with ANSI styles
        """
        self.decorate = decorate
        self.glyphs = glyphs
        self.delimiter = delimiter
        self.color = color

    def marker(self, kind: str) -> str:
        """Glyph for a raw kind string; unknown kinds pass through unchanged."""
        glyph = self.glyphs.get(Kind.parse(kind))
        if glyph is None:
            return kind
        return glyph.render(color=self.color)

    def format(self, candidate: ScoredCandidate) -> str:
        prefix = self.marker(candidate.kind) if self.decorate else ""
        return self.delimiter.join(
            [prefix, candidate.name, candidate.kind, str(candidate.resolved_path)]
        )

    def format_all(self, result: RankedResult) -> List[str]:
        return [self.format(candidate) for candidate in result]
