"""
Media Query Helpers
===================

Turn resolved breakpoint ranges into ``@media`` preludes and wrap blocks
of style rules in them.

A block is either a ready string or a zero-argument callable returning
one. Callables are only invoked when the block is actually emitted, so
expensive component styles are skipped when a flattened sheet for a
given width does not need them.

Usage:
    >>> media_breakpoint_up("md", ".sidebar { display: block; }")
    '@media (min-width: 768px) {\\n  .sidebar { display: block; }\\n}'
"""

import textwrap
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Union

from .breakpoints import BreakpointTable, Number, ResolvedRange, resolve_table

Block = Union[str, Callable[[], str]]


def format_px(value: Number) -> str:
    """768 -> '768px', 767.98 -> '767.98px', 768.0 -> '768px'"""
    text = format(Decimal(str(value)).normalize(), "f")
    return f"{text}px"


def media_query(media_range: ResolvedRange) -> Optional[str]:
    """
    ``@media`` prelude for a range, or None when the range is unbounded
    (the block then applies unconditionally).
    """
    conditions = []
    if media_range.min is not None:
        conditions.append(f"(min-width: {format_px(media_range.min)})")
    if media_range.max is not None:
        conditions.append(f"(max-width: {format_px(media_range.max)})")
    if not conditions:
        return None
    return "@media " + " and ".join(conditions)


def render_block(block: Block) -> str:
    """Resolve a block to its text"""
    text = block() if callable(block) else block
    if not isinstance(text, str):
        raise TypeError(f"Style block must render to str, got {type(text).__name__}")
    return text.strip()


def wrap(media_range: Optional[ResolvedRange], block: Block) -> str:
    """Wrap a block in the ``@media`` rule for ``media_range``"""
    body = render_block(block)
    prelude = media_query(media_range) if media_range is not None else None
    if prelude is None:
        return body
    return f"{prelude} {{\n{textwrap.indent(body, '  ')}\n}}"


# --------------------------------------------------
# Breakpoint mixins
# --------------------------------------------------
def media_breakpoint_up(name: str, block: Block, table: Optional[BreakpointTable] = None) -> str:
    return wrap(resolve_table(table).range_up(name), block)


def media_breakpoint_down(name: str, block: Block, table: Optional[BreakpointTable] = None) -> str:
    return wrap(resolve_table(table).range_down(name), block)


def media_breakpoint_between(
    lower: str,
    upper: str,
    block: Block,
    table: Optional[BreakpointTable] = None,
) -> str:
    return wrap(resolve_table(table).range_between(lower, upper), block)


def media_breakpoint_only(name: str, block: Block, table: Optional[BreakpointTable] = None) -> str:
    return wrap(resolve_table(table).range_only(name), block)


@dataclass(frozen=True)
class MediaBlock:
    """A block of rules paired with the range it applies to (None = always)"""

    media_range: Optional[ResolvedRange]
    block: Block

    def applies_to(self, width: Number) -> bool:
        return self.media_range is None or self.media_range.contains(width)

    def render(self) -> str:
        return wrap(self.media_range, self.block)

    def render_flat(self) -> str:
        return render_block(self.block)


__all__ = [
    "Block",
    "MediaBlock",
    "format_px",
    "media_query",
    "render_block",
    "wrap",
    "media_breakpoint_up",
    "media_breakpoint_down",
    "media_breakpoint_between",
    "media_breakpoint_only",
]
