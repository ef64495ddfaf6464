"""
Display Utility Styles
======================

Responsive display utilities: ``.d-none``, ``.d-md-flex``, ...
The unprefixed classes apply everywhere; ``.d-<tier>-*`` from the tier up.
"""

from functools import partial

from ..media import MediaBlock

DISPLAY_VALUES = ("none", "inline", "inline-block", "block", "grid", "flex")


def _display_rules(infix: str) -> str:
    return "\n".join(
        f"    .d{infix}-{value} {{ display: {value} !important; }}"
        for value in DISPLAY_VALUES
    )


def get_styles(builder):
    """Generate one display block per tier"""
    table = builder.table
    return [
        MediaBlock(table.range_up(name), partial(_display_rules, table.infix(name)))
        for name in table.names
    ]
