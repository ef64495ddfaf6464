"""
Container Component Styles
==========================

Fluid and fixed-width containers. A fixed container is 100% wide below
its tier and capped at the tier's max width from there up.
"""

from functools import partial

from ..media import MediaBlock
from ....exceptions import UnknownBreakpointError

GUTTER_X = "12px"


def _base_rules(selectors: str) -> str:
    return f"""
    /* ========== CONTAINERS ========== */

    {selectors} {{
        width: 100%;
        padding-right: {GUTTER_X};
        padding-left: {GUTTER_X};
        margin-right: auto;
        margin-left: auto;
    }}
    """


def _max_width_rule(selectors: str, max_width: int) -> str:
    return f"""
    {selectors} {{
        max-width: {max_width}px;
    }}
    """


def get_styles(builder):
    """Generate container blocks"""
    table = builder.table

    all_selectors = [".container", ".container-fluid"]
    all_selectors += [f".container-{name}" for name in table.names if table.infix(name)]
    blocks = [MediaBlock(None, _base_rules(", ".join(all_selectors)))]

    for name, max_width in builder.container_max_widths.items():
        if name not in table:
            raise UnknownBreakpointError(name, detail="container_max_widths")

        # every container variant at or below this tier is capped here
        selectors = []
        for tier in table.names:
            selectors.append(f".container{table.infix(tier)}")
            if tier == name:
                break

        blocks.append(MediaBlock(
            table.range_up(name),
            partial(_max_width_rule, ", ".join(selectors), max_width),
        ))

    return blocks
