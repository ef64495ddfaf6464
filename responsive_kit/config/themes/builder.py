"""
Responsive Style Builder
========================

Collects component styles and breakpoint-scoped blocks into one sheet.

Two outputs:
    - ``build()`` emits CSS, conditional blocks wrapped in ``@media``
    - ``build_for_width(width)`` flattens the sheet for one concrete
      viewport width; Qt style sheets have no ``@media`` support, so
      the matching blocks are inlined and the rest dropped
"""

import logging
from typing import Iterable, List, Mapping, Optional

from .breakpoints import BreakpointTable, Number, resolve_table
from .components import DEFAULT_COMPONENTS
from .containers import ContainerWidths
from .media import Block, MediaBlock

logger = logging.getLogger(__name__)


class ResponsiveStyleBuilder:
    """
    Build a responsive stylesheet.

    Usage:
        >>> builder = ResponsiveStyleBuilder()
        >>> builder.up("md", ".sidebar { display: block; }")
        >>> builder.down("md", ".sidebar { display: none; }")
        >>> css = builder.build()
        >>> widget.setStyleSheet(builder.build_for_width(widget.width()))
    """

    def __init__(
        self,
        table: Optional[BreakpointTable] = None,
        container_max_widths: Optional[Mapping[str, int]] = None,
        components: Optional[Iterable] = None,
    ):
        """
        Initialize builder.

        Args:
            table: Breakpoint table (default: DEFAULT_BREAKPOINTS)
            container_max_widths: Tier -> container max width in px
                (default: ContainerWidths for the tiers in ``table``)
            components: Component modules exposing get_styles(builder);
                pass () to emit only the registered blocks
        """
        self.table = resolve_table(table)
        if container_max_widths is None:
            # default widths only for tiers this table knows
            container_max_widths = {
                name: width
                for name, width in ContainerWidths.as_dict().items()
                if name in self.table
            }
        self.container_max_widths = dict(container_max_widths)
        self.components = tuple(DEFAULT_COMPONENTS if components is None else components)
        self._blocks: List[MediaBlock] = []

    # --------------------------------------------------
    # Registration
    # --------------------------------------------------
    def add(self, block: Block) -> "ResponsiveStyleBuilder":
        """Unconditional block"""
        self._blocks.append(MediaBlock(None, block))
        return self

    def up(self, name: str, block: Block) -> "ResponsiveStyleBuilder":
        self._blocks.append(MediaBlock(self.table.range_up(name), block))
        return self

    def down(self, name: str, block: Block) -> "ResponsiveStyleBuilder":
        self._blocks.append(MediaBlock(self.table.range_down(name), block))
        return self

    def between(self, lower: str, upper: str, block: Block) -> "ResponsiveStyleBuilder":
        self._blocks.append(MediaBlock(self.table.range_between(lower, upper), block))
        return self

    def only(self, name: str, block: Block) -> "ResponsiveStyleBuilder":
        self._blocks.append(MediaBlock(self.table.range_only(name), block))
        return self

    # --------------------------------------------------
    # Output
    # --------------------------------------------------
    def blocks(self) -> List[MediaBlock]:
        """Component blocks first, then registered blocks, in order"""
        collected: List[MediaBlock] = []
        for component in self.components:
            collected.extend(component.get_styles(self))
        collected.extend(self._blocks)
        return collected

    def build(self) -> str:
        """Build complete CSS stylesheet"""
        blocks = self.blocks()
        logger.debug(f"Building stylesheet: {len(blocks)} blocks, tiers {', '.join(self.table.names)}")
        return "\n\n".join(block.render() for block in blocks)

    def build_for_width(self, width: Number) -> str:
        """Build the flattened sheet active at ``width`` (whole pixels, as Qt reports)"""
        if width < 0:
            raise ValueError(f"Viewport width cannot be negative, got {width!r}")
        active = [block for block in self.blocks() if block.applies_to(width)]
        logger.debug(
            f"Building stylesheet for {width}px ({self.table.breakpoint_for_width(width)}): "
            f"{len(active)} blocks"
        )
        return "\n\n".join(block.render_flat() for block in active)
