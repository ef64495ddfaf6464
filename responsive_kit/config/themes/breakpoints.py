"""
Breakpoint System
=================

Named viewport breakpoints and media-query boundary resolution.

A breakpoint table maps tier names to the minimum viewport width (px) at
which the tier starts, ordered from smallest to largest. Every helper here
is a pure lookup over that table; the results are consumed by
``media.py`` (CSS ``@media`` rendering) and ``builder.py``.

Quick Start:
    >>> from responsive_kit.config.themes.breakpoints import range_only
    >>> range_only("md")
    ResolvedRange(min=768, max=991.98)
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from ...exceptions import InvalidBreakpointTableError, UnknownBreakpointError

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Sub-pixel margin subtracted from max boundaries so adjacent ranges never
# both match a fractional viewport width sitting exactly on a boundary.
DEFAULT_EPSILON = 0.02


@dataclass(frozen=True)
class ResolvedRange:
    """
    Inclusive viewport-width window. ``None`` means no bound on that side.

    Usage:
        >>> ResolvedRange(min=576, max=991.98).contains(800)
        True
    """

    min: Optional[Number] = None
    max: Optional[Number] = None

    @property
    def is_unbounded(self) -> bool:
        """True when the range matches every viewport width"""
        return self.min is None and self.max is None

    def contains(self, width: Number) -> bool:
        if self.min is not None and width < self.min:
            return False
        if self.max is not None and width > self.max:
            return False
        return True

    def to_dict(self) -> Dict[str, Optional[Number]]:
        return {"min": self.min, "max": self.max}


class BreakpointTable:
    """
    Immutable ordered table of breakpoint tiers.

    Usage:
        >>> table = BreakpointTable([("xs", 0), ("sm", 576), ("md", 768)])
        >>> table.next("xs")
        'sm'
        >>> table.max_boundary("sm")
        575.98

    Invariants (checked on construction):
        - at least one tier, names unique and non-empty
        - widths non-negative and strictly increasing
        - the first tier starts at 0
    """

    __slots__ = ("_names", "_widths", "_epsilon")

    def __init__(
        self,
        entries: Iterable[Tuple[str, Number]],
        epsilon: float = DEFAULT_EPSILON,
    ):
        pairs = [tuple(entry) for entry in entries]
        self._validate(pairs, epsilon)

        self._names: Tuple[str, ...] = tuple(name for name, _ in pairs)
        self._widths: Mapping[str, Number] = MappingProxyType(dict(pairs))
        self._epsilon = epsilon

        logger.debug(f"Breakpoint table created: {', '.join(self._names)}")

    # --------------------------------------------------
    # Construction helpers
    # --------------------------------------------------
    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Number],
        epsilon: float = DEFAULT_EPSILON,
    ) -> "BreakpointTable":
        """Build a table from an ordered mapping (insertion order is kept)"""
        return cls(mapping.items(), epsilon=epsilon)

    def extend(self, **extra: Number) -> "BreakpointTable":
        """
        Return a new table with extra (or overridden) tiers.

        Tiers are re-ordered by width, so project-specific tiers can be
        slotted between the existing ones.

        Example:
            >>> DEFAULT_BREAKPOINTS.extend(xxxl=1920).names[-1]
            'xxxl'
        """
        merged = dict(self._widths)
        merged.update(extra)
        ordered = sorted(merged.items(), key=lambda item: item[1])
        return BreakpointTable(ordered, epsilon=self._epsilon)

    def with_epsilon(self, epsilon: float) -> "BreakpointTable":
        """Same tiers, different max-boundary margin"""
        return BreakpointTable(self._widths.items(), epsilon=epsilon)

    @staticmethod
    def _validate(pairs, epsilon) -> None:
        if not pairs:
            raise InvalidBreakpointTableError("Breakpoint table requires at least one tier.")

        if isinstance(epsilon, bool) or not isinstance(epsilon, (int, float)) or epsilon < 0:
            raise InvalidBreakpointTableError(
                f"Breakpoint epsilon must be a non-negative number, got {epsilon!r}."
            )

        seen = set()
        previous: Optional[Number] = None
        for entry in pairs:
            if len(entry) != 2:
                raise InvalidBreakpointTableError(
                    f"Breakpoint entries must be (name, width) pairs, got {entry!r}."
                )
            name, width = entry
            if not isinstance(name, str) or not name:
                raise InvalidBreakpointTableError(
                    f"Breakpoint name must be a non-empty string, got {name!r}."
                )
            if name in seen:
                raise InvalidBreakpointTableError(f"Duplicate breakpoint {name!r}.")
            if isinstance(width, bool) or not isinstance(width, (int, float)):
                raise InvalidBreakpointTableError(
                    f"Breakpoint {name!r} width must be a number, got {width!r}."
                )
            if width < 0:
                raise InvalidBreakpointTableError(f"Breakpoint {name!r} width cannot be negative.")
            if previous is None and width != 0:
                raise InvalidBreakpointTableError(
                    f"First breakpoint {name!r} must start at 0, got {width!r}."
                )
            if previous is not None and width <= previous:
                raise InvalidBreakpointTableError(
                    "Breakpoints must be ordered from smallest to largest width."
                )
            seen.add(name)
            previous = width

    # --------------------------------------------------
    # Read-only access
    # --------------------------------------------------
    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def items(self) -> Tuple[Tuple[str, Number], ...]:
        return tuple((name, self._widths[name]) for name in self._names)

    def min_width(self, name: str) -> Number:
        """Raw table width for ``name``"""
        try:
            return self._widths[name]
        except (KeyError, TypeError):
            raise UnknownBreakpointError(name) from None

    def __contains__(self, name) -> bool:
        return name in self._widths

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BreakpointTable):
            return NotImplemented
        return self.items() == other.items() and self._epsilon == other._epsilon

    def __hash__(self) -> int:
        return hash((self.items(), self._epsilon))

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={width}" for name, width in self.items())
        return f"BreakpointTable({body}, epsilon={self._epsilon})"

    # --------------------------------------------------
    # Boundary resolution
    # --------------------------------------------------
    def next(self, name: str) -> Optional[str]:
        """Name of the following tier, or None for the largest"""
        self.min_width(name)
        index = self._names.index(name)
        if index + 1 < len(self._names):
            return self._names[index + 1]
        return None

    def min_boundary(self, name: str) -> Optional[Number]:
        """Minimum width for ``name``; None for the tier starting at 0"""
        width = self.min_width(name)
        return width if width != 0 else None

    def max_boundary(self, name: str) -> Optional[float]:
        """
        Maximum width just below ``name``: its minimum width minus epsilon.

        None for the tier starting at 0 and for the largest tier, neither
        of which has an upper edge to query against.

        Example:
            >>> max_boundary("md")
            767.98
        """
        width = self.min_width(name)
        if width == 0 or name == self._names[-1]:
            return None
        return float(Decimal(str(width)) - Decimal(str(self._epsilon)))

    def infix(self, name: str) -> str:
        """Class-name infix: '' for the smallest tier, '-md' for md, ..."""
        return "" if self.min_boundary(name) is None else f"-{name}"

    def range_up(self, name: str) -> ResolvedRange:
        """``name`` and every wider tier"""
        return ResolvedRange(min=self.min_boundary(name), max=None)

    def range_down(self, name: str) -> ResolvedRange:
        """Everything narrower than ``name``'s minimum width"""
        return ResolvedRange(min=None, max=self.max_boundary(name))

    def range_between(self, lower: str, upper: str) -> ResolvedRange:
        """From ``lower``'s minimum up to ``upper``'s maximum boundary"""
        low = self.min_boundary(lower)
        high = self.max_boundary(upper)

        if low is not None and high is not None:
            return ResolvedRange(min=low, max=high)
        if high is None:
            return self.range_up(lower)
        return self.range_down(upper)

    def range_only(self, name: str) -> ResolvedRange:
        """
        Only the ``name`` tier.

        The largest tier has no upper edge, so for the tier just below it
        this is ``range_up(name)`` and also matches the largest tier:
        ``range_only("xl")`` is ``{min: 1200, max: None}``.
        """
        following = self.next(name)
        if following is None:
            return self.range_up(name)
        return self.range_between(name, following)

    def breakpoint_for_width(self, width: Number) -> str:
        """
        Tier active at a concrete viewport width.

        Meant for whole-pixel widths (Qt reports ints). A fractional width
        inside the epsilon gap, e.g. 767.99, still resolves to "sm", but no
        max-bounded range of "sm" contains it.

        Example:
            >>> breakpoint_for_width(800)
            'md'
        """
        if width < 0:
            raise ValueError(f"Viewport width cannot be negative, got {width!r}")
        for name in reversed(self._names):
            if width >= self._widths[name]:
                return name
        return self._names[0]


# --------------------------------------------------
# Default table
# --------------------------------------------------
DEFAULT_BREAKPOINT_WIDTHS: Mapping[str, int] = MappingProxyType({
    "xs": 0,
    "sm": 576,
    "md": 768,
    "lg": 992,
    "xl": 1200,
    "xxl": 1400,
})

DEFAULT_BREAKPOINTS = BreakpointTable.from_mapping(DEFAULT_BREAKPOINT_WIDTHS)


def resolve_table(table: Optional[BreakpointTable] = None) -> BreakpointTable:
    """The injected table, or the default one"""
    return DEFAULT_BREAKPOINTS if table is None else table


# --------------------------------------------------
# Module-level shorthands (default table unless one is injected)
# --------------------------------------------------
def next_breakpoint(name: str, table: Optional[BreakpointTable] = None) -> Optional[str]:
    return resolve_table(table).next(name)


def min_boundary(name: str, table: Optional[BreakpointTable] = None) -> Optional[Number]:
    return resolve_table(table).min_boundary(name)


def max_boundary(name: str, table: Optional[BreakpointTable] = None) -> Optional[float]:
    return resolve_table(table).max_boundary(name)


def infix(name: str, table: Optional[BreakpointTable] = None) -> str:
    return resolve_table(table).infix(name)


def range_up(name: str, table: Optional[BreakpointTable] = None) -> ResolvedRange:
    return resolve_table(table).range_up(name)


def range_down(name: str, table: Optional[BreakpointTable] = None) -> ResolvedRange:
    return resolve_table(table).range_down(name)


def range_between(
    lower: str,
    upper: str,
    table: Optional[BreakpointTable] = None,
) -> ResolvedRange:
    return resolve_table(table).range_between(lower, upper)


def range_only(name: str, table: Optional[BreakpointTable] = None) -> ResolvedRange:
    return resolve_table(table).range_only(name)


def breakpoint_for_width(width: Number, table: Optional[BreakpointTable] = None) -> str:
    return resolve_table(table).breakpoint_for_width(width)


__all__ = [
    "DEFAULT_EPSILON",
    "DEFAULT_BREAKPOINT_WIDTHS",
    "DEFAULT_BREAKPOINTS",
    "BreakpointTable",
    "resolve_table",
    "ResolvedRange",
    "next_breakpoint",
    "min_boundary",
    "max_boundary",
    "infix",
    "range_up",
    "range_down",
    "range_between",
    "range_only",
    "breakpoint_for_width",
]
