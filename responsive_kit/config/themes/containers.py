"""
Container Width System
======================

Maximum container widths per breakpoint tier.
"""

from typing import Dict


class ContainerWidths:
    """
    Standard fixed-container widths (px), keyed by the tier they start at.

    Usage:
        >>> ContainerWidths.as_dict()["md"]
        720
    """

    SM = 540
    MD = 720
    LG = 960
    XL = 1140
    XXL = 1320

    @classmethod
    def as_dict(cls) -> Dict[str, int]:
        """Ordered mapping used by the container component (xs has no fixed width)"""
        return {
            "sm": cls.SM,
            "md": cls.MD,
            "lg": cls.LG,
            "xl": cls.XL,
            "xxl": cls.XXL,
        }
