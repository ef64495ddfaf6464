"""Default Responsive Preset"""

from ..builder import ResponsiveStyleBuilder


def get_stylesheet(width=None, table=None):
    """
    Get the default responsive stylesheet.

    Preset wrapper around ResponsiveStyleBuilder with the default
    container and display components.

    Args:
        width: Viewport width in pixels; None emits CSS with @media blocks,
            a number emits the flattened sheet for that width
        table: Breakpoint table (default: DEFAULT_BREAKPOINTS)

    Returns:
        Complete stylesheet string
    """
    builder = ResponsiveStyleBuilder(table=table)

    if width is None:
        return builder.build()
    return builder.build_for_width(width)
