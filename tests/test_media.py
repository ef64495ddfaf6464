# -*- coding: utf-8 -*-
"""
tests/test_media.py
===================
@media rendering and block wrapping.
"""
import pytest

from responsive_kit.config.themes.breakpoints import ResolvedRange, range_only, range_up
from responsive_kit.config.themes.media import (
    MediaBlock,
    format_px,
    media_breakpoint_between,
    media_breakpoint_down,
    media_breakpoint_only,
    media_breakpoint_up,
    media_query,
    render_block,
    wrap,
)
from responsive_kit.exceptions import UnknownBreakpointError

RULE = ".sidebar { display: block; }"


class TestFormatPx:

    @pytest.mark.parametrize("value,expected", [
        (0, "0px"),
        (768, "768px"),
        (768.0, "768px"),
        (767.98, "767.98px"),
        (1400, "1400px"),
    ])
    def test_values(self, value, expected):
        assert format_px(value) == expected


class TestMediaQuery:

    def test_min_only(self):
        assert media_query(range_up("md")) == "@media (min-width: 768px)"

    def test_min_and_max(self):
        assert media_query(range_only("md")) == "@media (min-width: 768px) and (max-width: 991.98px)"

    def test_max_only(self):
        assert media_query(ResolvedRange(max=575.98)) == "@media (max-width: 575.98px)"

    def test_unbounded_has_no_prelude(self):
        assert media_query(ResolvedRange()) is None


class TestMixins:

    def test_up(self):
        assert media_breakpoint_up("md", RULE) == (
            "@media (min-width: 768px) {\n  .sidebar { display: block; }\n}"
        )

    def test_down(self):
        assert media_breakpoint_down("md", RULE) == (
            "@media (max-width: 767.98px) {\n  .sidebar { display: block; }\n}"
        )

    def test_between(self):
        assert media_breakpoint_between("sm", "lg", RULE) == (
            "@media (min-width: 576px) and (max-width: 991.98px) {\n"
            "  .sidebar { display: block; }\n"
            "}"
        )

    def test_only(self):
        assert media_breakpoint_only("xxl", RULE) == (
            "@media (min-width: 1400px) {\n  .sidebar { display: block; }\n}"
        )

    def test_unbounded_range_emits_bare_block(self):
        assert media_breakpoint_up("xs", RULE) == RULE
        assert media_breakpoint_between("xs", "xxl", RULE) == RULE

    def test_multiline_block_is_indented(self):
        block = ".a { color: red; }\n.b { color: blue; }"
        assert media_breakpoint_up("sm", block) == (
            "@media (min-width: 576px) {\n  .a { color: red; }\n  .b { color: blue; }\n}"
        )

    def test_custom_table(self, device_table):
        assert media_breakpoint_up("tablet", RULE, table=device_table).startswith(
            "@media (min-width: 640px) {"
        )

    def test_unknown_name(self):
        with pytest.raises(UnknownBreakpointError):
            media_breakpoint_only("huge", RULE)


class TestBlocks:

    def test_callable_block(self):
        assert wrap(range_up("md"), lambda: RULE) == media_breakpoint_up("md", RULE)

    def test_callable_invoked_once_per_render(self):
        calls = []

        def block():
            calls.append(1)
            return RULE

        media_breakpoint_only("md", block)
        assert len(calls) == 1

    def test_block_is_stripped(self):
        assert render_block("\n    .a { color: red; }\n   ") == ".a { color: red; }"

    def test_non_string_block_rejected(self):
        with pytest.raises(TypeError):
            render_block(lambda: 42)

    def test_wrap_without_range(self):
        assert wrap(None, RULE) == RULE


class TestMediaBlock:

    def test_applies_to(self):
        block = MediaBlock(range_only("md"), RULE)
        assert block.applies_to(800)
        assert not block.applies_to(1000)

    def test_unconditional_applies_everywhere(self):
        block = MediaBlock(None, RULE)
        assert block.applies_to(0)
        assert block.render() == RULE

    def test_render_flat_drops_media(self):
        block = MediaBlock(range_only("md"), RULE)
        assert block.render_flat() == RULE
        assert block.render().startswith("@media")
