"""Unit tests for inline override tags.

WHY: Tag strings are copied into every event, so a formatting slip
(``112.0`` instead of ``112``, a negative ``\\t`` bound) breaks every line
of a track at once.
"""

import pytest

from kinetic_captions.tags import (
    alignment_tag,
    bounce_tag,
    color_tag,
    fade_tag,
    position_tag,
    reset_tag,
    transition_tag,
)


class TestSimpleTags:

    def test_color_tag_encodes_color(self):
        assert color_tag("tiktok_yellow") == "{\\c&H15E7FE&}"

    def test_color_tag_accepts_encoded(self):
        assert color_tag("&HFFFFFF") == "{\\c&HFFFFFF&}"

    def test_reset(self):
        assert reset_tag() == "{\\r}"

    def test_fade(self):
        assert fade_tag(150, 0) == "{\\fad(150,0)}"

    def test_transition(self):
        assert transition_tag(0, 100, "\\blur3") == "{\\t(0,100,\\blur3)}"

    def test_integral_floats_print_as_ints(self):
        assert position_tag(540.0, 960.0) == "{\\pos(540,960)}"

    def test_alignment(self):
        assert alignment_tag(8) == "{\\an8}"

    @pytest.mark.parametrize("alignment", [0, 10])
    def test_alignment_out_of_range(self, alignment):
        with pytest.raises(ValueError):
            alignment_tag(alignment)


class TestBounce:
    """Scale up over the first anim window, back down over the last."""

    def test_normal_word(self):
        assert bounce_tag(400, 112, 50) == (
            "{\\t(0,50,\\fscx112\\fscy112)}{\\t(350,400,\\fscx100\\fscy100)}"
        )

    def test_zero_duration(self):
        assert bounce_tag(0) == (
            "{\\t(0,0,\\fscx112\\fscy112)}{\\t(0,0,\\fscx100\\fscy100)}"
        )

    def test_short_word_caps_scale_up_at_half(self):
        # 60 ms word: up ends at 30, down starts at 10; overlap is allowed
        assert bounce_tag(60, 112, 50) == (
            "{\\t(0,30,\\fscx112\\fscy112)}{\\t(10,60,\\fscx100\\fscy100)}"
        )

    def test_odd_duration_keeps_fraction(self):
        assert "{\\t(0,37.5," in bounce_tag(75, 112, 50)

    def test_negative_duration_clamps(self):
        assert bounce_tag(-20) == bounce_tag(0)

    def test_custom_scale(self):
        assert "\\fscx125\\fscy125" in bounce_tag(500, 125, 80)

    @pytest.mark.parametrize("duration", [0, 1, 49, 50, 99, 100, 101, 1500])
    def test_bounds_are_never_negative(self, duration):
        tag = bounce_tag(duration, 112, 50)
        assert "-" not in tag
