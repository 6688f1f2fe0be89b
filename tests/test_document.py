"""Unit tests for document assembly and ASS serialization.

WHY: libass silently ignores malformed rows, so a wrong field count or
order shows up as missing captions rather than an error. Lines are
compared verbatim.
"""

import pytest

from kinetic_captions import build_document
from kinetic_captions.document import (
    EVENT_FORMAT,
    STYLE_FORMAT,
    build_caption_style,
    build_plain_document,
    create_default_style,
    create_document,
    create_event,
    create_tiktok_style,
    format_event,
    format_style,
    generate_ass,
    save_document,
)
from kinetic_captions.errors import EmptyCaptionsError
from kinetic_captions.models import CaptionPhrase, Word


class TestStyles:

    def test_default_style_line(self):
        assert format_style(create_default_style()) == (
            "Style: Default,Arial,48,&HFFFFFF,&H00FFFF,&H000000,&H00000000,"
            "-1,0,0,0,100,100,0,0,1,2,0,2,40,40,60,1"
        )

    def test_default_style_overrides(self):
        style = create_default_style("Big", fontsize=96, italic=True)
        assert style.name == "Big"
        assert style.fontsize == 96
        assert format_style(style).split(",")[8] == "-1"

    def test_tiktok_style(self):
        style = create_tiktok_style()
        assert style.fontname == "Helvetica Bold"
        assert style.primary_color == "&H15E7FE"
        assert style.secondary_color == "&HFFFFFF"
        assert style.back_color == "&HFF000000"
        assert (style.alignment, style.margin_v) == (8, 300)

    def test_style_field_count(self):
        line = format_style(create_tiktok_style())
        assert len(line[len("Style: "):].split(",")) == len(STYLE_FORMAT)

    def test_caption_style_reference_canvas(self, tiktok_config):
        style = build_caption_style(tiktok_config, 1080, 1920)
        assert format_style(style) == (
            "Style: TikTok,Helvetica Bold,80,&H15E7FE,&HFFFFFF,&H000000,&HFF000000,"
            "-1,0,0,0,100,100,3,0,1,8,0,8,60,120,300,1"
        )

    def test_caption_style_half_canvas(self, tiktok_config):
        style = build_caption_style(tiktok_config, 540, 960)
        assert style.fontsize == 40
        assert style.outline == 4
        assert style.spacing == 2
        assert (style.margin_l, style.margin_r, style.margin_v) == (30, 60, 150)

    def test_caption_style_colors_follow_config(self, tiktok_config):
        tiktok_config["active_color"] = "#FF0000"
        tiktok_config["inactive_color"] = (0, 0, 255)
        style = build_caption_style(tiktok_config, 1080, 1920)
        assert style.secondary_color == "&H0000FF"
        assert style.primary_color == "&HFF0000"


class TestEvents:

    def test_event_line(self):
        event = create_event(0.0, 1.5, "Hello, world", "TikTok")
        assert format_event(event) == (
            "Dialogue: 0,0:00:00.00,0:00:01.50,TikTok,,0,0,0,,Hello, world"
        )

    def test_event_overrides(self):
        event = create_event(1.0, 2.0, "x", layer=1, effect="Banner")
        assert format_event(event) == "Dialogue: 1,0:00:01.00,0:00:02.00,Default,,0,0,0,Banner,x"

    def test_raw_newlines_become_hard_breaks(self):
        event = create_event(0.0, 1.0, "a\nb\r\nc")
        assert format_event(event) == "Dialogue: 0,0:00:00.00,0:00:01.00,Default,,0,0,0,,a\\Nb\\Nc"


class TestGenerateAss:

    def _doc(self):
        style = create_default_style()
        events = [create_event(0.0, 1.0, "one"), create_event(1.0, 2.0, "two")]
        return create_document(720, 1280, [style], events, title="Demo")

    def test_header(self):
        lines = generate_ass(self._doc()).split("\n")
        assert lines[:7] == [
            "[Script Info]",
            "Title: Demo",
            "ScriptType: v4.00+",
            "PlayResX: 720",
            "PlayResY: 1280",
            "WrapStyle: 2",
            "ScaledBorderAndShadow: yes",
        ]

    def test_sections_in_order(self):
        text = generate_ass(self._doc())
        assert text.index("[Script Info]") < text.index("[V4+ Styles]") < text.index("[Events]")
        assert "Format: " + ", ".join(STYLE_FORMAT) in text
        assert "Format: " + ", ".join(EVENT_FORMAT) in text

    def test_events_in_order_and_no_trailing_newline(self):
        text = generate_ass(self._doc())
        assert text.endswith("Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,two")
        assert text.index(",one") < text.index(",two")

    def test_is_pure(self):
        doc = self._doc()
        assert generate_ass(doc) == generate_ass(doc)

    def test_save(self, tmp_path):
        path = save_document(self._doc(), tmp_path / "out.ass")
        assert path.read_text(encoding="utf-8") == generate_ass(self._doc())


class TestPlainDocument:

    def test_one_event_per_phrase(self, tiktok_config):
        captions = [
            CaptionPhrase("Hello there", 0.0, 1.0),
            CaptionPhrase("General Kenobi", 1.0, 2.5),
        ]
        doc = build_plain_document(captions, tiktok_config, 1080, 1920)
        assert [e.text for e in doc.events] == ["Hello there", "General Kenobi"]
        assert doc.styles[0].name == "Default"
        assert doc.styles[0].primary_color == "&HFFFFFF"

    def test_wraps_and_keeps_cue_breaks(self, tiktok_config):
        tiktok_config["max_chars_per_line"] = 12
        captions = [CaptionPhrase("The quick brown fox\njumps", 0.0, 1.0)]
        doc = build_plain_document(captions, tiktok_config, 1080, 1920)
        assert doc.events[0].text == "The quick\\Nbrown fox\\Njumps"

    def test_empty_cue_skipped(self, tiktok_config, caplog):
        captions = [CaptionPhrase("  ", 0.0, 1.0), CaptionPhrase("ok", 1.0, 2.0)]
        doc = build_plain_document(captions, tiktok_config, 1080, 1920)
        assert len(doc.events) == 1
        assert "Skipping empty cue" in caplog.text

    def test_all_blank_cues_raise(self, tiktok_config):
        captions = [CaptionPhrase("   ", 0.0, 1.0), CaptionPhrase("", 1.0, 2.0)]
        with pytest.raises(EmptyCaptionsError):
            build_plain_document(captions, tiktok_config, 1080, 1920)

    def test_unknown_position(self, tiktok_config):
        tiktok_config["position"] = "left"
        with pytest.raises(ValueError):
            build_plain_document([CaptionPhrase("x", 0, 1)], tiktok_config, 1080, 1920)


class TestLineBreaksInText:
    """A line break inside event text must not split the Dialogue row."""

    def test_multiline_word_stays_inside_its_dialogue_line(self):
        words = [Word("a\nb", 0.0, 0.5), Word("c", 0.5, 1.0)]
        captions = [CaptionPhrase("a b c", 0.0, 1.0, words=words)]
        doc = build_document(captions)
        body = generate_ass(doc).split("[Events]\n", 1)[1].split("\n")
        assert body[0].startswith("Format: ")
        assert all(line.startswith("Dialogue: ") for line in body[1:])
        assert len(body) == 3
