"""Tests for the command-line interface.

WHY: The CLI is how shell pipelines use the compiler, so its exit codes
and stdout/stderr split matter as much as the output file.
"""

import io
import json

import pytest

from kinetic_captions.cli import build_parser, main

WORDS = {"words": [
    {"word": "Follow", "start": 0.0, "end": 0.5},
    {"word": "the", "start": 0.5, "end": 0.8},
    {"word": "Apostles", "start": 0.8, "end": 1.5},
    {"word": "Diet", "start": 1.5, "end": 3.0},
]}

SRT = """1
00:00:00,000 --> 00:00:01,000
Hello there

2
00:00:01,500 --> 00:00:02,500
General Kenobi
"""


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(WORDS), encoding="utf-8")
    return path


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["in.json"])
        assert args.output_file is None
        assert args.preset == "tiktok"
        assert (args.width, args.height) == (1080, 1920)
        assert args.position is None
        assert not args.no_bounce

    def test_rejects_unknown_preset(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["in.json", "--preset", "nope"])

    def test_rejects_unknown_position(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["in.json", "--position", "left"])


class TestMain:

    def test_writes_file(self, words_file, tmp_path, capsys):
        out = tmp_path / "out.ass"
        main([str(words_file), str(out)])
        text = out.read_text(encoding="utf-8")
        assert text.count("Dialogue: ") == 4
        assert "Style: TikTok," in text
        assert "Wrote 4 events" in capsys.readouterr().err

    def test_prints_to_stdout(self, words_file, capsys):
        main([str(words_file), "--width", "720", "--height", "1280"])
        captured = capsys.readouterr()
        assert captured.out.startswith("[Script Info]")
        assert "PlayResX: 720" in captured.out
        assert "Read 1 caption phrases" in captured.err

    def test_options_reach_the_style(self, words_file, capsys):
        main([
            str(words_file), "--position", "bottom", "--font-size", "100",
            "--active-color", "red", "--no-bounce",
        ])
        out = capsys.readouterr().out
        assert "Style: TikTok,Helvetica Bold,100," in out
        assert "{\\c&H0000FF&}Diet" in out
        assert "\\fscx" not in out

    def test_max_words(self, words_file, capsys):
        main([str(words_file), "--max-words", "2"])
        assert "Read 2 caption phrases" in capsys.readouterr().err

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(WORDS)))
        main(["-"])
        assert capsys.readouterr().out.count("Dialogue: ") == 4

    def test_srt_plain(self, tmp_path, capsys):
        path = tmp_path / "cues.srt"
        path.write_text(SRT, encoding="utf-8")
        main([str(path), "--plain", "--title", "Plain"])
        out = capsys.readouterr().out
        assert "Title: Plain" in out
        assert "Dialogue: 0,0:00:00.00,0:00:01.00,Default,,0,0,0,,Hello there" in out
        assert out.count("Dialogue: ") == 2

    def test_srt_flag_forces_srt(self, tmp_path, capsys):
        path = tmp_path / "cues.txt"
        path.write_text(SRT, encoding="utf-8")
        main([str(path), "--srt"])
        assert capsys.readouterr().out.count("Dialogue: ") == 4


class TestErrors:

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_bad_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text('{"words": "nope"}', encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 1
        assert "Invalid transcript" in capsys.readouterr().err

    def test_empty_transcript(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text('{"words": []}', encoding="utf-8")
        with pytest.raises(SystemExit):
            main([str(path)])
        assert "No captions" in capsys.readouterr().err

    def test_plain_with_only_blank_cues(self, tmp_path, capsys):
        path = tmp_path / "blank.json"
        out = tmp_path / "out.ass"
        path.write_text('[{"text": "   ", "start": 0, "end": 1}]', encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path), str(out), "--plain"])
        assert exc_info.value.code == 1
        assert not out.exists()
        assert "no text" in capsys.readouterr().err

    def test_unreadable_srt_flag_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.txt"), "--srt"])
        assert exc_info.value.code == 1

    def test_invalid_max_words(self, words_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(words_file), "--max-words", "0"])
        assert exc_info.value.code == 1
