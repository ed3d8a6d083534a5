import pytest
from pydantic import ValidationError

from sp_importer.script_parser import ParserState, ScriptParser, load_script_file, parse


def _pairs(entries):
    return [(e.original, e.translation) for e in entries]


def test_parse_two_blocks():
    lines = ["#", "Name", "Hello", "こんにちは", "", "Name2", "Bye", "さようなら"]
    entries = parse(lines, "scene.txt")
    assert _pairs(entries) == [("Hello", "こんにちは"), ("Bye", "さようなら")]
    assert all(e.source_file == "scene.txt" for e in entries)


def test_choice_flushes_pending_entry():
    lines = ["#", "Name", "Hello", "こんにちは", "Choice: pick one", "ひとつ選ぶ"]
    assert _pairs(parse(lines, "a.txt")) == [
        ("Hello", "こんにちは"),
        ("pickone", "ひとつ選ぶ"),
    ]


def test_choice_with_comment_prefix():
    lines = ["#", "Name", "# Choice: Go left", "左へ", "", "Name", "# Choice: Go right", "右へ"]
    assert _pairs(parse(lines, "a.txt")) == [("Goleft", "左へ"), ("Goright", "右へ")]


def test_wrapped_lines_are_joined():
    lines = ["#", "Name", "Line one", "一行目", "line two", "二行目", ""]
    assert _pairs(parse(lines, "a.txt")) == [("Lineonelinetwo", "一行目\\n二行目")]


def test_comment_prefix_is_stripped():
    lines = ["#", "Name", "# Hello", "# こんにちは"]
    assert _pairs(parse(lines, "a.txt")) == [("Hello", "こんにちは")]


def test_section_anchor_is_not_a_name():
    lines = ["#", "# [scene 1]", "Name", "Hi", "やあ"]
    assert _pairs(parse(lines, "a.txt")) == [("Hi", "やあ")]


def test_header_is_skipped():
    lines = ["Title", "Hi", "やあ", "# end of header", "Name", "Bye", "じゃあね"]
    assert _pairs(parse(lines, "a.txt")) == [("Bye", "じゃあね")]


def test_no_header_means_no_entries():
    assert parse(["Name", "Hi", "やあ"], "a.txt") == []


def test_blank_lines_do_not_create_empty_entries():
    lines = ["#", "", "", "Name", "Hi", "やあ", "", "", ""]
    assert _pairs(parse(lines, "a.txt")) == [("Hi", "やあ")]


def test_partial_entry_is_flushed():
    lines = ["#", "Name", "Unanswered", "", "Name", "Hi", "やあ"]
    assert _pairs(parse(lines, "a.txt")) == [("Unanswered", ""), ("Hi", "やあ")]


def test_original_is_normalized_translation_is_not():
    lines = ["#", "Name", "「待って……」", "「Wait…」"]
    assert _pairs(parse(lines, "a.txt")) == [("待って", "「Wait…」")]


def test_state_transitions():
    parser = ScriptParser("a.txt")
    assert parser.state is ParserState.AWAITING_SECTION_NAME
    assert parser.feed("# [anchor]") is ParserState.AWAITING_SECTION_NAME
    assert parser.feed("Name") is ParserState.AWAITING_ORIGINAL
    assert parser.feed("Hi") is ParserState.AWAITING_TRANSLATION
    assert parser.feed("やあ") is ParserState.AWAITING_ORIGINAL
    assert parser.feed("Choice: A") is ParserState.AWAITING_TRANSLATION
    assert len(parser.entries) == 1
    assert parser.feed("") is ParserState.AWAITING_SECTION_NAME
    assert _pairs(parser.finish()) == [("Hi", "やあ"), ("A", "")]


def test_entries_are_immutable():
    entry = parse(["#", "Name", "Hi", "やあ"], "a.txt")[0]
    with pytest.raises(ValidationError):
        entry.translation = "changed"


def test_load_script_file(tmp_path):
    path = tmp_path / "chapter01.txt"
    path.write_text("Chapter 1\r\n#\r\nName\r\nHello\r\nこんにちは\r\n", encoding="utf-8")
    entries = load_script_file(path)
    assert _pairs(entries) == [("Hello", "こんにちは")]
    assert entries[0].source_file == "chapter01.txt"


def test_load_missing_script_file(tmp_path):
    assert load_script_file(tmp_path / "missing.txt") == []
