# File: env_editor/tests/profile_patch_test.py
import pytest

from env_editor.profile_patch import (
    export_pattern,
    find_export_value,
    format_export,
    replace_or_append,
    unquote,
)


def test_format_export():
    assert format_export("FOO", "bar baz") == 'export FOO="bar baz"'


def test_format_export_escapes_quotes_and_backslashes():
    assert format_export("X", 'say "hi" C:\\tmp') == 'export X="say \\"hi\\" C:\\\\tmp"'
    assert format_export("X", "$HOME/bin") == 'export X="$HOME/bin"'


@pytest.mark.parametrize("value", ['say "hi"', "C:\\tmp\\", 'a\\"b', "plain"])
def test_format_export_reads_back_unchanged(value):
    content = f"# rc\n{format_export('X', value)}\n"
    assert find_export_value(content, "X") == value


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('"/a:/b"', "/a:/b"),
        ("'/a:/b'", "/a:/b"),
        ("/a:/b", "/a:/b"),
        ('"/a:/b"   ', "/a:/b"),
        ('"mismatched\'', '"mismatched\''),
        ('"', '"'),
        ("", ""),
    ],
)
def test_unquote(raw, expected):
    assert unquote(raw) == expected


def test_find_export_value_first_match_wins():
    content = "# rc\nexport PATH=\"/one\"\n  export PATH='/two'\n"
    assert find_export_value(content, "PATH") == "/one"


def test_find_export_value_requires_exact_name():
    content = 'export PATHX="/x"\nexport MYPATH="/y"\n'
    assert find_export_value(content, "PATH") is None


def test_find_export_value_escapes_regex_characters():
    content = 'export A.B="dot"\nexport AXB="nodot"\n'
    assert find_export_value(content, "A.B") == "dot"
    assert find_export_value('export AXB="nodot"\n', "A.B") is None


def test_find_export_value_indented_line():
    assert find_export_value('\t  export   FOO=bar\n', "FOO") == "bar"


def test_replace_first_matching_line_only():
    content = 'a\nexport FOO="1"\nb\nexport FOO="2"\n'
    out = replace_or_append(content, export_pattern("FOO"), 'export FOO="x"')
    assert out == 'a\nexport FOO="x"\nb\nexport FOO="2"\n'


def test_replace_preserves_everything_else():
    content = "line one\r\n\r\nexport FOO=old\r\n# trailing comment without newline"
    out = replace_or_append(content, export_pattern("FOO"), 'export FOO="new"')
    assert out == 'line one\r\n\r\nexport FOO="new"\r\n# trailing comment without newline'


def test_replace_does_not_swallow_blank_lines_above():
    content = "a\n\n\nexport FOO=1\n"
    out = replace_or_append(content, export_pattern("FOO"), "export FOO=2")
    assert out == "a\n\n\nexport FOO=2\n"


def test_append_when_absent():
    content = "alias ll='ls -l'\n"
    out = replace_or_append(content, export_pattern("FOO"), 'export FOO="1"')
    assert out == "alias ll='ls -l'\n\n# added by env-editor\nexport FOO=\"1\"\n"


def test_append_without_marker():
    out = replace_or_append("x\n", export_pattern("FOO"), "export FOO=1", marker=None)
    assert out == "x\n\nexport FOO=1\n"


def test_replacement_text_is_literal():
    line = r'export WINPATH="C:\new\tools\1"'
    out = replace_or_append("export WINPATH=old\n", export_pattern("WINPATH"), line)
    assert out == line + "\n"
