# File: env_editor/tests/path_list_test.py
import pytest

from env_editor import path_list
from env_editor.platform_utils import Platform

POSIX = Platform.POSIX
WIN = Platform.WINDOWS


def test_decode_trims_and_drops_empty_pieces():
    assert path_list.decode(" /a : /b ::/c: ", POSIX) == ["/a", "/b", "/c"]
    assert path_list.decode(r"C:\bin; ;D:\tools;", WIN) == [r"C:\bin", r"D:\tools"]


def test_decode_empty_and_none():
    assert path_list.decode("", POSIX) == []
    assert path_list.decode(None, POSIX) == []
    assert path_list.decode(" : : ", POSIX) == []


@pytest.mark.parametrize("raw", ["/usr/bin", "  spaced value  ", "C:\\tools"])
def test_decode_without_delimiter_is_single_trimmed_entry(raw):
    assert path_list.decode(raw, POSIX) == [raw.strip()]


def test_delimiter_depends_on_platform():
    # ':' is not a delimiter on Windows, drive letters survive
    assert path_list.decode(r"C:\a;C:\b", WIN) == [r"C:\a", r"C:\b"]
    assert path_list.decode("a;b", POSIX) == ["a;b"]
    assert path_list.encode(["a", "b"], WIN) == "a;b"
    assert path_list.encode(["a", "b"], POSIX) == "a:b"


def test_encode_has_no_trailing_delimiter():
    assert path_list.encode([], POSIX) == ""
    assert path_list.encode(["/a"], POSIX) == "/a"


def test_decode_is_idempotent_after_first_pass():
    raw = " /a ::/b:  /a : "
    once = path_list.decode(raw, POSIX)
    again = path_list.decode(path_list.encode(once, POSIX), POSIX)
    assert once == again == ["/a", "/b", "/a"]


def test_append_is_idempotent():
    entries = ["/a", "/b"]
    assert path_list.append_entry(entries, "/c") is True
    assert path_list.append_entry(entries, "/c") is False
    assert entries == ["/a", "/b", "/c"]


def test_append_uses_exact_comparison():
    entries = ["/usr/bin"]
    assert path_list.append_entry(entries, "/usr/bin/") is True
    assert path_list.append_entry(entries, "/USR/BIN") is True
    assert entries == ["/usr/bin", "/usr/bin/", "/USR/BIN"]


def test_remove_first_occurrence_only():
    entries = ["/a", "/b", "/a"]
    assert path_list.remove_entry(entries, "/a") is True
    assert entries == ["/b", "/a"]


def test_remove_absent_is_noop():
    entries = ["/a", "/b"]
    assert path_list.remove_entry(entries, "/zzz") is False
    assert entries == ["/a", "/b"]


def test_contains_entry():
    assert path_list.contains_entry("/a:/b", "/b", POSIX)
    assert not path_list.contains_entry("/a:/b", "/c", POSIX)
    assert not path_list.contains_entry("", "/c", POSIX)


def test_apply_action_rejects_unknown_action():
    with pytest.raises(ValueError):
        path_list.apply_action([], "/a", "prepend")
