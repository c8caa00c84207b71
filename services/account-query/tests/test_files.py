"""Tests for whole-file reading and its result type."""

from __future__ import annotations

import logging

import pytest

from account_query.files import FileReadError, ReadResult, read_whole_file


def test_reads_lines_joined_by_newline(tmp_path):
    target = tmp_path / "simple.txt"
    target.write_text("Hello\nworld\n", encoding="utf-8")

    result = read_whole_file(target)

    assert result.ok
    assert result.unwrap() == "Hello\nworld"
    assert result.path == target


def test_normalises_windows_and_mac_line_endings(tmp_path):
    target = tmp_path / "mixed.txt"
    target.write_bytes(b"one\r\ntwo\rthree\n")

    assert read_whole_file(target).unwrap() == "one\ntwo\nthree"


def test_keeps_inner_blank_lines(tmp_path):
    target = tmp_path / "blank.txt"
    target.write_text("a\n\nb\n\n", encoding="utf-8")

    assert read_whole_file(target).unwrap() == "a\n\nb\n"


def test_empty_file_reads_as_empty_string(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_text("", encoding="utf-8")

    result = read_whole_file(target)

    assert result.ok
    assert result.unwrap() == ""


def test_relative_name_resolves_against_root(tmp_path):
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "lines.txt").write_text("x\ny", encoding="utf-8")

    assert read_whole_file("nested/lines.txt", root=tmp_path).unwrap() == "x\ny"


def test_missing_file_reports_failure(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="account_query.files")

    result = read_whole_file("absent.txt", root=tmp_path)

    assert not result.ok
    assert result.text is None
    assert result.error
    assert result.text_or("") == ""
    assert "absent.txt" in caplog.text


def test_unwrap_raises_on_failure(tmp_path):
    result = read_whole_file(tmp_path / "absent.txt")

    with pytest.raises(FileReadError) as excinfo:
        result.unwrap()

    assert excinfo.value.path == tmp_path / "absent.txt"
    assert isinstance(excinfo.value, OSError)


def test_directory_is_a_failure(tmp_path):
    assert not read_whole_file(tmp_path).ok


def test_undecodable_content_is_a_failure(tmp_path):
    target = tmp_path / "latin.txt"
    target.write_bytes("café".encode("latin-1"))

    assert not read_whole_file(target, encoding="utf-8").ok
    assert read_whole_file(target, encoding="latin-1").unwrap() == "café"


def test_unknown_encoding_is_a_failure(tmp_path):
    target = tmp_path / "plain.txt"
    target.write_text("text", encoding="utf-8")

    result = read_whole_file(target, encoding="no-such-codec")

    assert not result.ok
    assert "no-such-codec" in result.error


def test_text_or_returns_text_on_success(tmp_path):
    result = ReadResult.success(tmp_path, "content")
    assert result.text_or("fallback") == "content"
    assert ReadResult.failure(tmp_path, "boom").text_or("fallback") == "fallback"
