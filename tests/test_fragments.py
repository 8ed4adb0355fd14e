"""Tests for optional path fragments and their conversion to text."""

import os
import sys
from pathlib import PurePosixPath

import pytest

from pathstr import (
    InvalidUtf8Error,
    extension,
    file_name,
    file_stem,
    parent,
    try_to_str,
    try_to_str_opt,
)


class TestDecomposition:
    def test_full_path_and_fragments(self):
        p = PurePosixPath("abc/def/ghi.xyz")

        assert try_to_str(p) == "abc/def/ghi.xyz"
        assert try_to_str_opt(parent(p)) == "abc/def"
        assert try_to_str_opt(file_name(p)) == "ghi.xyz"
        assert try_to_str_opt(file_stem(p)) == "ghi"
        assert try_to_str_opt(extension(p)) == "xyz"

    def test_no_extension_is_absent(self):
        p = PurePosixPath("abc/README")
        assert try_to_str_opt(extension(p)) is None
        assert try_to_str_opt(file_stem(p)) == "README"

    def test_root_has_no_parent_or_name(self):
        root = PurePosixPath("/")
        assert parent(root) is None
        assert file_name(root) is None
        assert file_stem(root) is None
        assert extension(root) is None

    def test_empty_path_has_no_parent(self):
        assert parent(PurePosixPath("")) is None
        assert file_name(PurePosixPath("")) is None

    def test_relative_single_component_has_empty_parent(self):
        assert parent(PurePosixPath("abc")) == ""
        assert try_to_str_opt(parent("abc")) == ""
        assert try_to_str_opt(parent("abc.txt")) == ""

    def test_explicit_dot_parent_is_kept(self):
        assert parent("./abc") == "."

    def test_absolute_single_component(self):
        p = PurePosixPath("/abc")
        assert try_to_str_opt(parent(p)) == "/"
        assert file_name(p) == "abc"

    def test_dotdot_has_no_file_name(self):
        assert file_name(PurePosixPath("abc/..")) is None
        assert extension(PurePosixPath("abc/..")) is None


class TestStemAndExtension:
    @pytest.mark.parametrize(
        ("name", "stem", "ext"),
        [
            ("ghi.xyz", "ghi", "xyz"),
            ("archive.tar.gz", "archive.tar", "gz"),
            (".bashrc", ".bashrc", None),
            (".config.toml", ".config", "toml"),
            ("trailing.", "trailing", ""),
            ("...", "..", ""),
            ("plain", "plain", None),
        ],
    )
    def test_split(self, name, stem, ext):
        p = PurePosixPath("dir") / name
        assert file_stem(p) == stem
        assert extension(p) == ext


class TestAbsence:
    @pytest.mark.parametrize(
        "accessor", [parent, file_name, file_stem, extension], ids=lambda f: f.__name__
    )
    def test_absent_fragment_is_not_an_error(self, accessor):
        assert try_to_str_opt(accessor(PurePosixPath("/"))) is None


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX surrogateescape paths")
class TestInvalidFragments:
    def test_invalid_file_name(self):
        raw = b"dir/bad\xff.txt"
        p = PurePosixPath(os.fsdecode(raw))

        assert try_to_str_opt(parent(p)) == "dir"
        assert try_to_str_opt(extension(p)) == "txt"
        with pytest.raises(InvalidUtf8Error) as exc_info:
            try_to_str_opt(file_name(p))
        assert exc_info.value.display == "bad�.txt"
        with pytest.raises(InvalidUtf8Error):
            try_to_str_opt(file_stem(p))

    def test_invalid_parent(self):
        p = PurePosixPath(os.fsdecode(b"\xf0\x90\x80/ok.txt"))

        assert try_to_str_opt(file_name(p)) == "ok.txt"
        with pytest.raises(InvalidUtf8Error) as exc_info:
            try_to_str_opt(parent(p))
        assert exc_info.value.display == b"\xf0\x90\x80".decode("utf-8", "replace")

    def test_bytes_input(self):
        assert file_name(b"dir/name.txt") == "name.txt"
        assert extension(b"dir/name.txt") == "txt"
