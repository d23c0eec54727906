"""Tests for the operations layered on clean."""

import pytest
from vfspath.core.models import SplitResult
from vfspath.core.pathops import is_abs, split, join, ext, base, dir as dir_of


class TestIsAbs:
    @pytest.mark.parametrize("path,expected", [
        ("", False),
        ("/", True),
        ("/usr/bin/gcc", True),
        ("..", False),
        ("/a/../bb", True),
        (".", False),
        ("./", False),
        ("lala", False),
        ("\\a", False),
    ])
    def test_is_abs(self, path, expected):
        assert is_abs(path) is expected

    def test_custom_separator(self):
        assert is_abs("\\a", "\\") is True
        assert is_abs("/a", "\\") is False


class TestSplit:
    @pytest.mark.parametrize("path,expected", [
        ("a/b", ("a/", "b")),
        ("a/b/", ("a/b/", "")),
        ("a/", ("a/", "")),
        ("a", ("", "a")),
        ("/", ("/", "")),
        ("", ("", "")),
        ("/a/b", ("/a/", "b")),
        ("a//b", ("a//", "b")),
        ("a/../b", ("a/../", "b")),
    ])
    def test_split(self, path, expected):
        assert split(path) == expected

    def test_split_result_fields(self):
        result = split("/srv/www/index.html")
        assert isinstance(result, SplitResult)
        assert result.dir == "/srv/www/"
        assert result.file == "index.html"

    def test_split_is_not_cleaned(self):
        directory, file = split("a/./b//c")
        assert directory == "a/./b//"
        assert file == "c"

    def test_dir_and_file_reassemble(self):
        path = "x//y/./z"
        directory, file = split(path)
        assert directory + file == path

    def test_custom_separator(self):
        assert split("a:b:c", ":") == ("a:b:", "c")


class TestJoin:
    @pytest.mark.parametrize("elems,expected", [
        ((), ""),
        (("",), ""),
        (("", ""), ""),
        (("a",), "a"),
        (("a", "b"), "a/b"),
        (("a", ""), "a"),
        (("", "b"), "b"),
        (("/", "a"), "/a"),
        (("/", "a/b"), "/a/b"),
        (("/", ""), "/"),
        (("//", "a"), "/a"),
        (("/a", "b"), "/a/b"),
        (("a/", "b"), "a/b"),
        (("a/", ""), "a"),
        (("", "a", "", "b"), "a/b"),
        (("a", "../..", "b"), "../b"),
        (("a", "/b"), "a/b"),
    ])
    def test_join(self, elems, expected):
        assert join(*elems) == expected

    def test_all_empty_is_not_dot(self):
        """Unlike clean(""), joining nothing yields the empty string."""
        assert join("", "") == ""
        assert join("", "", ".") == "."

    def test_custom_separator(self):
        assert join("", "a", "", "b", sep=":") == "a:b"
        assert join("a", "b/c", sep=":") == "a:b/c"


class TestExt:
    @pytest.mark.parametrize("path,expected", [
        ("path.go", ".go"),
        ("path.pb.go", ".go"),
        ("file.tar.gz", ".gz"),
        ("a.dir/b", ""),
        ("a.dir/b.go", ".go"),
        ("a.dir/", ""),
        ("noext", ""),
        ("", ""),
        (".bashrc", ".bashrc"),
        ("a/b.", "."),
    ])
    def test_ext(self, path, expected):
        assert ext(path) == expected

    def test_custom_separator(self):
        assert ext("a.d:b", ":") == ""
        assert ext("a:b.txt", ":") == ".txt"


class TestBase:
    @pytest.mark.parametrize("path,expected", [
        ("", "."),
        (".", "."),
        ("/.", "."),
        ("/", "/"),
        ("////", "/"),
        ("x/", "x"),
        ("abc", "abc"),
        ("abc/def", "def"),
        ("a/b/.x", ".x"),
        ("a/b/c.", "c."),
        ("a/b/c.x", "c.x"),
        ("/a/b/", "b"),
        ("a/b//", "b"),
    ])
    def test_base(self, path, expected):
        assert base(path) == expected

    def test_custom_separator(self):
        assert base("a:b::", ":") == "b"
        assert base(":::", ":") == ":"


class TestDir:
    @pytest.mark.parametrize("path,expected", [
        ("", "."),
        (".", "."),
        ("/.", "/"),
        ("/", "/"),
        ("////", "/"),
        ("/foo", "/"),
        ("x/", "x"),
        ("abc", "."),
        ("abc/def", "abc"),
        ("a/b/.x", "a/b"),
        ("a/b/c.", "a/b"),
        ("a/b/c.x", "a/b"),
        ("../x", ".."),
        ("/a/../b/c", "/b"),
        ("a//b//c", "a/b"),
    ])
    def test_dir(self, path, expected):
        assert dir_of(path) == expected

    def test_custom_separator(self):
        assert dir_of("a::b:.:c", ":") == "a:b"
