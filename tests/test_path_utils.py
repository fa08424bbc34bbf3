"""Tests for path_utils module."""

import pytest

from pathtrie import path_utils


@pytest.mark.parametrize(
    "path",
    ["/a//b/", "a/b", "\\a\\b\\", "a\\/b", "//a///b//", "a/b/"],
)
def test_split_path_equivalent_forms(path: str) -> None:
    """Separator variants all segment to the same key."""
    assert path_utils.split_path(path) == ("a", "b")


@pytest.mark.parametrize("path", ["", "/", "//", "\\", "\\/\\"])
def test_split_path_empty_is_root(path: str) -> None:
    """Paths that normalize to empty address the root."""
    assert path_utils.split_path(path) == ()


def test_split_path_never_yields_empty_segments() -> None:
    assert "" not in path_utils.split_path("a///b\\\\c//")


def test_split_path_special_token_is_single_segment() -> None:
    assert path_utils.split_path("$home$") == ("$home$",)


def test_split_path_special_token_not_decomposed() -> None:
    """A wrapped token keeps separators and slashes intact."""
    assert path_utils.split_path("$home/docs\\x$") == ("$home/docs\\x$",)


def test_split_path_marker_only_when_fully_wrapped() -> None:
    assert path_utils.split_path("$home$/sub") == ("$home$", "sub")
    assert path_utils.split_path("/$home$") == ("$home$",)


def test_split_path_single_marker_char() -> None:
    """A lone marker both starts and ends with the marker."""
    assert path_utils.split_path("$") == ("$",)


def test_split_path_custom_marker() -> None:
    assert path_utils.split_path("%a/b%", marker="%") == ("%a/b%",)
    assert path_utils.split_path("$a/b$", marker="%") == ("$a", "b$")


def test_split_path_keeps_dot_segments() -> None:
    """Dot segments are not resolved against each other."""
    assert path_utils.split_path("a/../b/./c") == ("a", "..", "b", ".", "c")


def test_split_path_is_case_sensitive() -> None:
    assert path_utils.split_path("A/b") != path_utils.split_path("a/b")


def test_normalize_separators_strips_single_edges() -> None:
    assert path_utils.normalize_separators("\\\\srv\\share\\") == "srv/share"


def test_is_special_token() -> None:
    assert path_utils.is_special_token("$home$")
    assert not path_utils.is_special_token("$home")
    assert not path_utils.is_special_token("")
