"""路径工具函数的单元测试。"""

import pytest

from assetview.utils.path_utils import (
    child_prefix,
    folder_name,
    last_segment,
    normalize_dir_path,
    parent_directory_of,
    path_level,
    split_part,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        (None, ""),
        ("/", ""),
        ("photos", "photos"),
        ("photos/", "photos"),
        ("photos///", "photos"),
        ("/abs/dir//", "/abs/dir"),
    ],
)
def test_normalize_dir_path_strips_all_trailing_separators(raw, expected):
    normalized = normalize_dir_path(raw)
    assert normalized == expected
    assert not normalized.endswith("/")
    assert normalize_dir_path(normalized) == normalized


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a/b/x.jpg", "a/b"),
        ("x.jpg", ""),
        ("", ""),
        ("/x.jpg", ""),
        ("/library/x.jpg", "/library"),
        ("a//x.jpg", "a"),
        ("a/b/", "a/b"),
    ],
)
def test_parent_directory_of(raw, expected):
    assert parent_directory_of(raw) == expected


@pytest.mark.parametrize(
    "parent, expected",
    [
        ("", 1),
        ("photos", 2),
        ("photos/2021", 3),
        ("/library", 3),
    ],
)
def test_path_level(parent, expected):
    assert path_level(parent) == expected


def test_path_level_points_at_immediate_child_name():
    for parent, path, child in [
        ("", "photos/2021/a.jpg", "photos"),
        ("photos", "photos/2021/a.jpg", "2021"),
        ("photos/2021", "photos/2021/a.jpg", "a.jpg"),
        ("/library", "/library/trip/a.jpg", "trip"),
    ]:
        assert split_part(path, path_level(parent)) == child


def test_split_part_out_of_range_returns_empty():
    assert split_part("photos", 2) == ""
    assert split_part("photos/", 2) == ""


def test_prefix_and_names():
    assert child_prefix("") == ""
    assert child_prefix("photos") == "photos/"
    assert last_segment("a/b/c.jpg") == "c.jpg"
    assert last_segment("c.jpg") == "c.jpg"
    assert folder_name("") == ""
    assert folder_name("photos/2021") == "2021"
