"""Path utilities: derive virtual directories from '/'-separated asset paths.

These helpers centralize the rules used across crud/services:
- Directory key never ends with '/', root represented by empty string '';
- Segment positions are 1-indexed, mirroring SQL ``split_part`` semantics;
- Only '/' is treated as a separator, paths are otherwise opaque strings.
"""

from __future__ import annotations

from assetview.core.constants import PATH_SEPARATOR


def normalize_dir_path(p: str | None) -> str:
    """Strip every trailing '/'; ``None`` and '' both mean root."""
    return (p or "").rstrip(PATH_SEPARATOR)


def parent_directory_of(p: str | None) -> str:
    """Return the normalized directory holding ``p``, '' when ``p`` has no '/'."""
    s = p or ""
    idx = s.rfind(PATH_SEPARATOR)
    if idx < 0:
        return ""
    return normalize_dir_path(s[: idx + 1])


def path_level(normalized_parent: str) -> int:
    """1-indexed field position of the immediate child name below ``normalized_parent``.

    Root has no separator to skip, so its children sit in field 1. A non-empty
    parent ``a/b`` spans ``count('/') + 1`` fields and the child is the next one.
    """
    if not normalized_parent:
        return 1
    return normalized_parent.count(PATH_SEPARATOR) + 2


def child_prefix(normalized_dir: str) -> str:
    """Prefix every descendant path of ``normalized_dir`` starts with ('' for root)."""
    return f"{normalized_dir}{PATH_SEPARATOR}" if normalized_dir else ""


def split_part(p: str, level: int) -> str:
    """Return field ``level`` (1-indexed) of ``p`` split on '/', '' when out of range."""
    parts = p.split(PATH_SEPARATOR)
    if level > len(parts):
        return ""
    return parts[level - 1]


def last_segment(p: str) -> str:
    return p.rsplit(PATH_SEPARATOR, 1)[-1]


def folder_name(normalized_dir: str) -> str:
    """Display name of a directory: its last segment, '' for root."""
    if not normalized_dir:
        return ""
    return last_segment(normalized_dir)
