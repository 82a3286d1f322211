"""虚拟目录推导与聚合：把一组扁平的资产路径转换为目录层级视图。

本模块只包含纯函数，不访问数据库：
- unique_directories：所有资产所在目录的去重集合；
- direct_children_of：恰好位于某目录下一层的资产；
- aggregate_folder_stats：目录自身及其直接子目录的数量/大小/最近修改时间。

入参记录只需提供 ``original_path``、``file_size_in_byte``、``file_modified_at``
（以及可选的 ``id``）属性，ORM 的 ``Asset`` 与测试中的轻量对象均可。
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Sequence, TypeVar

from assetview.core.constants import PATH_SEPARATOR
from assetview.core.exceptions import MalformedRecordError
from assetview.utils.path_utils import (
    child_prefix,
    folder_name,
    last_segment,
    normalize_dir_path,
    parent_directory_of,
    path_level,
    split_part,
)

RecordT = TypeVar("RecordT")

# 没有任何修改时间可聚合时使用的“最早时间”
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """无时区的时间按 UTC 解释（SQLite 不保存时区），保证输出统一带偏移。"""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class FolderStats:
    """单个目录的统计快照，每次查询重新计算，不做持久化。"""

    path: str
    name: str
    asset_count: int
    total_size: int
    last_modified: datetime


@dataclass
class _Accumulator:
    count: int = 0
    total_size: int = 0
    last_modified: Optional[datetime] = None

    def add(self, record: Any) -> None:
        self.count += 1
        size = getattr(record, "file_size_in_byte", None)
        if size is not None:
            self.total_size += int(size)
        modified = _as_utc(getattr(record, "file_modified_at", None))
        if modified is not None and (self.last_modified is None or modified > self.last_modified):
            self.last_modified = modified

    def build(self, path: str, name: str) -> FolderStats:
        return FolderStats(
            path=path,
            name=name,
            asset_count=self.count,
            total_size=self.total_size,
            last_modified=self.last_modified or EPOCH,
        )


def _require_path(record: Any) -> str:
    path = getattr(record, "original_path", None)
    # 空路径会与根目录 "" 混淆，与 None 一样视为损坏记录
    if not path:
        raise MalformedRecordError(getattr(record, "id", None))
    return path


def unique_directories(records: Iterable[Any]) -> list[str]:
    """返回所有记录所在目录的去重列表（按字典序升序）。"""
    directories = {parent_directory_of(_require_path(record)) for record in records}
    return sorted(directories)


def is_direct_child(normalized_dir: str, path: str) -> bool:
    """判断 ``path`` 是否恰好位于 ``normalized_dir`` 的下一层。

    两个条件必须同时成立：以 ``dir + '/'`` 开头，且前缀之后不再出现 '/'。
    记录路径先做规范化，因此与目录本身同名的占位记录（如 ``a/``）不会命中。
    """
    normalized_path = normalize_dir_path(path)
    prefix = f"{normalized_dir}{PATH_SEPARATOR}"
    if not normalized_path.startswith(prefix):
        return False
    remainder = normalized_path[len(prefix):]
    return bool(remainder) and PATH_SEPARATOR not in remainder


def direct_children_of(directory: str, records: Iterable[RecordT]) -> list[RecordT]:
    """筛选目录下一层的资产，并按文件名（最后一段路径）升序稳定排序。"""
    normalized_dir = normalize_dir_path(directory)
    children = [record for record in records if is_direct_child(normalized_dir, _require_path(record))]
    # sorted 是稳定排序，同名记录保持检索顺序
    return sorted(children, key=lambda record: last_segment(normalize_dir_path(record.original_path)))


def _belongs_to(normalized_dir: str, path: str) -> bool:
    if not normalized_dir:
        return True
    return path == normalized_dir or path.startswith(child_prefix(normalized_dir))


def aggregate_folder_stats(directory: str, records: Sequence[Any]) -> list[FolderStats]:
    """计算目录自身与各直接子目录的统计信息。

    匹配集合包含目录下任意深度的记录；子目录按 ``path_level`` 处的路径段分组，
    更深层的后代归入其顶层子目录。路径段为空的记录（即路径等于目录本身）只计入
    目录自身。输出顺序固定：目录自身（若存在记录）在前，子目录按名称升序在后。
    """
    normalized_dir = normalize_dir_path(directory)
    prefix = child_prefix(normalized_dir)
    level = path_level(normalized_dir)

    own = _Accumulator()
    children: dict[str, _Accumulator] = {}
    for record in records:
        path = _require_path(record)
        if not _belongs_to(normalized_dir, path):
            continue
        own.add(record)
        name = split_part(path, level)
        if not name:
            continue
        children.setdefault(name, _Accumulator()).add(record)

    stats: list[FolderStats] = []
    if own.count > 0:
        stats.append(own.build(normalized_dir, folder_name(normalized_dir)))
    for name in sorted(children):
        stats.append(children[name].build(f"{prefix}{name}", name))
    return stats
