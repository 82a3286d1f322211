"""目录视图业务逻辑：组合记录检索与虚拟目录推导。"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.orm import Session

from assetview.core.constants import PATH_SEPARATOR
from assetview.core.logger import logger
from assetview.crud.asset import CRUDAsset, asset_crud
from assetview.models.asset import Asset
from assetview.services.folder_view import (
    FolderStats,
    aggregate_folder_stats,
    direct_children_of,
    unique_directories,
)
from assetview.utils.path_utils import normalize_dir_path


class ViewService:
    """对外暴露的三个目录视图查询入口。

    所有入口都会先规范化目录参数，再委托 ``CRUDAsset`` 检索记录，
    最后交由 ``folder_view`` 中的纯函数完成推导与聚合。
    """

    def __init__(self, store: CRUDAsset = asset_crud) -> None:
        self.store = store

    def list_unique_directories(self, db: Session, owner_id: int) -> list[str]:
        records = self.store.find_live_eligible(db, owner_id)
        directories = unique_directories(records)
        logger.debug("view.unique_paths owner=%s records=%s dirs=%s", owner_id, len(records), len(directories))
        return directories

    def list_direct_contents(self, db: Session, owner_id: int, path: Optional[str]) -> list[Asset]:
        directory = normalize_dir_path(path)
        records = self.store.find_live_eligible_under_prefix(db, owner_id, f"{directory}{PATH_SEPARATOR}")
        children = direct_children_of(directory, records)
        logger.debug("view.folder owner=%s path=%r assets=%s", owner_id, directory, len(children))
        return children

    def get_folder_stats(self, db: Session, owner_id: int, path: Optional[str]) -> list[FolderStats]:
        """返回目录自身与直接子目录的统计；目录下没有任何资产时返回空列表。"""
        directory = normalize_dir_path(path)
        # 以目录本身为前缀检索，路径恰好等于目录的记录也会计入自身统计
        records = self.store.find_live_eligible_under_prefix(db, owner_id, directory)
        stats = aggregate_folder_stats(directory, records)
        logger.debug("view.folder_stats owner=%s path=%r rows=%s", owner_id, directory, len(stats))
        return stats

    # ----------------------
    # 序列化辅助
    # ----------------------
    @staticmethod
    def serialize_asset(asset: Asset) -> dict[str, Any]:
        return {
            "id": asset.id,
            "ownerId": asset.owner_id,
            "originalPath": asset.original_path,
            "originalFileName": asset.original_file_name,
            "visibility": asset.visibility,
            "fileCreatedAt": _isoformat(asset.file_created_at),
            "fileModifiedAt": _isoformat(asset.file_modified_at),
            "localDateTime": _isoformat(asset.local_date_time),
            "fileSizeInByte": asset.file_size_in_byte,
        }

    @staticmethod
    def serialize_folder_stats(stats: FolderStats) -> dict[str, Any]:
        return {
            "path": stats.path,
            "name": stats.name,
            "assetCount": stats.asset_count,
            "totalSize": stats.total_size,
            "lastModified": _isoformat(stats.last_modified),
        }


def _isoformat(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


view_service = ViewService()
