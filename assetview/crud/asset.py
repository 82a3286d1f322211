"""资产记录 CRUD：为目录视图提供“存活且可见”的资产检索。

“存活且可见”的判定：
- ``deleted_at`` 为空；
- ``visibility`` 为 timeline；
- ``file_created_at``、``file_modified_at``、``local_date_time`` 均不为空。

文件大小通过 ``joinedload`` 预先关联 EXIF 记录，避免逐条懒加载。
SQLite 的 LIKE 不区分大小写，因此前缀查询只做粗筛，精确的路径判定在服务层完成。
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, joinedload

from assetview.core.enums import AssetVisibilityEnum
from assetview.crud.base import CRUDBase
from assetview.models.asset import Asset, AssetExif

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """转义 LIKE 通配符，使路径中的 ``%``/``_`` 按字面匹配。"""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class CRUDAsset(CRUDBase[Asset]):
    def query(self, db: Session, *, include_deleted: bool = False):
        query = db.query(self.model)
        if not include_deleted:
            query = query.filter(Asset.deleted_at.is_(None))
        return query

    def _live_eligible(self, db: Session, owner_id: int):
        return (
            self.query(db)
            .options(joinedload(Asset.exif))
            .filter(Asset.owner_id == owner_id)
            .filter(Asset.visibility == AssetVisibilityEnum.TIMELINE.value)
            .filter(Asset.file_created_at.is_not(None))
            .filter(Asset.file_modified_at.is_not(None))
            .filter(Asset.local_date_time.is_not(None))
        )

    def find_live_eligible(self, db: Session, owner_id: int) -> List[Asset]:
        """返回用户全部存活且可见的资产，不按路径过滤。"""
        return self._live_eligible(db, owner_id).order_by(Asset.id.asc()).all()

    def find_live_eligible_under_prefix(self, db: Session, owner_id: int, path_prefix: str) -> List[Asset]:
        """返回原始路径以 ``path_prefix`` 开头的存活资产（任意深度）。"""
        query = self._live_eligible(db, owner_id)
        if path_prefix:
            query = query.filter(Asset.original_path.like(f"{escape_like(path_prefix)}%", escape=LIKE_ESCAPE))
        return query.order_by(Asset.id.asc()).all()

    def create_with_exif(
        self,
        db: Session,
        obj_in: Dict[str, Any],
        *,
        file_size_in_byte: Optional[int] = None,
        auto_commit: bool = True,
    ) -> Asset:
        """创建资产并同时写入 EXIF 大小信息。"""
        asset = Asset(**obj_in)
        asset.exif = AssetExif(file_size_in_byte=file_size_in_byte)
        return self.save(db, asset, auto_commit=auto_commit)


asset_crud = CRUDAsset(Asset)
