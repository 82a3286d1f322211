"""虚拟目录视图路由：目录列表、目录内资产与目录统计。"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from assetview.api.v1.schemas.view import FolderAssetsResponse, FolderStatsResponse, UniquePathsResponse
from assetview.core.dependencies import get_current_active_user, get_db
from assetview.core.responses import create_response
from assetview.models.user import User
from assetview.services.view_service import view_service

router = APIRouter(prefix="/view", tags=["view"])


@router.get("/folder/unique-paths", response_model=UniquePathsResponse)
def get_unique_original_paths(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    directories = view_service.list_unique_directories(db, current_user.id)
    return create_response("获取目录列表成功", directories)


@router.get("/folder", response_model=FolderAssetsResponse)
def get_assets_by_original_path(
    path: Optional[str] = Query("", description="虚拟目录路径，空字符串表示根目录"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    assets = view_service.list_direct_contents(db, current_user.id, path)
    return create_response("获取目录资产成功", [view_service.serialize_asset(asset) for asset in assets])


@router.get("/folder/stats", response_model=FolderStatsResponse)
def get_folder_stats(
    path: Optional[str] = Query("", description="虚拟目录路径，空字符串表示根目录"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    stats = view_service.get_folder_stats(db, current_user.id, path)
    return create_response("获取目录统计成功", [view_service.serialize_folder_stats(item) for item in stats])
