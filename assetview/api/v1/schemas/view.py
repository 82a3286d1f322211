"""目录视图 - 请求/响应模型。"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from assetview.api.v1.schemas.common import ResponseEnvelope


class AssetItem(BaseModel):
    id: int
    ownerId: int
    originalPath: str
    originalFileName: Optional[str] = None
    visibility: str
    fileCreatedAt: Optional[datetime] = None
    fileModifiedAt: Optional[datetime] = None
    localDateTime: Optional[datetime] = None
    fileSizeInByte: Optional[int] = None


class FolderStatsItem(BaseModel):
    path: str
    name: str
    assetCount: int
    totalSize: int
    lastModified: datetime


UniquePathsResponse = ResponseEnvelope[list[str]]
FolderAssetsResponse = ResponseEnvelope[list[AssetItem]]
FolderStatsResponse = ResponseEnvelope[list[FolderStatsItem]]
