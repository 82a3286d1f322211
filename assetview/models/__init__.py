"""模型包初始化，便于统一导入 ORM 实体并触发模型注册。"""

from assetview.models.asset import Asset, AssetExif
from assetview.models.user import User

__all__ = [
    "Asset",
    "AssetExif",
    "User",
]
