"""枚举定义：约束资产可见性的可选值。"""

from enum import Enum


class AssetVisibilityEnum(str, Enum):
    """资产在时间线中的可见性；仅 ``TIMELINE`` 会进入目录视图。"""

    TIMELINE = "timeline"
    ARCHIVE = "archive"
    HIDDEN = "hidden"
    LOCKED = "locked"
