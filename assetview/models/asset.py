"""资产记录模型。

资产只保存一条以 '/' 分隔的原始路径（`original_path`），并不存在真实的目录表；
目录层级完全由路径字符串推导。文件大小来自关联的 EXIF 记录。
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from assetview.core.enums import AssetVisibilityEnum
from assetview.models.base import Base, TimestampMixin


class Asset(TimestampMixin, Base):
    __tablename__ = "assets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    owner_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), index=True)
    original_path: Mapped[str] = mapped_column(String(1024), index=True)
    original_file_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    visibility: Mapped[str] = mapped_column(
        String(16), default=AssetVisibilityEnum.TIMELINE.value, index=True
    )
    file_created_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    file_modified_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    local_date_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True, index=True)

    owner: Mapped["User"] = relationship("User", back_populates="assets")
    exif: Mapped[Optional["AssetExif"]] = relationship(
        "AssetExif", back_populates="asset", uselist=False, cascade="all, delete-orphan"
    )

    @property
    def file_size_in_byte(self) -> Optional[int]:
        """由 EXIF 记录提供的文件大小；缺失时为 ``None``。"""
        return self.exif.file_size_in_byte if self.exif is not None else None


class AssetExif(Base):
    __tablename__ = "asset_exif"

    asset_id: Mapped[int] = mapped_column(Integer, ForeignKey("assets.id"), primary_key=True)
    file_size_in_byte: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

    asset: Mapped["Asset"] = relationship("Asset", back_populates="exif")
