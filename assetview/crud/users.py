"""用户 CRUD：集中管理用户相关的数据操作。"""

from typing import Optional

from sqlalchemy.orm import Session

from assetview.crud.base import CRUDBase
from assetview.models.user import User


class CRUDUser(CRUDBase[User]):
    def get_by_username(self, db: Session, username: str) -> Optional[User]:
        """根据唯一用户名获取用户实例。"""
        return self.query(db).filter(User.username == username).first()


user_crud = CRUDUser(User)
