"""认证服务：校验账号密码并签发访问令牌。"""

from sqlalchemy.orm import Session

from assetview.core.constants import ACCESS_TOKEN_TYPE, HTTP_STATUS_OK, HTTP_STATUS_UNAUTHORIZED
from assetview.core.exceptions import AppException
from assetview.core.logger import logger
from assetview.core.responses import create_response
from assetview.core.security import create_access_token, verify_password
from assetview.crud.users import user_crud


class AuthService:
    def login(self, db: Session, *, username: str, password: str) -> dict:
        """校验用户名与密码，成功后返回 bearer 令牌。"""
        user = user_crud.get_by_username(db, username)
        if user is None or not verify_password(password, user.hashed_password):
            logger.info("Login failed for username=%s", username)
            raise AppException(msg="用户名或密码错误", code=HTTP_STATUS_UNAUTHORIZED)
        if not user.is_active:
            raise AppException(msg="用户未激活", code=HTTP_STATUS_UNAUTHORIZED)

        token = create_access_token({"user_id": user.id, "username": user.username})
        logger.info("User %s logged in", user.username)
        return create_response(
            "登录成功",
            {"access_token": token, "token_type": ACCESS_TOKEN_TYPE},
            HTTP_STATUS_OK,
        )


auth_service = AuthService()
