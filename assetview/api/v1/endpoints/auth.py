"""认证相关路由定义。"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from assetview.api.v1.schemas.auth import LoginRequest, TokenResponse
from assetview.core.dependencies import get_db
from assetview.services.auth_service import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """校验凭证并签发访问令牌。"""
    return auth_service.login(db, username=payload.username, password=payload.password)
