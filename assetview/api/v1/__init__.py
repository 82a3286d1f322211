"""API v1 汇总路由：统一挂载所有版本化的子路由。"""

from fastapi import APIRouter

from assetview.api.v1.endpoints import auth, view

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(view.router)
