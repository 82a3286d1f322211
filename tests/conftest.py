"""测试夹具：为 pytest 提供数据库与客户端的共享配置。"""

import os
from datetime import datetime, timezone
from typing import Any, Callable, Generator, Optional

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from assetview.core.dependencies import get_db
from assetview.crud.asset import asset_crud
from assetview.crud.users import user_crud
from assetview.db import session as db_session
from assetview.db.init_db import init_db
from assetview.main import app
from assetview.models.asset import Asset, AssetExif
from assetview.models.base import Base
from assetview.models.user import User

TEST_DB_PATH = os.path.join(os.path.dirname(__file__), "test.db")
TEST_DATABASE_URL = f"sqlite:///{TEST_DB_PATH}"

DEFAULT_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database() -> Generator[None, None, None]:
    """创建隔离的 SQLite 测试数据库，并在会话结束后清理。"""
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)

    engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db_session.engine = engine
    db_session.SessionLocal = TestingSessionLocal

    Base.metadata.create_all(bind=engine)
    init_db()
    yield

    engine.dispose()
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)


@pytest.fixture()
def db_session_fixture() -> Generator[Session, None, None]:
    """提供给测试用例使用的数据库会话，用例结束后清空资产表。"""
    session = db_session.SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.query(AssetExif).delete()
        session.query(Asset).delete()
        session.commit()
        session.close()


@pytest.fixture()
def admin_user(db_session_fixture: Session) -> User:
    user = user_crud.get_by_username(db_session_fixture, "admin")
    assert user is not None
    return user


@pytest.fixture()
def make_asset(db_session_fixture: Session) -> Callable[..., Asset]:
    """按路径快速创建资产记录，默认满足“存活且可见”的条件。"""

    def _make(
        owner_id: int,
        path: str,
        *,
        size: Optional[int] = None,
        modified: Optional[datetime] = DEFAULT_TIME,
        **overrides: Any,
    ) -> Asset:
        payload = {
            "owner_id": owner_id,
            "original_path": path,
            "original_file_name": path.rsplit("/", 1)[-1],
            "file_created_at": DEFAULT_TIME,
            "file_modified_at": modified,
            "local_date_time": DEFAULT_TIME,
        }
        payload.update(overrides)
        return asset_crud.create_with_exif(db_session_fixture, payload, file_size_in_byte=size)

    return _make


@pytest.fixture()
def client(db_session_fixture):
    """构建 FastAPI TestClient，并注入测试专用的数据库依赖。"""
    def override_get_db() -> Generator[Session, None, None]:
        session = db_session.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
