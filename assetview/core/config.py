"""配置模块：从环境变量与 ``.env`` 文件读取服务设置。

``ENV_FILE`` 可指定额外的环境文件（相对路径基于项目根目录），其取值覆盖 ``.env``；
进程环境变量优先级最高。
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# assetview/core/config.py -> 项目根目录
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env_files() -> list[Path]:
    """按优先级从高到低返回存在的环境文件。"""
    files = [PROJECT_ROOT / ".env"]
    extra = os.getenv("ENV_FILE")
    if extra:
        files.insert(0, PROJECT_ROOT / extra)
    return [path for path in files if path.is_file()]


class Settings(BaseSettings):
    """服务运行所需配置，字段均可通过同名（大写）环境变量覆盖。"""

    project_name: str = Field(default="AssetView API", alias="PROJECT_NAME")
    api_v1_str: str = Field(default="/api/v1", alias="API_V1_STR")
    debug: bool = Field(default=False, alias="DEBUG")
    app_port: int = Field(default=8000, alias="APP_PORT")

    # 显式提供时优先使用（测试环境指向 SQLite）
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    database_host: str = Field(default="localhost", alias="DATABASE_HOST")
    database_port: int = Field(default=5432, alias="DATABASE_PORT")
    database_user: str = Field(default="postgres", alias="DATABASE_USER")
    database_password: str = Field(default="postgres", alias="DATABASE_PASSWORD")
    database_name: str = Field(default="assetview", alias="DATABASE_NAME")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    jwt_secret_key: str = Field(default="changeme", alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    default_admin_username: str = Field(default="admin", alias="DEFAULT_ADMIN_USERNAME")
    default_admin_password: str = Field(default="admin123", alias="DEFAULT_ADMIN_PASSWORD")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str = Field(default="log/assetview.log", alias="LOG_FILE")
    log_json: bool = Field(default=False, alias="LOG_JSON")

    model_config = SettingsConfigDict(extra="ignore")

    @property
    def sql_database_url(self) -> str:
        """SQLAlchemy 连接串；未配置 ``DATABASE_URL`` 时由各分项拼出 PostgreSQL 地址。"""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )

    @property
    def log_file_path(self) -> Path:
        path = Path(self.log_file)
        return path if path.is_absolute() else PROJECT_ROOT / path


@lru_cache
def get_settings() -> Settings:
    """加载环境文件后返回缓存的配置实例。"""
    for env_file in _env_files():
        # override=False：先加载者生效，进程环境变量始终优先
        load_dotenv(env_file, override=False, encoding="utf-8")
    return Settings()
