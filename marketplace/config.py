"""
설정 관리 모듈
환경 변수를 읽어 Pydantic 모델로 변환하여 타입 안전성 보장
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env 파일 로드
load_dotenv(dotenv_path=".env", override=False)


class DatabaseConfig(BaseSettings):
    """MySQL 접속 설정 (DB_HOST 등)"""

    host: Optional[str] = None
    port: int = 3306
    user: str = "root"
    password: str = ""
    name: str = "evermos"

    model_config = SettingsConfigDict(env_prefix="DB_", extra="ignore")

    @property
    def url(self) -> str:
        """aiomysql 접속 URL"""
        return (
            f"mysql+aiomysql://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"
            "?charset=utf8mb4"
        )


class Settings(BaseSettings):
    """전체 애플리케이션 설정"""

    # 환경
    env: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False

    # 로깅
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # 서버
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    # 데이터베이스
    database_url: Optional[str] = None
    database_echo: bool = False
    auto_create_tables: bool = True

    # 인증
    jwt_secret: str = "marketplace-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24

    # 파일 업로드
    upload_path: Path = Path("./uploads")

    # 지역(주/도시) 외부 API
    region_api_url: str = "https://emsifa.github.io/api-wilayah-indonesia/api"
    region_api_timeout: float = 10.0

    _database: Optional[DatabaseConfig] = None

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def create_log_path(cls, v):
        if v:
            path = Path(v)
            path.parent.mkdir(parents=True, exist_ok=True)
            return path
        return v

    @field_validator("upload_path", mode="before")
    @classmethod
    def create_upload_path(cls, v):
        path = Path(v)
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def database(self) -> DatabaseConfig:
        """MySQL 설정 (lazy loading)"""
        if self._database is None:
            self._database = DatabaseConfig()
        return self._database

    @property
    def effective_database_url(self) -> str:
        """실제 사용할 DB URL

        DATABASE_URL > DB_HOST 기반 MySQL > 로컬 SQLite 순서로 결정
        """
        if self.database_url:
            return self.database_url
        if self.database.host:
            return self.database.url
        return "sqlite+aiosqlite:///./marketplace.db"

    def is_production(self) -> bool:
        """프로덕션 환경 여부"""
        return self.env == "production"

    def is_development(self) -> bool:
        """개발 환경 여부"""
        return self.env == "development"


@lru_cache()
def get_settings() -> Settings:
    """설정 싱글톤 인스턴스 반환"""
    return Settings()


# 전역 설정 인스턴스
settings = get_settings()
