"""
pytest 공통 fixtures 및 설정
"""

import os
import sys
import tempfile
from pathlib import Path

# 설정은 import 시점에 읽히므로 앱 import 전에 환경 변수를 지정
UPLOAD_DIR = Path(tempfile.mkdtemp(prefix="marketplace-uploads-"))
os.environ["ENV"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["UPLOAD_PATH"] = str(UPLOAD_DIR)

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import update  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from marketplace.api.main import app  # noqa: E402
from marketplace.monitoring import global_metrics  # noqa: E402
from marketplace.storage.database import get_db  # noqa: E402
from marketplace.storage.tables import Base, Category, User  # noqa: E402
from tests.fixtures.api import create_alamat, create_product, login, register  # noqa: E402


@pytest.fixture(scope="session")
def test_env():
    """테스트 환경 설정"""
    yield {"upload_path": UPLOAD_DIR}


@pytest.fixture
async def engine():
    """테스트마다 새 인메모리 DB"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def client(session_factory):
    """앱에 직접 연결된 HTTP 클라이언트"""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    global_metrics.reset()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def user_token(client) -> str:
    """일반 회원 토큰"""
    response = await register(client, "081200000001", "budi@example.com", nama="Budi")
    assert response.status_code == 200, response.text
    return await login(client, "081200000001")


@pytest.fixture
async def other_token(client) -> str:
    """다른 회원 토큰"""
    response = await register(client, "081200000002", "siti@example.com", nama="Siti")
    assert response.status_code == 200, response.text
    return await login(client, "081200000002")


@pytest.fixture
async def admin_token(client, session_factory) -> str:
    """관리자 토큰 (가입 후 DB 에서 관리자 지정)"""
    response = await register(client, "081200000009", "admin@example.com", nama="Admin")
    assert response.status_code == 200, response.text

    async with session_factory() as session:
        await session.execute(
            update(User).where(User.no_telp == "081200000009").values(is_admin=True)
        )
        await session.commit()

    return await login(client, "081200000009")


@pytest.fixture
async def category_id(session_factory) -> int:
    async with session_factory() as session:
        category = Category(nama="Elektronik")
        session.add(category)
        await session.commit()
        return category.id


@pytest.fixture
async def product_id(client, user_token, category_id) -> int:
    return await create_product(client, user_token, category_id)


@pytest.fixture
async def alamat_id(client, user_token) -> int:
    return await create_alamat(client, user_token)
