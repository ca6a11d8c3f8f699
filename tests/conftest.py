"""
Test infrastructure for the Comments API.

Strategy
--------
- SQLite in-memory via aiosqlite eliminates the need for a running Postgres
  instance in CI, keeping the suite fast and self-contained.
- StaticPool forces all async tasks to share the same in-memory database
  connection, which is required because SQLite in-memory databases are
  connection-scoped; a new connection would see an empty database.
- The app's get_db dependency is overridden so every test-time request uses
  the test session factory rather than the production one.
- All tables are created fresh before each test and dropped after.
- Callers authenticate with real HS256 tokens minted by
  ``build_access_token``; ``auth_headers`` builds the header for a user id.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from comments_api.database import Base, get_db
from comments_api.main import app
from comments_api.models import Blog
from comments_api.security import build_access_token

# ---------------------------------------------------------------------------
# Test database engine: SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override: replace production get_db with the test session factory
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """
    Yield a live AsyncSession for tests that need to interact with the
    database directly (seeding blogs, asserting stored state).
    """
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers():
    """Return a factory building an ``Authorization`` header for a user id."""
    def _headers(user_id: str = "alice") -> dict[str, str]:
        return {"Authorization": f"Bearer {build_access_token(user_id=user_id)}"}
    return _headers


@pytest_asyncio.fixture
async def blog(db_session: AsyncSession) -> Blog:
    """A committed blog with a zero comment counter."""
    blog = Blog(title="First post", content="Hello", created_by="author")
    db_session.add(blog)
    await db_session.commit()
    return blog


@pytest.fixture
def comment_count(db_session: AsyncSession):
    """
    Return a coroutine reading ``Blog.comments`` straight from the table,
    bypassing any stale instance held in the identity map.
    """
    async def _count(blog_id: str) -> int:
        result = await db_session.execute(select(Blog.comments).where(Blog.id == blog_id))
        return result.scalar_one()
    return _count
