import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from payment_server.core.config import DatabaseSettings, MirrorSettings, Settings
from payment_server.infrastructure.database import build_engine, build_session_factory, init_db
from payment_server.main import create_app
from payment_server.modules.payments import PaymentService


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'payments.db'}"),
        mirror=MirrorSettings(path=tmp_path / "payments.json"),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan, which creates the schema
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mirror_path(settings):
    return settings.mirror_path


@pytest_asyncio.fixture
async def session_factory(settings):
    engine = build_engine(settings)
    await init_db(engine)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def service(db_session: AsyncSession) -> PaymentService:
    return PaymentService.with_session(db_session)


class FakeWebSocket:
    """Stands in for a starlette WebSocket in hub tests."""

    def __init__(self, fail: bool = False) -> None:
        self.accepted = False
        self.fail = fail
        self.sent: list[str] = []

    async def accept(self) -> None:
        self.accepted = True

    async def send_text(self, data: str) -> None:
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(data)


@pytest.fixture
def fake_websocket_factory():
    return FakeWebSocket
