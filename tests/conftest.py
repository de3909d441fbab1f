from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from trainerbook.database import Base, get_db
from trainerbook.main import app
from trainerbook.models.booking import Booking
from trainerbook.models.trainer import TrainerProfile

test_engine = create_async_engine("sqlite+aiosqlite://", echo=False)
session_factory = async_sessionmaker(test_engine, expire_on_commit=False)

TRAINER_SUBJECT = "user_trainer_1"
TRAINER_HEADERS = {"X-Subject-Id": TRAINER_SUBJECT, "X-Role": "trainer"}
ADMIN_HEADERS = {"X-Subject-Id": "user_admin", "X-Role": "admin"}
CLIENT_HEADERS = {"X-Subject-Id": "user_client", "X-Role": "client"}


async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
async def setup_db() -> AsyncGenerator[None, None]:
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def create_trainer(
    session: AsyncSession, owner_subject: str = TRAINER_SUBJECT, name: str = "Alex Strong"
) -> TrainerProfile:
    trainer = TrainerProfile(owner_subject=owner_subject, name=name)
    session.add(trainer)
    await session.commit()
    await session.refresh(trainer)
    return trainer


async def create_booking(
    session: AsyncSession,
    trainer_id: int,
    session_date: str,
    start_time: str,
    end_time: str,
    status: str = "pending",
) -> Booking:
    booking = Booking(
        trainer_id=trainer_id,
        client_subject="user_client",
        session_date=session_date,
        start_time=start_time,
        end_time=end_time,
        status=status,
    )
    session.add(booking)
    await session.commit()
    return booking


@pytest.fixture
async def trainer(setup_db: None) -> TrainerProfile:
    async with session_factory() as session:
        return await create_trainer(session)
