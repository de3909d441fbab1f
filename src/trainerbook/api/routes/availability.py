"""Availability API routes: publish windows, replace weekly schedules, list slots."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from trainerbook.api.deps import get_identity
from trainerbook.database import get_db
from trainerbook.models.availability import AvailabilityWindow
from trainerbook.scheduling.access import Identity, ensure_can_manage
from trainerbook.scheduling.reconciler import reconciler
from trainerbook.scheduling.slots import applicable_windows, get_available_slots
from trainerbook.scheduling.store import AvailabilityStore
from trainerbook.scheduling.timeutils import parse_date
from trainerbook.scheduling.types import ScheduleEntry
from trainerbook.schemas.availability import (
    ReconciliationRead,
    SlotRead,
    WeeklyScheduleUpdate,
    WindowCreate,
    WindowRead,
)
from trainerbook.schemas.system import SuccessResponse

router = APIRouter(prefix="/api", tags=["availability"])


@router.get("/trainers/{trainer_id}/availability", response_model=list[WindowRead])
async def get_availability(
    trainer_id: int,
    date: str | None = Query(default=None, description="YYYY-MM-DD"),
    session: AsyncSession = Depends(get_db),
) -> list[AvailabilityWindow]:
    """List a trainer's active windows, optionally only those applying on `date`."""
    store = AvailabilityStore(session)
    await store.get_trainer(trainer_id)
    windows = await store.list_active_windows(trainer_id)
    if date is not None:
        windows = applicable_windows(windows, date)
    return windows


@router.get("/trainers/{trainer_id}/slots", response_model=list[SlotRead])
async def get_slots(
    trainer_id: int,
    date: str = Query(description="YYYY-MM-DD"),
    duration: int = Query(default=60, description="Session length in minutes"),
    session: AsyncSession = Depends(get_db),
) -> list[SlotRead]:
    """Bookable slots of `duration` minutes that clash with no pending/confirmed booking."""
    parse_date(date)
    store = AvailabilityStore(session)
    await store.get_trainer(trainer_id)
    slots = await get_available_slots(store, trainer_id, date, duration)
    return [SlotRead(start_time=s.start_time, end_time=s.end_time) for s in slots]


@router.post(
    "/trainers/{trainer_id}/availability", response_model=WindowRead, status_code=201
)
async def add_availability(
    trainer_id: int,
    body: WindowCreate,
    identity: Identity = Depends(get_identity),
    session: AsyncSession = Depends(get_db),
) -> AvailabilityWindow:
    """Publish a single recurring or date-specific availability window."""
    store = AvailabilityStore(session)
    ensure_can_manage(identity, await store.get_trainer(trainer_id))
    window = await store.add_window(
        trainer_id,
        body.kind,
        body.start_time,
        body.end_time,
        day_of_week=body.day_of_week,
        specific_date=body.specific_date,
    )
    await session.commit()
    return window


@router.delete("/availability/{window_id}", response_model=SuccessResponse)
async def remove_availability(
    window_id: int,
    identity: Identity = Depends(get_identity),
    session: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Soft-delete a window. Removing an already-removed window also succeeds."""
    store = AvailabilityStore(session)
    window = await store.get_window(window_id)
    ensure_can_manage(identity, await store.get_trainer(window.trainer_id))
    await store.deactivate_window(window_id)
    await session.commit()
    return SuccessResponse()


@router.put(
    "/trainers/{trainer_id}/availability/weekly", response_model=ReconciliationRead
)
async def set_weekly_availability(
    trainer_id: int,
    body: WeeklyScheduleUpdate,
    identity: Identity = Depends(get_identity),
    session: AsyncSession = Depends(get_db),
) -> ReconciliationRead:
    """Replace the trainer's whole recurring weekly schedule.

    Every existing recurring window is deactivated and one window is created
    per active entry. Specific-date windows are left alone.
    """
    store = AvailabilityStore(session)
    ensure_can_manage(identity, await store.get_trainer(trainer_id))
    entries = [ScheduleEntry(**entry.model_dump()) for entry in body.entries]
    result = await reconciler.reconcile(
        session, trainer_id, entries, operation_token=body.operation_token
    )
    record = result.reconciliation
    return ReconciliationRead(
        trainer_id=record.trainer_id,
        version=record.version,
        windows_deactivated=record.windows_deactivated,
        windows_created=record.windows_created,
        replayed=result.replayed,
    )
