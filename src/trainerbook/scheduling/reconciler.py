"""Full replacement of a trainer's recurring weekly schedule.

Each applied reconciliation bumps the trainer's schedule version by one. The
deactivate and insert steps share one transaction, and reconciliations for the
same trainer are serialized within this process by a per-trainer lock, so the
active set is always exactly one submitted schedule.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trainerbook.models.reconciliation import ScheduleReconciliation
from trainerbook.scheduling.errors import OperationTokenConflict
from trainerbook.scheduling.store import AvailabilityStore, storage_errors
from trainerbook.scheduling.types import ScheduleEntry

logger = logging.getLogger(__name__)


class TrainerLocks:
    """Per-trainer ``asyncio.Lock`` registry.

    A trainer's lock is dropped once nobody holds or waits on it.
    """

    def __init__(self) -> None:
        self._locks: dict[int, asyncio.Lock] = {}
        self._users: dict[int, int] = {}

    def __contains__(self, trainer_id: int) -> bool:
        return trainer_id in self._locks

    @asynccontextmanager
    async def hold(self, trainer_id: int) -> AsyncIterator[None]:
        lock = self._locks.setdefault(trainer_id, asyncio.Lock())
        self._users[trainer_id] = self._users.get(trainer_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[trainer_id] -= 1
            if self._users[trainer_id] == 0:
                del self._users[trainer_id]
                del self._locks[trainer_id]


@dataclass
class ReconcileResult:
    reconciliation: ScheduleReconciliation
    replayed: bool = False


class ScheduleReconciler:
    """Applies weekly schedules one trainer at a time."""

    def __init__(self, locks: TrainerLocks | None = None) -> None:
        self._locks = locks or TrainerLocks()

    async def reconcile(
        self,
        session: AsyncSession,
        trainer_id: int,
        entries: Sequence[ScheduleEntry],
        operation_token: str | None = None,
    ) -> ReconcileResult:
        """Replace the trainer's recurring schedule with ``entries``.

        A repeated ``operation_token`` returns the reconciliation it first
        produced instead of applying the schedule again. On any failure the
        transaction is rolled back and the previous schedule stays active.
        """
        async with self._locks.hold(trainer_id):
            if operation_token is not None:
                previous = await self._find_by_token(session, operation_token)
                if previous is not None:
                    if previous.trainer_id != trainer_id:
                        raise OperationTokenConflict(
                            f"Operation token {operation_token!r} belongs to another trainer"
                        )
                    logger.info(
                        "Replayed reconciliation v%s for trainer %s (token %s)",
                        previous.version,
                        trainer_id,
                        operation_token,
                    )
                    return ReconcileResult(previous, replayed=True)

            store = AvailabilityStore(session)
            try:
                await store.get_trainer(trainer_id)
                version = await self._current_version(session, trainer_id) + 1
                deactivated, created = await store.replace_recurring_schedule(
                    trainer_id, entries
                )
                record = ScheduleReconciliation(
                    trainer_id=trainer_id,
                    version=version,
                    operation_token=operation_token,
                    windows_deactivated=deactivated,
                    windows_created=created,
                )
                with storage_errors("reconcile"):
                    session.add(record)
                    await session.commit()
            except Exception:
                await session.rollback()
                raise

        logger.info(
            "Reconciled weekly schedule for trainer %s to v%s (%s deactivated, %s created)",
            trainer_id,
            version,
            deactivated,
            created,
        )
        return ReconcileResult(record)

    async def _find_by_token(
        self, session: AsyncSession, operation_token: str
    ) -> ScheduleReconciliation | None:
        stmt = select(ScheduleReconciliation).where(
            ScheduleReconciliation.operation_token == operation_token
        )
        with storage_errors("find_reconciliation"):
            result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def _current_version(self, session: AsyncSession, trainer_id: int) -> int:
        stmt = select(func.max(ScheduleReconciliation.version)).where(
            ScheduleReconciliation.trainer_id == trainer_id
        )
        with storage_errors("current_version"):
            result = await session.execute(stmt)
        return result.scalar_one_or_none() or 0


# Shared by every request handled by this process
reconciler = ScheduleReconciler()
