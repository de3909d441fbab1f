"""Trainer profile routes: the records that own availability windows."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from trainerbook.api.deps import get_identity
from trainerbook.database import get_db
from trainerbook.models.trainer import TrainerProfile
from trainerbook.scheduling.access import Identity
from trainerbook.scheduling.store import AvailabilityStore
from trainerbook.schemas.trainer import TrainerCreate, TrainerRead

router = APIRouter(prefix="/api/trainers", tags=["trainers"])
logger = logging.getLogger(__name__)


@router.post("", response_model=TrainerRead, status_code=201)
async def create_trainer(
    body: TrainerCreate,
    identity: Identity = Depends(get_identity),
    session: AsyncSession = Depends(get_db),
) -> TrainerProfile:
    """Create a trainer profile owned by the calling trainer (or an admin)."""
    if identity.role not in ("trainer", "admin"):
        raise HTTPException(status_code=403, detail="Only trainers can create a trainer profile")

    trainer = TrainerProfile(
        owner_subject=identity.subject,
        name=body.name,
        email=body.email,
        bio=body.bio,
    )
    session.add(trainer)
    await session.commit()
    await session.refresh(trainer)
    logger.info("Created trainer profile %s for %s", trainer.id, identity.subject)
    return trainer


@router.get("/{trainer_id}", response_model=TrainerRead)
async def get_trainer(
    trainer_id: int,
    session: AsyncSession = Depends(get_db),
) -> TrainerProfile:
    return await AvailabilityStore(session).get_trainer(trainer_id)
