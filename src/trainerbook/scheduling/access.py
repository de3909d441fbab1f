from dataclasses import dataclass

from trainerbook.models.trainer import TrainerProfile
from trainerbook.scheduling.errors import Unauthorized

ROLES = ("client", "trainer", "admin")


@dataclass(frozen=True)
class Identity:
    """Caller identity as resolved by the upstream identity provider."""

    subject: str
    role: str = "client"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def ensure_can_manage(identity: Identity, trainer: TrainerProfile) -> None:
    """Only the owning trainer or an admin may change a trainer's availability."""
    if identity.is_admin:
        return
    if identity.role == "trainer" and identity.subject == trainer.owner_subject:
        return
    raise Unauthorized(f"Not allowed to manage availability for trainer {trainer.id}")
