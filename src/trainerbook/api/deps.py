"""Caller identity forwarded by the identity provider."""

from fastapi import Header, HTTPException

from trainerbook.scheduling.access import ROLES, Identity


async def get_identity(
    x_subject_id: str | None = Header(default=None),
    x_role: str = Header(default="client"),
) -> Identity:
    """Identity of the caller; mutations reject anonymous requests with 401."""
    if not x_subject_id:
        raise HTTPException(status_code=401, detail="Missing X-Subject-Id header")
    if x_role not in ROLES:
        raise HTTPException(status_code=401, detail=f"Unknown role '{x_role}'")
    return Identity(subject=x_subject_id, role=x_role)
