"""Pydantic model for the pre‑seeded users issues can be assigned to."""

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    """A directory entry.  Immutable once created."""

    id: int = Field(..., gt=0, examples=[1])
    name: str = Field(..., examples=["김개발"])

    model_config = ConfigDict(frozen=True)
