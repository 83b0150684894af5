"""Program domain schemas."""

from pydantic import Field

from fitzone.models.base import CamelModel, UTCDateTime


class Instructor(CamelModel):
    name: str
    experience: str | None = None
    certifications: list[str] = Field(default_factory=list)


class ScheduleSlot(CamelModel):
    """One weekly session of a program."""

    day: str
    time: str
    spots: int | None = Field(default=None, ge=0)
    focus: str | None = None


class ProgramRead(CamelModel):
    id: str
    title: str
    description: str | None
    duration: str | None
    level: str | None
    price: float | None
    instructor: Instructor | None
    schedule: list[ScheduleSlot]
    benefits: list[str]
    equipment: list[str]
    created_at: UTCDateTime
    updated_at: UTCDateTime
