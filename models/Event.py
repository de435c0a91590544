from datetime import datetime
from pydantic import BaseModel, field_validator, model_validator

from scheduling import to_instant

class EventCreate(BaseModel):
    user_id: int
    title: str
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_instant(cls, value: datetime) -> datetime:
        return to_instant(value)

    @model_validator(mode="after")
    def validate_order(self) -> "EventCreate":
        if self.start_time > self.end_time:
            raise ValueError("start_time must not be after end_time")
        return self

class Event(BaseModel):
    id: int
    user_id: int
    title: str
    start_time: datetime
    end_time: datetime

    class Config:
        from_attributes = True

class ConvertedEvent(BaseModel):
    title: str
    start: datetime
    end: datetime
    converted: bool
