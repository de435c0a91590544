from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

import config
from scheduling import to_instant

class CallRequest(BaseModel):
    user_id: int
    friend_id: int
    duration: int = Field(gt=0, le=config.MAX_CALL_DURATION_MINUTES)  # minutes
    window_start: Optional[datetime] = None
    window_end: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_window(self) -> "CallRequest":
        if (self.window_start is None) != (self.window_end is None):
            raise ValueError("window_start and window_end must be given together")
        if self.window_start is not None:
            self.window_start = to_instant(self.window_start)
            self.window_end = to_instant(self.window_end)
            if self.window_start > self.window_end:
                raise ValueError("window_start must not be after window_end")
        return self

class CallProposal(BaseModel):
    start: datetime
    end: datetime

class CallProposals(BaseModel):
    friend_timezone: str
    proposals: List[CallProposal]
