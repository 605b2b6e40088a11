from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class BowlingSummaryOut(BaseModel):
    frames: List[List[int]]
    running_totals: List[Optional[int]] = Field(
        ..., alias="runningTotals", min_length=10, max_length=10
    )
    total: Optional[int] = None
    complete: bool

    model_config = ConfigDict(populate_by_name=True)
