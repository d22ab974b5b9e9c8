from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict


class CalendarEntryRead(BaseModel):
    student_id: int
    student: str
    time: str
    class_name: Optional[str] = None
    class_date: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)


class TimeSlotRead(BaseModel):
    time: str
    entries: List[CalendarEntryRead]

    model_config = ConfigDict(from_attributes=True)


class DayBucketRead(BaseModel):
    # Weekday value (Sunday=0 ... Saturday=6) or "unscheduled"
    key: Union[int, str]
    label: str
    slots: List[TimeSlotRead]

    model_config = ConfigDict(from_attributes=True)
