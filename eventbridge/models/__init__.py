from .errors import RegionMissingError
from .events import PutEventsEntry
from .schedules import FlexibleTimeWindow, FlexibleTimeWindowMode, ScheduleTarget

__all__ = [
    "RegionMissingError",
    "PutEventsEntry",
    "FlexibleTimeWindow",
    "FlexibleTimeWindowMode",
    "ScheduleTarget",
]
