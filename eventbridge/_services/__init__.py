from .events_service import EventsService
from .scheduler_service import SchedulerService

__all__ = [
    "EventsService",
    "SchedulerService",
]
