"""
Event service
Calendar events; all-day events span their days from 00:00:00 to 23:59:59
"""

from datetime import timedelta
from typing import Any, Dict

from daybook.models.event import Event
from daybook.services.record_service import RecordService
from daybook.utils.dates import start_of_day, to_day


class EventService(RecordService[Event]):
    """Events of a user"""

    model = Event
    required_fields = ("title",)

    def normalize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = super().normalize(data)
        if data.get("all_day") and data.get("start_date") and data.get("end_date"):
            start = start_of_day(to_day(data["start_date"]))
            end = start_of_day(to_day(data["end_date"])) + timedelta(hours=23, minutes=59, seconds=59)
            data["start_date"] = start.isoformat()
            data["end_date"] = end.isoformat()
        return data


event_service = EventService()
