"""
Mood service
Mood check-ins, one per user per calendar day
"""

from datetime import date, datetime
from typing import Optional, Sequence

from daybook.models.mood import MoodEntry
from daybook.models.user import Session
from daybook.services.record_service import RecordService
from daybook.utils.dates import now_local, to_day


def entry_for_day(entries: Sequence[MoodEntry], day: date) -> Optional[MoodEntry]:
    """First entry dated on the calendar day"""
    for entry in entries:
        if to_day(entry.date) == day:
            return entry
    return None


class MoodService(RecordService[MoodEntry]):
    """Mood entries of a user"""

    model = MoodEntry
    optional_text_fields = ("notes",)

    async def log_mood(self, session: Session, mood: str, notes: Optional[str] = None,
                       now: Optional[datetime] = None) -> Optional[MoodEntry]:
        """
        Record today's mood

        Today's entry is replaced if there is one, otherwise a new entry is
        created. Uniqueness per day is kept only by this lookup; the store
        does not enforce it.

        Args:
            session: current session
            mood: one of MOODS
            notes: optional free text
            now: time of the check-in

        Returns:
            the stored entry, None if the store rejected it

        Raises:
            RecordValidationError: unknown mood
        """
        now = now or now_local()
        data = {
            "mood": mood,
            "notes": notes,
            "date": now.isoformat(timespec="seconds"),
        }

        entries = await self.list_for_user(session.user_id)
        existing = entry_for_day(entries, now.date())
        if existing:
            return await self.update(existing, data)
        return await self.create(session, data)


mood_service = MoodService()
