"""
Journal API
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from daybook.api.dependencies import get_journal_service, get_session, require_record, require_stored
from daybook.models.journal import JournalEntry
from daybook.models.schemas import JournalCreate, JournalUpdate
from daybook.models.user import Session
from daybook.services.filters import ALL, all_tags, filter_journal_entries
from daybook.services.journal_service import JournalService
from daybook.services.stats import journal_counts

router = APIRouter(prefix="/api/journal", tags=["journal"])


@router.get("")
async def list_entries(q: str = "", mood: str = ALL, date: str = "", tag: str = "",
                       session: Session = Depends(get_session),
                       service: JournalService = Depends(get_journal_service)) -> Dict[str, Any]:
    """Filtered entries, every tag in use and the weekly/monthly counts"""
    entries = await service.list_for_user(session.user_id)
    return {
        "entries": filter_journal_entries(entries, q, mood=mood, date_prefix=date, tag=tag),
        "tags": all_tags(entries),
        "counts": journal_counts(entries),
        "total": len(entries),
    }


@router.post("", status_code=201)
async def create_entry(body: JournalCreate, session: Session = Depends(get_session),
                       service: JournalService = Depends(get_journal_service)) -> JournalEntry:
    return require_stored(await service.create(session, body.model_dump()), "journal entry")


@router.put("/{entry_id}")
async def update_entry(entry_id: str, body: JournalUpdate, session: Session = Depends(get_session),
                       service: JournalService = Depends(get_journal_service)) -> JournalEntry:
    entry = require_record(await service.get(session.user_id, entry_id), "journal entry")
    return require_stored(await service.update(entry, body.model_dump(exclude_unset=True)), "journal entry")


@router.delete("/{entry_id}")
async def delete_entry(entry_id: str, session: Session = Depends(get_session),
                       service: JournalService = Depends(get_journal_service)) -> Dict[str, Any]:
    require_record(await service.get(session.user_id, entry_id), "journal entry")
    require_stored(await service.delete(entry_id), "journal entry")
    return {"deleted": entry_id}
