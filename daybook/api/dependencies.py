"""
API dependencies
Store client, services and the caller's session for the routers
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException

from daybook.client.store_client import StoreClient, store_client
from daybook.models.user import Session
from daybook.services.auth_service import AuthService, auth_service
from daybook.services.event_service import EventService
from daybook.services.goal_service import GoalService
from daybook.services.habit_service import HabitService
from daybook.services.journal_service import JournalService
from daybook.services.mood_service import MoodService
from daybook.services.task_service import TaskService


def get_store_client() -> StoreClient:
    return store_client


def get_auth_service() -> AuthService:
    return auth_service


def get_task_service(client: StoreClient = Depends(get_store_client)) -> TaskService:
    return TaskService(client)


def get_event_service(client: StoreClient = Depends(get_store_client)) -> EventService:
    return EventService(client)


def get_journal_service(client: StoreClient = Depends(get_store_client)) -> JournalService:
    return JournalService(client)


def get_goal_service(client: StoreClient = Depends(get_store_client)) -> GoalService:
    return GoalService(client)


def get_habit_service(client: StoreClient = Depends(get_store_client)) -> HabitService:
    return HabitService(client)


def get_mood_service(client: StoreClient = Depends(get_store_client)) -> MoodService:
    return MoodService(client)


def bearer_token(authorization: Optional[str]) -> str:
    if not authorization or not authorization.lower().startswith("bearer "):
        return ""
    return authorization[7:].strip()


def get_session(authorization: Optional[str] = Header(default=None),
                auth: AuthService = Depends(get_auth_service)) -> Session:
    """
    Resolve the caller's session from "Authorization: Bearer <token>"

    Raises:
        HTTPException: 401 when the token is missing or unknown
    """
    session = auth.resolve(bearer_token(authorization))
    if session is None:
        raise HTTPException(status_code=401, detail="Not signed in")
    return session


def require_record(record, kind: str):
    """404 unless the record exists and belongs to the caller"""
    if record is None:
        raise HTTPException(status_code=404, detail=f"{kind} not found")
    return record


def require_stored(result, kind: str):
    """502 when the store did not accept a write"""
    if result is None or result is False:
        raise HTTPException(status_code=502, detail=f"Saving {kind} failed")
    return result
