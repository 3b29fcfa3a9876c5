"""
Record service
Loads, creates, replaces and deletes one entity kind in the remote store, scoped to a user
"""

import time
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import ValidationError

from daybook.client.store_client import StoreClient, store_client
from daybook.models.base import Record
from daybook.models.user import Session
from daybook.utils.dates import iso_timestamp
from daybook.utils.errors import RecordValidationError
from daybook.utils.logger import logger

R = TypeVar("R", bound=Record)


def client_id() -> str:
    """Client-generated id: current time in milliseconds"""
    return str(int(time.time() * 1000))


class RecordService(Generic[R]):
    """Base service for one collection

    The store has no query support: every read fetches the whole collection
    and keeps the records whose userId matches.
    """

    model: Type[R] = Record
    # Text fields that must be non-empty after trimming
    required_fields: Tuple[str, ...] = ()
    # Text fields stored as absent when left empty
    optional_text_fields: Tuple[str, ...] = ("description",)

    def __init__(self, client: Optional[StoreClient] = None):
        """
        Initialise the service

        Args:
            client: store client, defaults to the shared one
        """
        self.client = client or store_client

    @property
    def collection(self) -> str:
        return self.model.collection

    def path(self, record_id: str) -> str:
        return f"{self.collection}/{record_id}"

    async def list_for_user(self, user_id: str) -> List[R]:
        """
        Load every record of the user

        Args:
            user_id: owner id

        Returns:
            the user's records in store order, empty when the store is unreachable
        """
        data = await self.client.get(self.collection)
        if not data:
            return []

        records: List[R] = []
        for record_id, body in data.items():
            if not isinstance(body, dict) or body.get("userId") != user_id:
                continue
            try:
                records.append(self.model.from_record(record_id, body))
            except ValidationError as e:
                logger.warning(f"Skipping malformed {self.model.kind} {record_id}: {e.error_count()} errors")
        return records

    async def get(self, user_id: str, record_id: str) -> Optional[R]:
        """One record of the user, or None"""
        for record in await self.list_for_user(user_id):
            if record.id == record_id:
                return record
        return None

    def _field_names(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Map camelCase keys onto attribute names"""
        aliases = {field.alias: name for name, field in self.model.model_fields.items() if field.alias}
        return {aliases.get(key, key): value for key, value in data.items()}

    def normalize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Trim text input the way the entry forms do"""
        for name in self.required_fields:
            if isinstance(data.get(name), str):
                data[name] = data[name].strip()
        for name in self.optional_text_fields:
            if isinstance(data.get(name), str):
                data[name] = data[name].strip() or None
        return data

    def validate(self, record: R) -> None:
        """
        Reject a record before it is written

        Raises:
            RecordValidationError: a required field is empty
        """
        for name in self.required_fields:
            if not getattr(record, name, None):
                raise RecordValidationError(self.model.kind, f"{name} is required")

    def _build(self, data: Dict[str, Any]) -> R:
        try:
            record = self.model.model_validate(data)
        except ValidationError as e:
            raise RecordValidationError(self.model.kind, str(e)) from e
        self.validate(record)
        return record

    async def create(self, session: Session, data: Dict[str, Any]) -> Optional[R]:
        """
        Create a record for the signed-in user

        Args:
            session: current session
            data: record fields (attribute or camelCase names)

        Returns:
            the created record carrying its store id, None if the store rejected it

        Raises:
            RecordValidationError: input rejected, nothing was written
        """
        now = iso_timestamp()
        fields = self.normalize(self._field_names(dict(data)))
        fields.update({
            "id": client_id(),
            "user_id": session.user_id,
            "created_at": now,
            "updated_at": now,
        })
        record = self._build(fields)

        new_id = await self.client.post(self.collection, record.to_record())
        if not new_id:
            logger.error(f"Creating {self.model.kind} failed for user {session.user_id}")
            return None

        logger.info(f"{self.model.kind} created: {new_id}")
        return record.model_copy(update={"id": new_id})

    async def update(self, record: R, changes: Dict[str, Any]) -> Optional[R]:
        """
        Replace a record with its fields merged with the changes

        Args:
            record: the stored record
            changes: fields to overwrite

        Returns:
            the replaced record, None if the store rejected it

        Raises:
            RecordValidationError: merged record rejected, nothing was written
        """
        changes = self.normalize(self._field_names(dict(changes)))
        changes.pop("id", None)
        changes.pop("user_id", None)
        merged = {**record.model_dump(), **changes, "updated_at": iso_timestamp()}
        updated = self._build(merged)
        return await self.replace(updated)

    async def replace(self, record: R) -> Optional[R]:
        """Write the full record at its id"""
        stored = await self.client.put(self.path(record.id), record.to_record())
        if stored is None:
            logger.error(f"Updating {self.model.kind} {record.id} failed")
            return None

        logger.info(f"{self.model.kind} updated: {record.id}")
        return record

    async def delete(self, record_id: str) -> bool:
        """
        Delete a record

        Args:
            record_id: store id

        Returns:
            whether it succeeded
        """
        success = await self.client.delete(self.path(record_id))
        if success:
            logger.info(f"{self.model.kind} deleted: {record_id}")
        else:
            logger.error(f"Deleting {self.model.kind} {record_id} failed")
        return success
