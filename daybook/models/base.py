"""
Record base model
Shared fields and wire conversion for every stored entity
"""

from typing import Any, ClassVar, Dict, Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """A stored record; attributes are snake_case, the wire form is camelCase"""

    kind: ClassVar[str] = "record"
    collection: ClassVar[str] = ""

    id: str = ""
    user_id: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        # Fields written by other clients survive a full-record replace
        extra = "allow"

    @classmethod
    def from_record(cls, record_id: str, data: Dict[str, Any]) -> "Record":
        """
        Build a model from a stored record; the store key is the identity

        Args:
            record_id: key under the collection
            data: stored JSON object
        """
        return cls.model_validate({**data, "id": record_id})

    def to_record(self) -> Dict[str, Any]:
        """Full camelCase body for a replace-write"""
        return self.model_dump(by_alias=True, exclude_none=True)
