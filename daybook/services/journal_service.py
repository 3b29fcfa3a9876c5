"""
Journal service
"""

from typing import Any, Dict, List, Union

from daybook.models.journal import JournalEntry
from daybook.services.record_service import RecordService


def parse_tags(tags: Union[str, List[str], None]) -> List[str]:
    """
    Tags from a comma-separated string or a list

    Args:
        tags: "work, ideas,,travel" or ["work", " ideas "]

    Returns:
        trimmed tags without empty ones, order kept
    """
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")
    return [tag.strip() for tag in tags if tag and tag.strip()]


class JournalService(RecordService[JournalEntry]):
    """Journal entries of a user"""

    model = JournalEntry
    required_fields = ("title", "content")
    optional_text_fields = ()

    def normalize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = super().normalize(data)
        if "tags" in data:
            data["tags"] = parse_tags(data["tags"])
        return data


journal_service = JournalService()
