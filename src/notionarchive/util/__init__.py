from .ids import is_notion_id, normalize_notion_id
from .logging import configure_logging

__all__ = [
    "is_notion_id",
    "normalize_notion_id",
    "configure_logging",
]
