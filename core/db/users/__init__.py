"""
User storage helpers.
"""
from core.db.users.user_store import (
    create_user,
    get_user_record,
    get_user_by_email,
)

__all__ = [
    "create_user",
    "get_user_record",
    "get_user_by_email",
]
