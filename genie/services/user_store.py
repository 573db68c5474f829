"""
User storage with JSON-based persistence (data/users.json).

Lookups by email are exact matches, the same way accounts are created.
"""

import threading
from pathlib import Path
from typing import List, Optional

from ..models.user import UserRecord
from ..utils.exceptions import AccountAlreadyExists, StorageError
from ..utils.logger import get_logger
from .json_store import atomic_write, read_json

logger = get_logger(__name__)

USERS_FILENAME = "users.json"


class UserStore:
    """JSON-backed account records"""

    def __init__(self, data_dir: Path):
        self.users_path = Path(data_dir) / USERS_FILENAME
        self._lock = threading.Lock()

    def load_users(self) -> List[UserRecord]:
        data = read_json(self.users_path)
        try:
            return [UserRecord(**item) for item in data.get("users", [])]
        except (TypeError, ValueError) as e:
            raise StorageError(f"Failed to load users from {self.users_path}: {e}")

    def _save_users(self, users: List[UserRecord]) -> None:
        atomic_write(self.users_path, {"users": [u.model_dump(mode="json") for u in users]})

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.load_users() if u.email == email), None)

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        return next((u for u in self.load_users() if u.id == user_id), None)

    def add_user(self, user: UserRecord) -> UserRecord:
        """Persist a new user; the email must not be taken."""
        with self._lock:
            users = self.load_users()
            if any(u.email == user.email for u in users):
                raise AccountAlreadyExists()
            users.append(user)
            self._save_users(users)
        logger.info("User stored", user_id=user.id, role=user.role.value)
        return user
