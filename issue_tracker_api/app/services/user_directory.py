"""
Read‑only directory of the users issues can be assigned to.

Users are seeded when the directory is built and never created or
removed afterwards, so lookups need no locking.
"""

from typing import Dict, Iterable, List, Optional

from issue_tracker_api.app.core.errors import ValidationError
from issue_tracker_api.app.schemas.user import UserRead

DEFAULT_USERS = (
    UserRead(id=1, name="김개발"),
    UserRead(id=2, name="이디자인"),
    UserRead(id=3, name="박기획"),
)


class UserDirectory:
    """Fixed mapping from user id to ``UserRead``."""

    def __init__(self, users: Optional[Iterable[UserRead]] = None) -> None:
        seed = DEFAULT_USERS if users is None else tuple(users)
        self._users: Dict[int, UserRead] = {user.id: user for user in seed}

    def get(self, user_id: int) -> Optional[UserRead]:
        return self._users.get(user_id)

    def require(self, user_id: int) -> UserRead:
        """Return the user with ``user_id`` or raise ``ValidationError``."""
        user = self._users.get(user_id)
        if user is None:
            raise ValidationError(f"Invalid userId: {user_id}")
        return user

    def list_users(self) -> List[UserRead]:
        return [self._users[user_id] for user_id in sorted(self._users)]

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __len__(self) -> int:
        return len(self._users)
