"""In-memory user registry keyed by generated identifiers."""

from __future__ import annotations

import logging
import uuid

from pydantic import ValidationError as SchemaValidationError

from ..exceptions import InvalidArgument, UserNotFound
from ..schemas import UserCreate, UserOut

logger = logging.getLogger(__name__)


def _first_error_message(exc: SchemaValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    message = str(errors[0].get("msg", ""))
    # pydantic prefixes messages raised from validators
    return message.removeprefix("Value error, ") or str(exc)


class UserRegistry:
    def __init__(self) -> None:
        self._users: dict[str, UserOut] = {}

    def __len__(self) -> int:
        return len(self._users)

    def create_user(self, name: str, email: str) -> UserOut:
        try:
            payload = UserCreate(name=name, email=email)
        except SchemaValidationError as exc:
            raise InvalidArgument(_first_error_message(exc)) from exc

        uid = uuid.uuid4().hex
        while uid in self._users:
            uid = uuid.uuid4().hex
        user = UserOut(id=uid, name=payload.name, email=payload.email)
        self._users[uid] = user
        logger.info("Created user %s", uid)
        return user

    def find_by_id(self, user_id: str) -> UserOut | None:
        return self._users.get(user_id)

    def get_user(self, user_id: str) -> UserOut:
        user = self.find_by_id(user_id)
        if user is None:
            raise UserNotFound(user_id)
        return user
