"""
Business logic for user health records.

The ``UserDirectory`` keeps user records in memory as plain
dictionaries, in insertion order, for the lifetime of the
application.  Nothing is persisted: restarting the server restores
the single seeded record.

Records are stored exactly as received.  The directory does not
generate ids, check for id collisions or validate field types; the
only rule it enforces is that a user's ``name`` cannot be changed
after creation.
"""

import copy
import logging
import re
from typing import Any, Dict, List, Optional

from .errors import UserNameImmutableError, UserNotFoundError

logger = logging.getLogger(__name__)

SEED_USERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "John Doe", "age": 30, "weight": 75, "height": 180},
]

_LEADING_HEX = re.compile(r"\s*([+-]?)0[xX]([0-9a-fA-F]*)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_user_id(raw: str) -> Optional[int]:
    """Parse the leading integer of a path segment.

    Leading whitespace and a sign are accepted and anything after the
    digits is ignored, so ``"12abc"`` yields ``12``.  A ``0x`` prefix
    switches to hexadecimal (``"0x1A"`` yields ``26``).  Returns
    ``None`` when the value does not start with an integer; ``None``
    matches no record.
    """
    match = _LEADING_HEX.match(raw)
    if match is not None:
        sign, digits = match.groups()
        if not digits:
            return None
        value = int(digits, 16)
        return -value if sign == "-" else value
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


class UserDirectory:
    """In‑memory, ordered collection of user records."""

    def __init__(self, seed: Optional[List[Dict[str, Any]]] = None) -> None:
        self._seed = SEED_USERS if seed is None else seed
        self._users: List[Dict[str, Any]] = []
        self.reset()

    def reset(self) -> None:
        """Discard all changes and restore the seed records."""
        self._users = copy.deepcopy(self._seed)

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> List[Dict[str, Any]]:
        return self._users

    def find_user(self, user_id: Optional[int]) -> Optional[Dict[str, Any]]:
        """Return the first record whose ``id`` equals ``user_id``, or ``None``.

        Booleans never match, so a stored ``"id": true`` is not user 1.
        """
        if user_id is None or isinstance(user_id, bool):
            return None
        for user in self._users:
            stored_id = user.get("id")
            if not isinstance(stored_id, bool) and stored_id == user_id:
                return user
        return None

    def create_user(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Append ``data`` to the directory unchanged and return it."""
        self._users.append(data)
        logger.info("Created user %s", data.get("id"))
        return data

    def update_user(self, user_id: Optional[int], changes: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``changes`` into an existing record.

        Raises ``UserNotFoundError`` if no record has ``user_id`` and
        ``UserNameImmutableError`` if ``changes`` carries a ``name``
        different from the stored one.  In both cases the directory is
        left untouched.  Fields missing from ``changes`` keep their
        current values.
        """
        user = self.find_user(user_id)
        if user is None:
            raise UserNotFoundError()
        if "name" in changes and changes["name"] != user.get("name"):
            logger.warning("Rejected name change for user %s", user_id)
            raise UserNameImmutableError()
        user.update(changes)
        logger.info("Updated user %s", user_id)
        return user
