import threading
from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass
class User:
    first_name: str
    last_name: str
    email: str


SEED_USERS = [
    User(first_name='GraphQL', last_name='isCool', email='GraphQL@isCool.com'),
]


class UserStore:
    """Ordered, append-only collection of users.

    Every access goes through one lock, so concurrent ``add`` calls are
    serialized and ``all`` never observes a half-finished append.
    """

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: List[User] = list(users or [])
        self._lock = threading.Lock()

    @classmethod
    def with_seed(cls) -> 'UserStore':
        return cls(User(u.first_name, u.last_name, u.email) for u in SEED_USERS)

    def add(self, user: User) -> User:
        with self._lock:
            self._users.append(user)
        return user

    def all(self) -> List[User]:
        with self._lock:
            return list(self._users)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
