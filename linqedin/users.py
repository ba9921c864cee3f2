"""Users, their account types and the searches each type may perform."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .profile import Profile
from .search import SearchQuery


class AccountType(str, Enum):
    BASIC = "Basic"
    BUSINESS = "Business"
    EXECUTIVE = "Executive"


@dataclass(eq=False)
class User(ABC):
    """A registered user with a profile and a set of followed usernames."""

    username: str
    profile: Profile = field(default_factory=Profile)
    following: set[str] = field(default_factory=set)

    account_type: ClassVar[AccountType]

    def follow(self, username: str) -> None:
        self.following.add(username)

    def unfollow(self, username: str) -> None:
        self.following.discard(username)

    def is_following(self, username: str) -> bool:
        return username in self.following

    @abstractmethod
    def find(self, query: SearchQuery, users: Mapping[str, User]) -> dict[str, User]:
        """Return the users matching ``query``, ordered by username."""

    def converted(self, account_type: AccountType | str) -> User:
        """Return a copy of this user with a different account type."""
        return create_user(
            account_type,
            self.username,
            copy.deepcopy(self.profile),
            set(self.following),
        )


class BasicUser(User):
    account_type = AccountType.BASIC

    def find(self, query: SearchQuery, users: Mapping[str, User]) -> dict[str, User]:
        found = {}
        for key, user in sorted(users.items()):
            personal = user.profile.personal
            if query.username and key != query.username:
                continue
            if query.name and personal.name != query.name:
                continue
            if query.surname and personal.surname != query.surname:
                continue
            found[key] = user
        return found


class BusinessUser(BasicUser):
    account_type = AccountType.BUSINESS

    def find(self, query: SearchQuery, users: Mapping[str, User]) -> dict[str, User]:
        found = {}
        for key, user in super().find(query, users).items():
            personal = user.profile.personal
            education = user.profile.education
            if query.birth_place and personal.birth_place != query.birth_place:
                continue
            if query.residence and personal.residence != query.residence:
                continue
            if query.diploma and education.diploma != query.diploma:
                continue
            if query.degree and query.degree not in education.degrees:
                continue
            found[key] = user
        return found


class ExecutiveUser(BusinessUser):
    account_type = AccountType.EXECUTIVE

    def find(self, query: SearchQuery, users: Mapping[str, User]) -> dict[str, User]:
        found = {}
        for key, user in super().find(query, users).items():
            jobs = user.profile.work.jobs
            # Users with no recorded jobs are not filtered by company or title.
            if (query.company or query.title) and jobs:
                if not any(
                    (not query.company or job.company == query.company)
                    and (not query.title or job.title == query.title)
                    for job in jobs
                ):
                    continue
            found[key] = user
        return found


_CLASSES: dict[AccountType, type[User]] = {
    AccountType.BASIC: BasicUser,
    AccountType.BUSINESS: BusinessUser,
    AccountType.EXECUTIVE: ExecutiveUser,
}


def create_user(
    account_type: AccountType | str,
    username: str,
    profile: Profile | None = None,
    following: Iterable[str] = (),
) -> User:
    """Build a user of the given account type; raise ValueError for unknown types."""
    cls = _CLASSES[AccountType(account_type)]
    return cls(username, profile if profile is not None else Profile(), set(following))