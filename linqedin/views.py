"""What each screen shows, depending on who is looking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .controllers import ADMIN, Controller, UserController
from .profile import Job
from .search import SearchQuery
from .storage import format_date
from .users import AccountType, User

_BASIC_FIELDS = ("username", "name", "surname")
_BUSINESS_FIELDS = ("birth_place", "residence", "diploma", "degree")
_EXECUTIVE_FIELDS = ("company", "title")

_VIEWER_TYPES = frozenset({*(kind.value for kind in AccountType), ADMIN})


def _check_viewer(viewer_type: AccountType | str) -> str:
    value = viewer_type.value if isinstance(viewer_type, AccountType) else viewer_type
    if value not in _VIEWER_TYPES:
        raise ValueError(f"unknown viewer type: {viewer_type!r}")
    return value


def search_fields(viewer_type: AccountType | str) -> tuple[str, ...]:
    """Names of the search criteria a viewer of this type may fill in."""
    kind = _check_viewer(viewer_type)
    fields = _BASIC_FIELDS
    if kind in (AccountType.BUSINESS.value, AccountType.EXECUTIVE.value):
        fields += _BUSINESS_FIELDS
    if kind == AccountType.EXECUTIVE.value:
        fields += _EXECUTIVE_FIELDS
    return fields


@dataclass(frozen=True)
class SearchResult:
    """One row of search results.

    ``following`` is None when the viewer has no network to manage.
    """

    username: str
    name: str
    surname: str
    following: bool | None
    user: User = field(compare=False, repr=False)


def search_results(controller: Controller, query: SearchQuery) -> list[SearchResult]:
    """Users matching ``query``, without the viewer, ordered by username."""
    has_network = controller.viewer_type != ADMIN
    return [
        SearchResult(
            username=key,
            name=user.profile.personal.name,
            surname=user.profile.personal.surname,
            following=controller.is_following(key) if has_network else None,
            user=user,
        )
        for key, user in controller.find_users(query).items()
        if key != controller.username
    ]


def profile_sections(user: User, viewer_type: AccountType | str) -> dict[str, Any]:
    """The parts of ``user``'s profile that a viewer of this type may see."""
    kind = _check_viewer(viewer_type)
    personal = user.profile.personal
    sections: dict[str, Any] = {
        "account": {
            "username": user.username,
            "name": personal.name,
            "surname": personal.surname,
        }
    }
    if kind in (AccountType.BUSINESS.value, AccountType.EXECUTIVE.value, ADMIN):
        sections["details"] = {
            "email": personal.email,
            "birth_date": format_date(personal.birth_date),
            "birth_place": personal.birth_place,
            "residence": personal.residence,
        }
        education = user.profile.education
        sections["education"] = {
            "diploma": education.diploma,
            "degrees": list(education.degrees),
        }
    if kind in (AccountType.EXECUTIVE.value, ADMIN):
        jobs: list[Job] = list(user.profile.work.jobs)
        sections["work"] = jobs
    return sections


def network_members(controller: Controller) -> list[User]:
    """Stored users in the viewer's network, ordered by username."""
    if not isinstance(controller, UserController):
        return []
    members = (controller.get_user(name) for name in sorted(controller.user.following))
    return [member for member in members if member is not None]


def account_summary(user: User) -> dict[str, str]:
    """Account and personal details shown on a user's own info page."""
    personal = user.profile.personal
    return {
        "username": user.username,
        "account_type": user.account_type.value,
        "name": personal.name,
        "surname": personal.surname,
        "email": personal.email,
        "birth_date": format_date(personal.birth_date),
        "birth_place": personal.birth_place,
        "residence": personal.residence,
    }