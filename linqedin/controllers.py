"""Controllers through which an administrator or a user works on the database."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .profile import Job, PersonalData
from .search import SearchQuery
from .storage import Database
from .users import AccountType, User

ADMIN = "Admin"


class Controller(ABC):
    """Operations shared by every kind of session."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @property
    @abstractmethod
    def viewer_type(self) -> str:
        """Kind of session: an account type value, or ``"Admin"``."""

    @property
    @abstractmethod
    def username(self) -> str:
        """Name of whoever is logged in."""

    def search_user(self, username: str) -> bool:
        """True if a user with this username exists."""
        return username in self.database

    def get_user(self, username: str) -> User | None:
        """Return the stored user with this username, or None."""
        return self.database.get(username)

    @abstractmethod
    def find_users(self, query: SearchQuery) -> dict[str, User]:
        """Users matching ``query``, ordered by username."""

    @abstractmethod
    def follow(self, username: str) -> None:
        """Add ``username`` to the network of the logged-in user."""

    @abstractmethod
    def unfollow(self, username: str) -> None:
        """Remove ``username`` from the network of the logged-in user."""

    @abstractmethod
    def is_following(self, username: str) -> bool:
        """True if ``username`` is in the network of the logged-in user."""

    @abstractmethod
    def save(self) -> None:
        """Write the database to its file."""


class AdminController(Controller):
    """Administration of the registered users."""

    @property
    def viewer_type(self) -> str:
        return ADMIN

    @property
    def username(self) -> str:
        return ADMIN

    def search_user(self, username: str) -> bool:
        return super().search_user(username)

    def add_user(self, username: str, name: str, surname: str) -> None:
        """Register a new basic user; raise ValueError if the username is taken."""
        if username in self.database:
            raise ValueError(f"username already in use: {username!r}")
        self.database.add_new(username, name, surname)

    def remove_user(self, username: str) -> None:
        """Delete a user; raise KeyError if there is none."""
        self.database.remove(username)

    def find_users(self, query: SearchQuery) -> dict[str, User]:
        return self.database.find(query)

    def get_user(self, username: str) -> User | None:
        return super().get_user(username)

    def user_type(self, username: str) -> AccountType:
        """Account type of a stored user; raise KeyError if there is none."""
        user = self.database.get(username)
        if user is None:
            raise KeyError(username)
        return user.account_type

    def change_user_type(self, username: str, account_type: AccountType | str) -> None:
        """Give a stored user another account type."""
        self.database.change_type(username, account_type)

    def follow(self, username: str) -> None:
        """The administrator has no network; nothing happens."""

    def unfollow(self, username: str) -> None:
        """The administrator has no network; nothing happens."""

    def is_following(self, username: str) -> bool:
        return False

    def save(self) -> None:
        self.database.save()


class UserController(Controller):
    """Session of one registered user."""

    def __init__(self, database: Database, username: str) -> None:
        super().__init__(database)
        user = database.get(username)
        if user is None:
            raise KeyError(username)
        self.user = user

    @property
    def viewer_type(self) -> str:
        return self.user.account_type.value

    @property
    def username(self) -> str:
        return self.user.username

    def search_user(self, username: str) -> bool:
        return super().search_user(username)

    def find_users(self, query: SearchQuery) -> dict[str, User]:
        return self.user.find(query, self.database.users)

    def get_user(self, username: str) -> User | None:
        return super().get_user(username)

    def update_personal_data(self, personal: PersonalData) -> None:
        """Replace the personal details and save."""
        self.user.profile.personal = personal
        self.save()

    def set_diploma(self, diploma: str) -> None:
        """Set the diploma and save."""
        self.user.profile.education.diploma = diploma
        self.save()

    def has_degree(self, degree: str) -> bool:
        return degree in self.user.profile.education.degrees

    def add_degree(self, degree: str) -> None:
        """Add a degree and save; raise ValueError if it is already listed."""
        if self.has_degree(degree):
            raise ValueError(f"degree already present: {degree!r}")
        self.user.profile.add_degree(degree)
        self.save()

    def remove_degree(self, degree: str) -> None:
        self.user.profile.remove_degree(degree)
        self.save()

    def replace_degree(self, old: str, new: str) -> None:
        self.user.profile.replace_degree(old, new)
        self.save()

    def add_job(self, job: Job) -> None:
        self.user.profile.add_job(job)
        self.save()

    def remove_job(self, job: Job) -> None:
        self.user.profile.remove_job(job)
        self.save()

    def replace_job(self, old: Job, new: Job) -> None:
        self.user.profile.replace_job(old, new)
        self.save()

    def follow(self, username: str) -> None:
        """Connect with ``username``; the connection goes both ways."""
        self.user.follow(username)
        self.database.add_follower(self.username, username)
        self.save()

    def unfollow(self, username: str) -> None:
        """Drop the connection with ``username`` on both sides."""
        self.user.unfollow(username)
        self.database.remove_follower(self.username, username)
        self.save()

    def is_following(self, username: str) -> bool:
        return self.user.is_following(username)

    def save(self) -> None:
        self.database.replace(self.user)
        self.database.save()