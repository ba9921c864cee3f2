"""XML-backed storage of all registered users."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from datetime import date

from .profile import Education, Job, PersonalData, Profile, WorkHistory
from .search import SearchQuery
from .users import AccountType, BasicUser, User, create_user

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_date(value: date | None) -> str:
    """Render a date as e.g. ``Sat May 20 1995``; an absent date is ``""``."""
    if value is None:
        return ""
    return f"{_DAYS[value.weekday()]} {_MONTHS[value.month - 1]} {value.day} {value.year}"


def parse_date(text: str | None) -> date | None:
    """Parse a date written by :func:`format_date`; empty text gives None."""
    if text is None or not text.strip():
        return None
    parts = text.split()
    if len(parts) != 4:
        raise ValueError(f"invalid date: {text!r}")
    _, month_name, day, year = parts
    try:
        month = _MONTHS.index(month_name) + 1
    except ValueError:
        raise ValueError(f"invalid month in date: {text!r}") from None
    return date(int(year), month, int(day))


def _matches_basic(key: str, user: User, query: SearchQuery) -> bool:
    personal = user.profile.personal
    if query.username and key != query.username:
        return False
    if query.name and personal.name != query.name:
        return False
    if query.surname and personal.surname != query.surname:
        return False
    return True


class Database:
    """All users keyed by username, persisted to an XML file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        self.users: dict[str, User] = {}

    def __contains__(self, username: object) -> bool:
        return username in self.users

    def __len__(self) -> int:
        return len(self.users)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.users))

    # -- persistence -----------------------------------------------------

    def load(self) -> None:
        """Replace the users in memory with those stored in the file."""
        root = ET.parse(self.path).getroot()
        users: dict[str, User] = {}
        for entry in root.iter("Utente"):
            user = self._read_user(entry)
            if user is not None and user.username not in users:
                users[user.username] = user
        self.users = users

    @staticmethod
    def _read_user(entry: ET.Element) -> User | None:
        profile_el = entry.find("Profilo")
        if profile_el is None:
            profile_el = entry
        username = profile_el.findtext("Username", default="")
        kind = profile_el.findtext("TipoAccount", default="")
        try:
            account_type = AccountType(kind)
        except ValueError:
            return None

        personal = PersonalData()
        data_el = profile_el.find("DatiAnagrafici")
        if data_el is not None:
            personal = PersonalData(
                name=data_el.findtext("Nome", default=""),
                surname=data_el.findtext("Cognome", default=""),
                email=data_el.findtext("Email", default=""),
                birth_date=parse_date(data_el.findtext("Data")),
                birth_place=data_el.findtext("Luogo_Nascita", default=""),
                residence=data_el.findtext("Residenza", default=""),
            )

        education = Education()
        studies_el = profile_el.find("Titoli_Studio")
        if studies_el is not None:
            education = Education(
                diploma=studies_el.findtext("Diploma", default=""),
                degrees=[el.text or "" for el in studies_el.findall("Laurea")],
            )

        work = WorkHistory()
        jobs_el = profile_el.find("Esperienze_Lavorative")
        if jobs_el is not None:
            work = WorkHistory(
                [
                    Job(
                        company=job_el.findtext("Azienda", default=""),
                        title=job_el.findtext("Titolo", default=""),
                        city=job_el.findtext("Citta", default=""),
                        start=parse_date(job_el.findtext("Inizio")),
                        end=parse_date(job_el.findtext("Fine")),
                    )
                    for job_el in jobs_el.findall("Lavoro")
                ]
            )

        network_el = entry.find("Rete_Follow")
        following = (
            {el.text or "" for el in network_el.findall("Follow")}
            if network_el is not None
            else set()
        )
        return create_user(
            account_type, username, Profile(personal, education, work), following
        )

    def save(self) -> None:
        """Write every user to the file."""
        root = ET.Element("db")
        for key in sorted(self.users):
            root.append(self._write_user(self.users[key]))
        tree = ET.ElementTree(root)
        ET.indent(tree, space="    ")
        tree.write(self.path, encoding="utf-8", xml_declaration=True)

    @staticmethod
    def _write_user(user: User) -> ET.Element:
        def text(parent: ET.Element, tag: str, value: str) -> None:
            ET.SubElement(parent, tag).text = value

        entry = ET.Element("Utente")
        profile_el = ET.SubElement(entry, "Profilo")
        text(profile_el, "Username", user.username)
        text(profile_el, "TipoAccount", user.account_type.value)

        personal = user.profile.personal
        data_el = ET.SubElement(profile_el, "DatiAnagrafici")
        text(data_el, "Nome", personal.name)
        text(data_el, "Cognome", personal.surname)
        text(data_el, "Email", personal.email)
        text(data_el, "Data", format_date(personal.birth_date))
        text(data_el, "Luogo_Nascita", personal.birth_place)
        text(data_el, "Residenza", personal.residence)

        education = user.profile.education
        studies_el = ET.SubElement(profile_el, "Titoli_Studio")
        text(studies_el, "Diploma", education.diploma)
        for degree in education.degrees:
            text(studies_el, "Laurea", degree)

        jobs_el = ET.SubElement(profile_el, "Esperienze_Lavorative")
        for job in user.profile.work.jobs:
            job_el = ET.SubElement(jobs_el, "Lavoro")
            text(job_el, "Azienda", job.company)
            text(job_el, "Titolo", job.title)
            text(job_el, "Citta", job.city)
            text(job_el, "Inizio", format_date(job.start))
            text(job_el, "Fine", format_date(job.end))

        network_el = ET.SubElement(entry, "Rete_Follow")
        for followed in sorted(user.following):
            text(network_el, "Follow", followed)
        return entry

    # -- changes ---------------------------------------------------------

    def add(self, user: User) -> None:
        """Store a user unless the username is taken, then save."""
        self.users.setdefault(user.username, user)
        self.save()

    def add_new(self, username: str, name: str, surname: str) -> None:
        """Create and store a basic user with the given name and surname."""
        user = BasicUser(username)
        user.profile.personal.name = name
        user.profile.personal.surname = surname
        self.add(user)

    def remove(self, username: str) -> None:
        """Delete a user and drop it from the networks of those it follows."""
        user = self.users.get(username)
        if user is None:
            raise KeyError(username)
        for followed in user.following:
            other = self.users.get(followed)
            if other is not None:
                other.unfollow(username)
        del self.users[username]
        self.save()

    def replace(self, user: User) -> None:
        """Put ``user`` in place of the stored user with the same username."""
        if user.username in self.users:
            self.users[user.username] = user

    def change_type(self, username: str, account_type: AccountType | str) -> None:
        """Give a stored user a different account type."""
        user = self.users.get(username)
        if user is None:
            raise KeyError(username)
        converted = user.converted(AccountType(account_type))
        self.remove(username)
        self.add(converted)

    def add_follower(self, followed: str, follower: str) -> None:
        """Make ``follower`` follow ``followed``, if ``follower`` exists."""
        user = self.users.get(follower)
        if user is not None:
            user.follow(followed)

    def remove_follower(self, followed: str, follower: str) -> None:
        """Make ``follower`` stop following ``followed``, if ``follower`` exists."""
        user = self.users.get(follower)
        if user is not None:
            user.unfollow(followed)

    # -- queries ---------------------------------------------------------

    def get(self, username: str) -> User | None:
        """Return the user with this username, or None."""
        return self.users.get(username)

    def find(self, query: SearchQuery) -> dict[str, User]:
        """Users matching username, name and surname, ordered by username."""
        return {
            key: user
            for key, user in sorted(self.users.items())
            if _matches_basic(key, user, query)
        }