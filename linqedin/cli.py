"""Command-line front end: log in as the administrator or as a user and act."""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
import xml.etree.ElementTree as ET
from collections.abc import Callable, Sequence
from datetime import date
from typing import Any

from .controllers import AdminController, Controller, UserController
from .profile import Job
from .search import SearchQuery
from .storage import Database, format_date
from .users import AccountType
from .views import (
    account_summary,
    network_members,
    profile_sections,
    search_fields,
    search_results,
)

ADMIN_LOGIN = "admin"
LOGIN_FAILED = "Errore!"
NO_SUCH_USER = "L'utente scelto non esiste"
NO_SUCH_USERNAME = "L'username scelto non esiste"
USERNAME_TAKEN = "L'username scelto già utilizzato"
DEGREE_PRESENT = "La laurea che si vuole inserire è già presente"
NO_RESULTS = "Nessun utente trovato"
NO_DEGREES = "Non è presente nessuna laurea."
NO_JOBS = "Non è presente nessun lavoro."

_SEARCH_OPTIONS = {
    "username": "--username",
    "name": "--name",
    "surname": "--surname",
    "birth_place": "--birth-place",
    "residence": "--residence",
    "diploma": "--diploma",
    "degree": "--degree",
    "company": "--company",
    "title": "--title",
}


class CommandError(Exception):
    """A request that cannot be carried out; the message is shown to the user."""


Action = Callable[[Any, argparse.Namespace], None]


# -- output helpers ------------------------------------------------------


def _job_line(job: Job) -> str:
    return (
        f"{job.company} | {job.title} | {job.city} | "
        f"{format_date(job.start)} - {format_date(job.end)}"
    )


def _print_profile(sections: dict[str, Any]) -> None:
    for key, value in sections["account"].items():
        print(f"{key}: {value}")
    for key, value in sections.get("details", {}).items():
        print(f"{key}: {value}")
    if "education" in sections:
        education = sections["education"]
        print(f"diploma: {education['diploma']}")
        for degree in education["degrees"]:
            print(f"degree: {degree}")
    for job in sections.get("work", []):
        print(f"job: {_job_line(job)}")


# -- shared actions ------------------------------------------------------


def _query_from(args: argparse.Namespace, viewer_type: str) -> SearchQuery:
    allowed = set(search_fields(viewer_type))
    values = {name: getattr(args, name) or "" for name in _SEARCH_OPTIONS}
    for name, value in values.items():
        if value and name not in allowed:
            raise CommandError(
                f"{_SEARCH_OPTIONS[name]} is not available to {viewer_type} accounts"
            )
    return SearchQuery(**values)


def _search(controller: Controller, args: argparse.Namespace) -> None:
    results = search_results(controller, _query_from(args, controller.viewer_type))
    if not results:
        print(NO_RESULTS)
        return
    for result in results:
        line = f"{result.username}\t{result.name}\t{result.surname}"
        if result.following:
            line += "\t(following)"
        print(line)


def _show(controller: Controller, args: argparse.Namespace) -> None:
    user = controller.get_user(args.username)
    if user is None:
        raise CommandError(NO_SUCH_USER)
    _print_profile(profile_sections(user, controller.viewer_type))


# -- administrator actions -----------------------------------------------


def _admin_add(controller: AdminController, args: argparse.Namespace) -> None:
    if controller.search_user(args.username):
        raise CommandError(USERNAME_TAKEN)
    controller.add_user(args.username, args.name, args.surname)
    print(f"L'utente {args.username} è stato aggiunto")


def _admin_remove(controller: AdminController, args: argparse.Namespace) -> None:
    if not controller.search_user(args.username):
        raise CommandError(NO_SUCH_USER)
    controller.remove_user(args.username)
    print(f"L'utente {args.username} è stato rimosso")


def _admin_type(controller: AdminController, args: argparse.Namespace) -> None:
    if controller.get_user(args.username) is None:
        raise CommandError(NO_SUCH_USERNAME)
    print(controller.user_type(args.username).value)


def _admin_set_type(controller: AdminController, args: argparse.Namespace) -> None:
    if controller.get_user(args.username) is None:
        raise CommandError(NO_SUCH_USERNAME)
    controller.change_user_type(args.username, args.account_type)
    print(
        "La tipologia dell' account con username "
        f"{args.username} è stata aggiornata"
    )


# -- user actions --------------------------------------------------------


def _user_info(controller: UserController, args: argparse.Namespace) -> None:
    for key, value in account_summary(controller.user).items():
        print(f"{key}: {value}")


def _user_update_info(controller: UserController, args: argparse.Namespace) -> None:
    changes = {
        name: getattr(args, name)
        for name in ("name", "surname", "email", "birth_date", "birth_place", "residence")
        if getattr(args, name) is not None
    }
    personal = dataclasses.replace(controller.user.profile.personal, **changes)
    controller.update_personal_data(personal)


def _user_education(controller: UserController, args: argparse.Namespace) -> None:
    education = controller.user.profile.education
    print(f"diploma: {education.diploma}")
    if not education.degrees:
        print(NO_DEGREES)
    for degree in education.degrees:
        print(f"degree: {degree}")


def _user_set_diploma(controller: UserController, args: argparse.Namespace) -> None:
    controller.set_diploma(args.diploma)


def _user_add_degree(controller: UserController, args: argparse.Namespace) -> None:
    if controller.has_degree(args.degree):
        raise CommandError(DEGREE_PRESENT)
    controller.add_degree(args.degree)


def _user_remove_degree(controller: UserController, args: argparse.Namespace) -> None:
    controller.remove_degree(args.degree)


def _user_replace_degree(controller: UserController, args: argparse.Namespace) -> None:
    controller.replace_degree(args.old, args.new)


def _job_from(args: argparse.Namespace) -> Job:
    return Job(args.company, args.title, args.city, args.start, args.end)


def _user_jobs(controller: UserController, args: argparse.Namespace) -> None:
    jobs = controller.user.profile.work.jobs
    if not jobs:
        print(NO_JOBS)
    for job in jobs:
        print(_job_line(job))


def _user_add_job(controller: UserController, args: argparse.Namespace) -> None:
    controller.add_job(_job_from(args))


def _user_remove_job(controller: UserController, args: argparse.Namespace) -> None:
    controller.remove_job(_job_from(args))


def _user_follow(controller: UserController, args: argparse.Namespace) -> None:
    if args.username == controller.username:
        raise CommandError("cannot follow yourself")
    if not controller.search_user(args.username):
        raise CommandError(NO_SUCH_USER)
    controller.follow(args.username)


def _user_unfollow(controller: UserController, args: argparse.Namespace) -> None:
    controller.unfollow(args.username)


def _user_network(controller: UserController, args: argparse.Namespace) -> None:
    for member in network_members(controller):
        personal = member.profile.personal
        print(f"{member.username}\t{personal.name}\t{personal.surname}")


# -- parser --------------------------------------------------------------


def _add_search_options(parser: argparse.ArgumentParser) -> None:
    for name, option in _SEARCH_OPTIONS.items():
        parser.add_argument(option, dest=name, default="")


def _add_job_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--company", default="")
    parser.add_argument("--title", default="")
    parser.add_argument("--city", default="")
    parser.add_argument("--start", type=date.fromisoformat, default=None)
    parser.add_argument("--end", type=date.fromisoformat, default=None)


def _action(subparsers: Any, name: str, run: Action, help_text: str) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help_text)
    parser.set_defaults(run=run)
    return parser


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linqedin", description="Manage a professional network.")
    parser.add_argument("database", help="path of the XML database")
    roles = parser.add_subparsers(dest="role", required=True)

    admin = roles.add_parser("admin", help="log in as the administrator")
    admin.add_argument("login", help="administrator login name")
    admin_actions = admin.add_subparsers(dest="action", required=True)
    add = _action(admin_actions, "add", _admin_add, "register a new basic user")
    add.add_argument("username")
    add.add_argument("name")
    add.add_argument("surname")
    _action(admin_actions, "remove", _admin_remove, "delete a user").add_argument("username")
    _action(admin_actions, "type", _admin_type, "show a user's account type").add_argument("username")
    set_type = _action(admin_actions, "set-type", _admin_set_type, "change a user's account type")
    set_type.add_argument("username")
    set_type.add_argument("account_type", choices=[kind.value for kind in AccountType])
    _add_search_options(_action(admin_actions, "search", _search, "search users"))
    _action(admin_actions, "show", _show, "show a user's profile").add_argument("username")

    user = roles.add_parser("user", help="log in as a registered user")
    user.add_argument("login", help="username")
    user_actions = user.add_subparsers(dest="action", required=True)
    _action(user_actions, "info", _user_info, "show your account")
    update = _action(user_actions, "update-info", _user_update_info, "change personal details")
    update.add_argument("--name")
    update.add_argument("--surname")
    update.add_argument("--email")
    update.add_argument("--birth-date", dest="birth_date", type=date.fromisoformat)
    update.add_argument("--birth-place", dest="birth_place")
    update.add_argument("--residence")
    _action(user_actions, "education", _user_education, "show your education")
    _action(user_actions, "set-diploma", _user_set_diploma, "set your diploma").add_argument("diploma")
    _action(user_actions, "add-degree", _user_add_degree, "add a degree").add_argument("degree")
    _action(user_actions, "remove-degree", _user_remove_degree, "remove a degree").add_argument("degree")
    replace = _action(user_actions, "replace-degree", _user_replace_degree, "rename a degree")
    replace.add_argument("old")
    replace.add_argument("new")
    _action(user_actions, "jobs", _user_jobs, "show your work history")
    _add_job_options(_action(user_actions, "add-job", _user_add_job, "add a job"))
    _add_job_options(_action(user_actions, "remove-job", _user_remove_job, "remove a job"))
    _action(user_actions, "follow", _user_follow, "connect with a user").add_argument("username")
    _action(user_actions, "unfollow", _user_unfollow, "drop a connection").add_argument("username")
    _action(user_actions, "network", _user_network, "list your connections")
    _add_search_options(_action(user_actions, "search", _search, "search users"))
    _action(user_actions, "show", _show, "show a user's profile").add_argument("username")
    return parser


def _open_database(path: str) -> Database:
    if not os.path.isfile(path):
        raise CommandError(f"Database non trovato: {path}")
    database = Database(path)
    try:
        database.load()
    except ET.ParseError as exc:
        raise CommandError(f"cannot read database {path}: {exc}") from None
    return database


def _login(database: Database, args: argparse.Namespace) -> Controller:
    if args.role == "admin":
        if args.login != ADMIN_LOGIN:
            raise CommandError(LOGIN_FAILED)
        return AdminController(database)
    try:
        return UserController(database, args.login)
    except KeyError:
        raise CommandError(LOGIN_FAILED) from None


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; return 0 on success and 1 on failure."""
    args = _build_parser().parse_args(argv)
    try:
        controller = _login(_open_database(args.database), args)
        args.run(controller, args)
    except CommandError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())