from dataclasses import fields
from datetime import date

import pytest

from linqedin.controllers import AdminController, UserController
from linqedin.profile import Education, Job, PersonalData, Profile, WorkHistory
from linqedin.search import SearchQuery
from linqedin.storage import Database, parse_date
from linqedin.users import AccountType, create_user
from linqedin.views import (
    account_summary,
    network_members,
    profile_sections,
    search_fields,
    search_results,
)


@pytest.fixture
def database(tmp_path):
    db = Database(tmp_path / "db.xml")
    db.add(
        create_user(
            "Executive",
            "alice",
            Profile(
                PersonalData("Alice", "Rossi", "alice@example.com", date(1990, 3, 4), "Roma", "Padova"),
                Education("Liceo", ["Informatica"]),
                WorkHistory([Job("Acme", "Dev", "Padova", date(2015, 1, 1), None)]),
            ),
        )
    )
    db.add(create_user("Basic", "bob", Profile(PersonalData("Bob", "Bianchi"))))
    db.add(create_user("Business", "carol", Profile(PersonalData("Carol", "Rossi"))))
    return db


def test_search_fields_grow_with_account_type():
    basic = set(search_fields("Basic"))
    business = set(search_fields(AccountType.BUSINESS))
    executive = set(search_fields("Executive"))
    assert basic < business < executive
    assert set(search_fields("Admin")) == basic
    assert executive == {f.name for f in fields(SearchQuery)}


def test_search_fields_unknown_type():
    with pytest.raises(ValueError):
        search_fields("Guest")


def test_search_results_exclude_viewer(database):
    ctrl = UserController(database, "alice")
    results = search_results(ctrl, SearchQuery())
    assert [r.username for r in results] == ["bob", "carol"]
    assert all(r.following is False for r in results)


def test_search_results_show_following(database):
    ctrl = UserController(database, "alice")
    ctrl.follow("bob")
    results = {r.username: r.following for r in search_results(ctrl, SearchQuery())}
    assert results == {"bob": True, "carol": False}


def test_search_results_filter_by_surname(database):
    ctrl = UserController(database, "bob")
    results = search_results(ctrl, SearchQuery(surname="Rossi"))
    assert [r.username for r in results] == ["alice", "carol"]
    assert results[0].name == "Alice"


def test_admin_search_results_have_no_network(database):
    ctrl = AdminController(database)
    results = search_results(ctrl, SearchQuery())
    assert [r.username for r in results] == ["alice", "bob", "carol"]
    assert {r.following for r in results} == {None}


def test_profile_sections_by_viewer(database):
    alice = database.get("alice")
    assert set(profile_sections(alice, "Basic")) == {"account"}
    assert set(profile_sections(alice, "Business")) == {"account", "details", "education"}
    assert set(profile_sections(alice, "Executive")) == {"account", "details", "education", "work"}
    assert profile_sections(alice, "Admin") == profile_sections(alice, "Executive")


def test_profile_sections_content(database):
    alice = database.get("alice")
    sections = profile_sections(alice, "Executive")
    assert sections["account"] == {"username": "alice", "name": "Alice", "surname": "Rossi"}
    assert sections["education"] == {"diploma": "Liceo", "degrees": ["Informatica"]}
    assert sections["work"] == alice.profile.work.jobs
    assert parse_date(sections["details"]["birth_date"]) == date(1990, 3, 4)


def test_profile_sections_unknown_viewer(database):
    with pytest.raises(ValueError):
        profile_sections(database.get("bob"), "Nobody")


def test_network_members(database):
    ctrl = UserController(database, "alice")
    ctrl.follow("carol")
    ctrl.follow("bob")
    ctrl.user.follow("ghost")
    assert [u.username for u in network_members(ctrl)] == ["bob", "carol"]


def test_network_members_for_admin(database):
    assert network_members(AdminController(database)) == []


def test_account_summary(database):
    summary = account_summary(database.get("alice"))
    assert summary["username"] == "alice"
    assert summary["account_type"] == "Executive"
    assert summary["email"] == "alice@example.com"
    assert parse_date(summary["birth_date"]) == date(1990, 3, 4)


def test_account_summary_without_birth_date(database):
    summary = account_summary(database.get("bob"))
    assert summary["account_type"] == "Basic"
    assert summary["birth_date"] == ""