import xml.etree.ElementTree as ET
from datetime import date

import pytest

from linqedin.profile import Education, Job, PersonalData, Profile, WorkHistory
from linqedin.search import SearchQuery
from linqedin.storage import Database, format_date, parse_date
from linqedin.users import AccountType, BasicUser, BusinessUser, ExecutiveUser


@pytest.fixture
def db(tmp_path):
    return Database(tmp_path / "db.xml")


def _full_user():
    profile = Profile(
        PersonalData(
            name="Mario",
            surname="Rossi",
            email="mario@example.com",
            birth_date=date(1990, 3, 14),
            birth_place="Padova",
            residence="Venezia",
        ),
        Education("Liceo", ["Informatica", "Matematica"]),
        WorkHistory(
            [
                Job("Acme", "Developer", "Padova", date(2012, 1, 2), date(2015, 6, 30)),
                Job("Initech", "Manager", "Milano", date(2016, 2, 1), None),
            ]
        ),
    )
    return ExecutiveUser("mario", profile, {"luigi", "anna"})


def test_format_date_pinned():
    assert format_date(date(1995, 5, 20)) == "Sat May 20 1995"


def test_format_date_none_is_empty():
    assert format_date(None) == ""


def test_parse_date_empty_is_none():
    assert parse_date("") is None
    assert parse_date(None) is None


@pytest.mark.parametrize("value", [date(2000, 1, 1), date(1987, 12, 31), date(2024, 2, 29)])
def test_date_round_trip(value):
    assert parse_date(format_date(value)) == value


@pytest.mark.parametrize("text", ["garbage", "Mon Foo 3 2000", "Mon Jan 40 2000"])
def test_parse_date_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_save_load_round_trip(db):
    original = _full_user()
    db.add(original)
    db.add(BasicUser("luigi", Profile(PersonalData(name="Luigi"))))

    loaded = Database(db.path)
    loaded.load()
    assert list(loaded) == ["luigi", "mario"]
    mario = loaded.get("mario")
    assert isinstance(mario, ExecutiveUser)
    assert mario.profile == original.profile
    assert mario.following == {"luigi", "anna"}
    assert isinstance(loaded.get("luigi"), BasicUser)
    assert loaded.get("luigi").profile.personal.name == "Luigi"


def test_saved_xml_structure(db):
    db.add_new("anna", "Anna", "Bianchi")
    root = ET.parse(db.path).getroot()
    assert root.tag == "db"
    entry = root.find("Utente")
    assert entry.findtext("Profilo/Username") == "anna"
    assert entry.findtext("Profilo/TipoAccount") == "Basic"
    assert entry.findtext("Profilo/DatiAnagrafici/Nome") == "Anna"
    assert entry.findtext("Profilo/DatiAnagrafici/Cognome") == "Bianchi"
    assert entry.find("Rete_Follow") is not None


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Database(tmp_path / "absent.xml").load()


def test_load_skips_unknown_account_type(db):
    db.add_new("anna", "Anna", "Bianchi")
    tree = ET.parse(db.path)
    tree.getroot().find("Utente/Profilo/TipoAccount").text = "Gold"
    tree.write(db.path)
    db.load()
    assert len(db) == 0


def test_add_new_creates_basic_user(db):
    db.add_new("anna", "Anna", "Bianchi")
    user = db.get("anna")
    assert isinstance(user, BasicUser)
    assert (user.profile.personal.name, user.profile.personal.surname) == ("Anna", "Bianchi")
    assert "anna" in db


def test_add_does_not_overwrite(db):
    db.add_new("anna", "Anna", "Bianchi")
    db.add(BasicUser("anna", Profile(PersonalData(name="Other"))))
    assert db.get("anna").profile.personal.name == "Anna"


def test_get_missing_is_none(db):
    assert db.get("nobody") is None


def test_remove_drops_user_from_followed_networks(db):
    db.add(BasicUser("a", following={"b"}))
    db.add(BasicUser("b", following={"a", "c"}))
    db.add(BasicUser("c", following={"a"}))
    db.remove("a")
    assert "a" not in db
    assert db.get("b").following == {"c"}
    # "c" is not followed by "a", so its network is left alone.
    assert db.get("c").following == {"a"}


def test_remove_missing_raises(db):
    with pytest.raises(KeyError):
        db.remove("ghost")


def test_replace_only_existing(db):
    db.add_new("anna", "Anna", "Bianchi")
    replacement = BasicUser("anna", Profile(PersonalData(name="Annetta")))
    db.replace(replacement)
    assert db.get("anna") is replacement
    db.replace(BasicUser("ghost"))
    assert "ghost" not in db


def test_change_type_keeps_profile(db):
    original = _full_user()
    db.add(original)
    db.change_type("mario", "Business")
    user = db.get("mario")
    assert isinstance(user, BusinessUser)
    assert user.account_type is AccountType.BUSINESS
    assert user.profile == original.profile
    assert user.following == {"luigi", "anna"}


def test_change_type_unknown_raises(db):
    db.add_new("anna", "Anna", "Bianchi")
    with pytest.raises(ValueError):
        db.change_type("anna", "Gold")
    assert isinstance(db.get("anna"), BasicUser)


def test_followers(db):
    db.add_new("a", "A", "A")
    db.add_new("b", "B", "B")
    db.add_follower("a", "b")
    assert db.get("b").is_following("a")
    db.remove_follower("a", "b")
    assert not db.get("b").is_following("a")
    db.add_follower("a", "ghost")
    assert "ghost" not in db


def test_find_filters_and_orders(db):
    db.add_new("z", "Anna", "Bianchi")
    db.add_new("a", "Anna", "Verdi")
    db.add_new("m", "Luca", "Bianchi")
    assert list(db.find(SearchQuery(name="Anna"))) == ["a", "z"]
    assert list(db.find(SearchQuery(surname="Bianchi"))) == ["m", "z"]
    assert list(db.find(SearchQuery(username="m", name="Anna"))) == []
    assert list(db.find(SearchQuery())) == ["a", "m", "z"]