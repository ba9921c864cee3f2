# linqedin

A small professional-network manager. Every member has a username, a
profile (personal data, education and work history) and a set of people
they follow. Members hold one of three account types, and the account type
decides how much of other members' profiles they can search and see:

| Account   | Can search by                                              | Sees in a profile                                  |
|-----------|------------------------------------------------------------|----------------------------------------------------|
| Basic     | username, name, surname                                    | username, name, surname                            |
| Business  | the above, plus birth place, residence, diploma and degree | the above, plus personal details and education     |
| Executive | the above, plus company and job title                      | the above, plus work history                       |

An administrator can add and remove members, change their account type,
search the network by username, name and surname, and see every part of a
profile.

All data lives in a single XML file, which is rewritten whenever something
changes. Dates are stored in the form `Sat May 20 1995`.

## Installing

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Command line

Each call runs one action against a database file and exits with status 0,
or prints a message on standard error and exits with status 1:

    linqedin DATABASE admin LOGIN ACTION ...
    linqedin DATABASE user USERNAME ACTION ...

The administrator's login name is `admin`; a member logs in with their
username. There are no passwords.

Administrator actions:

- `add USERNAME NAME SURNAME` — register a new Basic member
- `remove USERNAME` — delete a member
- `type USERNAME` — print a member's account type
- `set-type USERNAME {Basic,Business,Executive}` — change the account type
- `search [--username U] [--name N] [--surname S]` — list matching members
- `show USERNAME` — print a member's whole profile

Member actions:

- `info` — your account and personal details
- `update-info [--name] [--surname] [--email] [--birth-date YYYY-MM-DD] [--birth-place] [--residence]`
- `education`, `set-diploma DIPLOMA`, `add-degree DEGREE`,
  `remove-degree DEGREE`, `replace-degree OLD NEW`
- `jobs`, `add-job` and `remove-job`, both taking
  `[--company] [--title] [--city] [--start YYYY-MM-DD] [--end YYYY-MM-DD]`
- `follow USERNAME`, `unfollow USERNAME`, `network`
- `search` with `--username`, `--name`, `--surname`, and, as the account
  type allows, `--birth-place`, `--residence`, `--diploma`, `--degree`,
  `--company`, `--title`; an option the account type does not allow is
  refused
- `show USERNAME` — the parts of a profile your account type may see

Search results never include the member who is searching. Following is
two-way: `follow` adds each member to the other's network, and `unfollow`
removes both sides.

For example:

    linqedin network.xml admin admin add mrossi Mario Rossi
    linqedin network.xml user mrossi set-diploma "Liceo Scientifico"
    linqedin network.xml user mrossi search --surname Bianchi

## Library

- `linqedin.profile` — `PersonalData`, `Job`, `Education`, `WorkHistory`
  and `Profile`. Education and work history keep their entries in order;
  `add_degree`, `remove_degree`, `replace_degree`, `add_job`, `remove_job`
  and `replace_job` act on the first matching entry and do nothing when
  there is none.
- `linqedin.search` — `SearchQuery`, a set of optional criteria; empty
  fields match everything, and `is_empty()` tells whether any is set.
- `linqedin.users` — `AccountType`, the `User` base class and its
  `BasicUser`, `BusinessUser` and `ExecutiveUser` kinds.
  `User.find(query, users)` filters a mapping of username to user according
  to the searcher's account type, ordered by username; an Executive search
  by company or title does not filter out members with no recorded jobs.
  `follow`, `unfollow` and `is_following` manage the follow set, and
  `converted(account_type)` gives a copy of the member under another
  account type. `create_user(account_type, username, profile, following)`
  builds the right kind of user and raises `ValueError` for an unknown type.
- `linqedin.storage` — `Database(path)`, the XML-backed store, with `load`,
  `save`, `add`, `add_new`, `remove`, `replace`, `change_type`,
  `add_follower`, `remove_follower`, `get` and `find`. Removing a member
  also drops them from the follow sets of everyone they followed; changing
  the account type keeps profile and network. `format_date` and
  `parse_date` convert dates to and from the form used in the file.
- `linqedin.controllers` — `AdminController(database)` and
  `UserController(database, username)`, which offer the actions open to
  the administrator and to a logged-in member.
- `linqedin.views` — plain-data helpers deciding what a viewer sees:
  `search_fields`, `search_results`, `profile_sections`, `network_members`
  and `account_summary`.

## What it does not do

There is no graphical or interactive interface: the command runs one
action per call. The command line does not create a database; it expects
an existing file. An empty one can be made from Python with
`Database("network.xml").save()`.