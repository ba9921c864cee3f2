from linqedin.search import SearchQuery


def test_default_query_is_empty():
    assert SearchQuery().is_empty() is True


def test_query_with_any_field_is_not_empty():
    assert SearchQuery(title="Dev").is_empty() is False
    assert SearchQuery(username="mario").is_empty() is False


def test_fields_keep_values():
    query = SearchQuery("u", "n", "s", company="Acme")
    assert (query.username, query.name, query.surname, query.company) == (
        "u",
        "n",
        "s",
        "Acme",
    )
    assert query.degree == ""