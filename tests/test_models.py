from dataclasses import FrozenInstanceError
import pytest
from notefd.models import Header, TagQuery, SearchResult
from notefd.accessors.base import ReadError


def test_parse_lowercases():
    assert TagQuery.parse(['A', 'b']) == TagQuery(frozenset({'a', 'b'}))


def test_parse_comma_separated_string():
    assert TagQuery.parse('Work, urgent,,') == TagQuery(frozenset({'work', 'urgent'}))


def test_parse_passes_through_query():
    query = TagQuery(frozenset({'x'}))
    assert TagQuery.parse(query) is query


def test_matches_is_case_insensitive_and_order_independent():
    query = TagQuery.parse(['A', 'b'])
    assert query.matches(Header('foo', tags=frozenset({'a', 'b', 'c'})))
    assert not query.matches(Header('foo', tags=frozenset({'a'})))


def test_empty_query_matches_everything():
    query = TagQuery.parse([])
    assert query.matches(Header('foo'))
    assert query.matches(Header('foo', 'title', frozenset({'a'})))


def test_query_is_immutable():
    query = TagQuery.parse(['a'])
    with pytest.raises(FrozenInstanceError):
        query.include_tags = frozenset()


def test_header_as_json():
    header = Header('/notes/a.note', 'My Title', frozenset({'work', 'urgent'}))
    assert header.as_json() == {'path': '/notes/a.note', 'title': 'My Title', 'tags': ['urgent', 'work']}


def test_search_result_as_json():
    assert SearchResult('b.note', error=ReadError('b.note')).as_json() == {
        'path': 'b.note',
        'message': 'Failed to read file: b.note'
    }
    assert SearchResult('a.note', header=Header('a.note')).as_json() == {'path': 'a.note', 'title': None, 'tags': []}
