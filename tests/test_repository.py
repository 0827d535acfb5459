"""Tests for dot-notation access to screen data."""
from screenkit.screen import Repository


class _Author:
    def __init__(self, name):
        self.name = name


def test_repository_resolves_nested_mappings():
    repo = Repository({'user': {'profile': {'email': 'ada@example.com'}}})

    assert repo.get('user.profile.email') == 'ada@example.com'
    assert repo.get_content('user.profile.email') == 'ada@example.com'


def test_repository_walks_lists_and_objects():
    repo = Repository({'book': {'authors': [_Author('Le Guin'), _Author('Pratchett')]}})

    assert repo.get('book.authors.1.name') == 'Pratchett'
    assert repo.get('book.authors.5.name') is None
    assert repo.get('book.authors.first') is None


def test_repository_prefers_literal_dotted_key():
    repo = Repository({'user.name': 'literal', 'user': {'name': 'nested'}})

    assert repo.get('user.name') == 'literal'


def test_repository_default_and_has():
    repo = Repository({'count': 0, 'missing': None})

    assert repo.get('nope', 'fallback') == 'fallback'
    assert repo.get('count', 'fallback') == 0
    assert repo.has('missing')
    assert not repo.has('nope')
    assert 'count' in repo
    assert 'nope' not in repo


def test_repository_scalar_segments_are_missing():
    repo = Repository({'title': 'Dune'})

    assert repo.get('title.upper') is None


def test_repository_empty_key_returns_everything():
    data = {'a': 1, 'b': 2}
    repo = Repository(data)

    assert repo.get('') == data
    assert repo.all() == data
    assert sorted(repo) == ['a', 'b']
    assert len(repo) == 2


def test_repository_none_behaves_as_empty():
    repo = Repository(None)

    assert len(repo) == 0
    assert repo.get('anything') is None


def test_repository_getitem_raises_for_missing_key():
    repo = Repository({'a': {'b': 1}})

    assert repo['a.b'] == 1
    try:
        repo['a.c']
    except KeyError as e:
        assert e.args == ('a.c',)
    else:
        raise AssertionError('KeyError not raised')
