from rosetree import Tree, levelorder, path_to_root, preorder, terms

from .utils import at, terms_of


def test_preorder(family):
    assert terms_of(preorder(family)) == [
        0, 1, 4, 10, 11, 5, 12, 2, 6, 13, 7, 14, 15, 8, 3, 9, 16, 17,
    ]


def test_terms(family):
    assert list(terms(family)) == list(c.focus.term for c in preorder(family))
    assert list(terms(Tree('a'))) == ['a']


def test_levelorder(family, left_heavy):
    assert terms_of(levelorder(family)) == list(range(18))
    assert terms_of(levelorder(left_heavy)) == list(range(8))


def test_path_to_root(family):
    assert terms_of(path_to_root(at(family, 1, 1, 0))) == [14, 7, 2, 0]
    assert terms_of(path_to_root(at(family))) == [0]


def test_iterators_are_lazy(family):
    walk = preorder(family)
    assert next(walk).focus == family
    assert next(walk).focus.term == 1
