from rosetree import fn, kin

from .utils import at, term


def test_nibling_directions(family):
    ctx = at(family, 1)
    assert term(kin.first_nibling(ctx)) == 4
    assert term(kin.previous_nibling(ctx)) == 5
    assert term(kin.next_nibling(ctx)) == 9
    assert term(kin.last_nibling(ctx)) == 9


def test_niblings_stay_on_their_side(family):
    ctx = at(family, 1)
    assert kin.first_nibling(ctx, fn.term_is(9)) is None
    assert kin.previous_nibling(ctx, fn.term_is(9)) is None
    assert kin.last_nibling(ctx, fn.term_is(4)) is None
    assert kin.next_nibling(ctx, fn.term_is(5)) is None


def test_niblings_are_never_own_children(family):
    ctx = at(family, 1)
    assert kin.first_nibling(ctx, fn.term_is(6)) is None
    assert kin.next_nibling(ctx, fn.term_is(7)) is None


def test_niblings_scan_across_siblings(family):
    ctx = at(family, 2)
    assert term(kin.first_nibling(ctx, fn.term_is(6))) == 6
    assert term(kin.previous_nibling(ctx)) == 8
    assert term(kin.previous_nibling(ctx, fn.term_is(5))) == 5
    assert term(kin.previous_nibling(ctx, lambda c: c.term < 6)) == 5


def test_no_niblings_without_siblings(family):
    assert kin.first_nibling(at(family, 0)) is None
    assert kin.previous_nibling(at(family, 0)) is None
    assert kin.next_nibling(at(family, 2)) is None


def test_nibling_at_sibling(family):
    ctx = at(family, 1)
    assert term(kin.first_nibling_at_sibling(ctx, 0)) == 4
    assert term(kin.last_nibling_at_sibling(ctx, 0)) == 5
    assert term(kin.last_nibling_at_sibling(ctx, 2)) == 9
    assert kin.first_nibling_at_sibling(ctx, 1) is None
    assert kin.first_nibling_at_sibling(ctx, 3) is None
    assert term(kin.first_nibling_at_sibling(at(family, 0), 1, fn.term_is(8))) == 8
    assert kin.first_nibling_at_sibling(ctx, 0, fn.term_is(6)) is None


def test_grandnibling_directions(family):
    ctx = at(family, 1)
    assert term(kin.first_grandnibling(ctx)) == 10
    assert term(kin.previous_grandnibling(ctx)) == 12
    assert term(kin.next_grandnibling(ctx)) == 16
    assert term(kin.last_grandnibling(ctx)) == 17
    assert term(kin.first_grandnibling(ctx, fn.term_is(11))) == 11
    assert kin.first_grandnibling(ctx, fn.term_is(16)) is None
    assert kin.last_grandnibling(ctx, fn.term_is(12)) is None


def test_grandnibling_at_sibling(family):
    ctx = at(family, 1)
    assert term(kin.first_grandnibling_at_sibling(ctx, 0)) == 10
    assert term(kin.last_grandnibling_at_sibling(ctx, 0)) == 12
    assert term(kin.last_grandnibling_at_sibling(ctx, 2)) == 17
    assert kin.first_grandnibling_at_sibling(ctx, 1) is None


def test_descendant_niblings(family):
    ctx = at(family, 1)
    assert term(kin.previous_descendant_nibling(ctx)) == 12
    assert term(kin.previous_descendant_nibling(ctx, fn.term_is(5))) == 5
    assert term(kin.next_descendant_nibling(ctx)) == 16
    assert term(kin.first_descendant_nibling(at(family, 2))) == 10
    assert term(kin.last_descendant_nibling(at(family, 0))) == 17


def test_descendant_nibling_returns_deepest_match(family):
    ctx = at(family, 2)
    assert term(kin.first_descendant_nibling(ctx, lambda c: c.term in (4, 10))) == 10
    assert term(kin.first_descendant_nibling(ctx, lambda c: c.term in (1, 4))) == 4
    assert kin.first_descendant_nibling(ctx, fn.term_is(99)) is None


def test_descendant_nibling_of_a_leaf_sibling(family):
    # 14 is a leaf, so 15 has no previous descendant nibling
    assert kin.previous_descendant_nibling(at(family, 1, 1, 1)) is None
    assert kin.next_descendant_nibling(at(family, 1, 1, 1)) is None
    assert kin.previous_descendant_nibling(at(family, 0)) is None


def test_extended_niblings(family):
    ctx = at(family, 1, 1)
    assert term(kin.first_extended_nibling(ctx)) == 10
    assert term(kin.previous_extended_nibling(ctx)) == 12
    assert term(kin.next_extended_nibling(ctx)) == 16
    assert term(kin.last_extended_nibling(ctx)) == 17


def test_extended_niblings_with_predicates(family):
    ctx = at(family, 1, 1)
    assert term(kin.first_extended_nibling(ctx, fn.term_is(11))) == 11
    assert term(kin.previous_extended_nibling(ctx, fn.term_is(10))) == 10
    # 13 is a child of a sibling, not of an extended cousin
    assert kin.first_extended_nibling(ctx, fn.term_is(13)) is None
    assert kin.next_extended_nibling(ctx, fn.term_is(12)) is None
