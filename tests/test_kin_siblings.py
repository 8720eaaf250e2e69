from rosetree import fn, kin, zipper

from .utils import row, t, term, terms_of


def test_first_sibling_never_looks_past_the_focus():
    ctx = row(1, 2, 3, 4, 5, focus=4)
    assert kin.first_sibling(ctx, fn.term_is(7)) is None

    ctx = zipper.new(t(5), prev=[t(n) for n in (1, 2, 3, 4)], next=[t(n) for n in (6, 7, 8)])
    assert kin.first_sibling(ctx, fn.term_is(7)) is None
    assert kin.previous_sibling(ctx, fn.term_is(7)) is None
    assert term(kin.last_sibling(ctx, fn.term_is(7))) == 7


def test_last_sibling_never_looks_before_the_focus():
    ctx = row(1, 2, 3, 4, 5, focus=2)
    assert kin.last_sibling(ctx, fn.term_is(1)) is None
    assert kin.next_sibling(ctx, fn.term_is(2)) is None


def test_sibling_directions():
    ctx = row(1, 2, 3, 4, 5, focus=2)
    assert term(kin.first_sibling(ctx)) == 1
    assert term(kin.previous_sibling(ctx)) == 2
    assert term(kin.next_sibling(ctx)) == 4
    assert term(kin.last_sibling(ctx)) == 5


def test_sibling_predicates():
    ctx = row(1, 2, 3, 4, 5, 6, focus=3)
    greater_than_one = lambda c: c.term > 1
    assert term(kin.first_sibling(ctx, greater_than_one)) == 2
    assert term(kin.previous_sibling(ctx, fn.term_is(1))) == 1
    assert term(kin.next_sibling(ctx, fn.term_is(6))) == 6
    assert term(kin.last_sibling(ctx, lambda c: c.term < 6)) == 5


def test_no_siblings_at_the_edges():
    first = row(1, 2, 3, focus=0)
    assert kin.first_sibling(first) is None
    assert kin.previous_sibling(first) is None

    last = row(1, 2, 3, focus=2)
    assert kin.next_sibling(last) is None
    assert kin.last_sibling(last) is None

    root = zipper.enter(t(1))
    assert kin.next_sibling(root) is None


def test_sibling_moves_keep_the_split():
    moved = kin.first_sibling(row(1, 2, 3, 4, 5, focus=2))
    assert moved.prev == ()
    assert terms_of(zipper.enter(s) for s in moved.next) == [2, 3, 4, 5]

    moved = kin.last_sibling(row(1, 2, 3, 4, 5, focus=2))
    assert terms_of(zipper.enter(s) for s in moved.prev) == [4, 3, 2, 1]
    assert moved.next == ()


def test_sibling_at_reexported():
    ctx = row(1, 2, 3, focus=1)
    assert term(kin.sibling_at(ctx, 0)) == 1
    assert kin.sibling_at(ctx, 1) is None
