"""
Named relative lookups over a Context.

Almost every relation is a scan over the same shape of candidates: go up
some number of generations, take the siblings on one side of that
ancestor, then come back down some number of levels inside each of them.
relatives() produces those candidates lazily and each named relation is a
predicate search over it.

    generation  depth   relation
    0           0       siblings
    0           1       niblings
    0           2       grandniblings
    1           0       piblings
    2           0       grandpiblings
    1           1       first cousins
    2           2       second cousins
    n           n       extended cousins

Scans never leave their side: FIRST and PREVIOUS only see candidates
before the focus, NEXT and LAST only candidates after it.

Predicates given to these functions are called with the candidate Tree.
"""
from . import fn
from .exceptions import ContractViolation
from .tree import has_child, is_leaf
from .zipper import (
    child_at, first_child, guarded, last_child, parent, sibling_at,
)


class Direction(object):

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return self.name


FIRST = Direction('FIRST')
PREVIOUS = Direction('PREVIOUS')
NEXT = Direction('NEXT')
LAST = Direction('LAST')

DIRECTIONS = (FIRST, PREVIOUS, NEXT, LAST)

_RIGHT_TO_LEFT = (PREVIOUS, LAST)


## Generic primitives
@guarded
def ancestor_at(ctx, generation):
    """
    The ancestor generation levels up, None when generation is below 1 or
    the path is not that long.
    """
    if generation < 1 or generation > len(ctx.path):
        return None
    for _ in range(generation):
        ctx = parent(ctx)
    return ctx


def _sibling_indices(ctx, direction):
    here = len(ctx.prev)
    if direction is FIRST:
        return range(0, here)
    if direction is PREVIOUS:
        return range(here - 1, -1, -1)
    last = here + len(ctx.next)
    if direction is NEXT:
        return range(here + 1, last + 1)
    return range(last, here, -1)


def _descendants_at(ctx, depth, right_to_left):
    if depth == 0:
        yield ctx
        return
    count = len(ctx.focus.children)
    indices = range(count - 1, -1, -1) if right_to_left else range(count)
    for i in indices:
        for found in _descendants_at(child_at(ctx, i), depth - 1, right_to_left):
            yield found


# Context -> Int -> Int -> Direction -> [Context]
@guarded
def relatives(ctx, generation, depth, direction):
    """
    Lazily yield the Contexts depth levels below the siblings of the
    ancestor generation levels up, in the scan order of direction.

    FIRST goes from the leftmost previous sibling towards the focus,
    PREVIOUS from the nearest previous sibling away from it, NEXT from the
    nearest next sibling away from it and LAST from the rightmost next
    sibling towards the focus. Descendants of each sibling come left to
    right for FIRST and NEXT and right to left for PREVIOUS and LAST.
    """
    if direction not in DIRECTIONS:
        raise ContractViolation('direction', 'unknown')
    return _relatives(ctx, generation, depth, direction)


def _relatives(ctx, generation, depth, direction):
    if depth < 0:
        return
    anchor = ctx if generation == 0 else ancestor_at(ctx, generation)
    if anchor is None:
        return
    right_to_left = direction in _RIGHT_TO_LEFT
    for i in _sibling_indices(anchor, direction):
        sibling = sibling_at(anchor, i)
        for found in _descendants_at(sibling, depth, right_to_left):
            yield found


def _find(candidates, predicate):
    return fn.find_first(lambda c: predicate(c.focus), candidates)


def _scan(ctx, generation, depth, direction, predicate):
    return _find(relatives(ctx, generation, depth, direction), predicate)


## Ancestors
@guarded
def grandparent(ctx):
    return ancestor_at(ctx, 2)


@guarded
def great_grandparent(ctx):
    return ancestor_at(ctx, 3)


## Descendants
def _first_descendant_at(ctx, depth, predicate):
    return _find(_descendants_at(ctx, depth, False), predicate)


def _last_descendant_at(ctx, depth, predicate):
    return _find(_descendants_at(ctx, depth, True), predicate)


@guarded
def first_grandchild(ctx, predicate=fn.always):
    return _first_descendant_at(ctx, 2, predicate)


@guarded
def last_grandchild(ctx, predicate=fn.always):
    return _last_descendant_at(ctx, 2, predicate)


@guarded
def first_great_grandchild(ctx, predicate=fn.always):
    return _first_descendant_at(ctx, 3, predicate)


@guarded
def last_great_grandchild(ctx, predicate=fn.always):
    return _last_descendant_at(ctx, 3, predicate)


def _edge_descendant(ctx, move, predicate):
    if is_leaf(ctx.focus):
        return None
    while True:
        down = move(ctx)
        if down is None:
            return ctx if predicate is None else None
        if predicate is not None and predicate(down.focus):
            return down
        ctx = down


@guarded
def leftmost_descendant(ctx, predicate=None):
    """
    Follow first children down. Without a predicate return the deepest
    node reached, with one return the first node on the way that matches.
    None from a leaf.
    """
    return _edge_descendant(ctx, first_child, predicate)


@guarded
def rightmost_descendant(ctx, predicate=None):
    return _edge_descendant(ctx, last_child, predicate)


## Siblings
@guarded
def first_sibling(ctx, predicate=fn.always):
    """
    The leftmost previous sibling that matches. Siblings after the focus
    are never considered.
    """
    return _scan(ctx, 0, 0, FIRST, predicate)


@guarded
def previous_sibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 0, PREVIOUS, predicate)


@guarded
def next_sibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 0, NEXT, predicate)


@guarded
def last_sibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 0, LAST, predicate)


## Niblings
@guarded
def first_nibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 1, FIRST, predicate)


@guarded
def previous_nibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 1, PREVIOUS, predicate)


@guarded
def next_nibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 1, NEXT, predicate)


@guarded
def last_nibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 1, LAST, predicate)


@guarded
def first_nibling_at_sibling(ctx, sibling_index, predicate=fn.always):
    sibling = sibling_at(ctx, sibling_index)
    if sibling is not None:
        return first_child(sibling, predicate)


@guarded
def last_nibling_at_sibling(ctx, sibling_index, predicate=fn.always):
    sibling = sibling_at(ctx, sibling_index)
    if sibling is not None:
        return last_child(sibling, predicate)


## Grandniblings
@guarded
def first_grandnibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 2, FIRST, predicate)


@guarded
def previous_grandnibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 2, PREVIOUS, predicate)


@guarded
def next_grandnibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 2, NEXT, predicate)


@guarded
def last_grandnibling(ctx, predicate=fn.always):
    return _scan(ctx, 0, 2, LAST, predicate)


@guarded
def first_grandnibling_at_sibling(ctx, sibling_index, predicate=fn.always):
    sibling = sibling_at(ctx, sibling_index)
    if sibling is not None:
        return first_grandchild(sibling, predicate)


@guarded
def last_grandnibling_at_sibling(ctx, sibling_index, predicate=fn.always):
    sibling = sibling_at(ctx, sibling_index)
    if sibling is not None:
        return last_grandchild(sibling, predicate)


## Descendant niblings
def _deepest_match(sibling, move, predicate):
    if sibling is None or is_leaf(sibling.focus):
        return None
    found = None
    ctx = move(sibling)
    while ctx is not None:
        if predicate(ctx.focus):
            found = ctx
        ctx = move(ctx)
    return found


@guarded
def first_descendant_nibling(ctx, predicate=fn.always):
    """
    Walk first children down from the first sibling and return the
    deepest node on the way that matches.
    """
    return _deepest_match(first_sibling(ctx), first_child, predicate)


@guarded
def previous_descendant_nibling(ctx, predicate=fn.always):
    """
    Walk last children down from the previous sibling and return the
    deepest node on the way that matches. With the default predicate this
    is the node visited just before the focus in a pre-order walk.
    """
    return _deepest_match(previous_sibling(ctx), last_child, predicate)


@guarded
def next_descendant_nibling(ctx, predicate=fn.always):
    return _deepest_match(next_sibling(ctx), first_child, predicate)


@guarded
def last_descendant_nibling(ctx, predicate=fn.always):
    return _deepest_match(last_sibling(ctx), last_child, predicate)


## Piblings
@guarded
def first_pibling(ctx, predicate=fn.always):
    return _scan(ctx, 1, 0, FIRST, predicate)


@guarded
def previous_pibling(ctx, predicate=fn.always):
    return _scan(ctx, 1, 0, PREVIOUS, predicate)


@guarded
def next_pibling(ctx, predicate=fn.always):
    return _scan(ctx, 1, 0, NEXT, predicate)


@guarded
def last_pibling(ctx, predicate=fn.always):
    return _scan(ctx, 1, 0, LAST, predicate)


@guarded
def pibling_at(ctx, index):
    up = parent(ctx)
    if up is not None:
        return sibling_at(up, index)


## Grandpiblings
@guarded
def first_grandpibling(ctx, predicate=fn.always):
    return _scan(ctx, 2, 0, FIRST, predicate)


@guarded
def previous_grandpibling(ctx, predicate=fn.always):
    return _scan(ctx, 2, 0, PREVIOUS, predicate)


@guarded
def next_grandpibling(ctx, predicate=fn.always):
    return _scan(ctx, 2, 0, NEXT, predicate)


@guarded
def last_grandpibling(ctx, predicate=fn.always):
    return _scan(ctx, 2, 0, LAST, predicate)


@guarded
def grandpibling_at(ctx, index):
    up = grandparent(ctx)
    if up is not None:
        return sibling_at(up, index)


## Ancestral piblings
def _ancestral(ctx, direction, predicate):
    for generation in range(1, len(ctx.path) + 1):
        found = _scan(ctx, generation, 0, direction, predicate)
        if found is not None:
            return found
    return None


@guarded
def first_ancestral_pibling(ctx, predicate=fn.always):
    """
    Going up one ancestor at a time, the first previous sibling of an
    ancestor that matches. The nearest ancestor with a match wins.
    """
    return _ancestral(ctx, FIRST, predicate)


@guarded
def previous_ancestral_pibling(ctx, predicate=fn.always):
    return _ancestral(ctx, PREVIOUS, predicate)


@guarded
def next_ancestral_pibling(ctx, predicate=fn.always):
    return _ancestral(ctx, NEXT, predicate)


@guarded
def last_ancestral_pibling(ctx, predicate=fn.always):
    return _ancestral(ctx, LAST, predicate)


## First and second cousins
@guarded
def first_first_cousin(ctx, predicate=fn.always):
    return _scan(ctx, 1, 1, FIRST, predicate)


@guarded
def previous_first_cousin(ctx, predicate=fn.always):
    return _scan(ctx, 1, 1, PREVIOUS, predicate)


@guarded
def next_first_cousin(ctx, predicate=fn.always):
    return _scan(ctx, 1, 1, NEXT, predicate)


@guarded
def last_first_cousin(ctx, predicate=fn.always):
    return _scan(ctx, 1, 1, LAST, predicate)


@guarded
def first_second_cousin(ctx, predicate=fn.always):
    return _scan(ctx, 2, 2, FIRST, predicate)


@guarded
def previous_second_cousin(ctx, predicate=fn.always):
    return _scan(ctx, 2, 2, PREVIOUS, predicate)


@guarded
def next_second_cousin(ctx, predicate=fn.always):
    return _scan(ctx, 2, 2, NEXT, predicate)


@guarded
def last_second_cousin(ctx, predicate=fn.always):
    return _scan(ctx, 2, 2, LAST, predicate)


## Extended cousins
def _extended_cousins(ctx, direction):
    # nearest generation first outward from the focus, farthest first
    # when scanning in from an edge
    top = len(ctx.path)
    if direction in (PREVIOUS, NEXT):
        generations = range(1, top + 1)
    else:
        generations = range(top, 0, -1)
    for generation in generations:
        for found in relatives(ctx, generation, generation, direction):
            yield found


@guarded
def first_extended_cousin(ctx, predicate=fn.always):
    """
    The leftmost node at the focus's depth, to the left of the focus and
    not one of its siblings, that matches.
    """
    return _find(_extended_cousins(ctx, FIRST), predicate)


@guarded
def previous_extended_cousin(ctx, predicate=fn.always):
    """
    The nearest matching node at the focus's depth to the left of the
    focus, skipping its siblings.
    """
    return _find(_extended_cousins(ctx, PREVIOUS), predicate)


@guarded
def next_extended_cousin(ctx, predicate=fn.always):
    return _find(_extended_cousins(ctx, NEXT), predicate)


@guarded
def last_extended_cousin(ctx, predicate=fn.always):
    return _find(_extended_cousins(ctx, LAST), predicate)


## Extended piblings
@guarded
def first_extended_pibling(ctx, predicate=fn.always):
    up = parent(ctx)
    if up is not None:
        return first_extended_cousin(up, predicate)


@guarded
def previous_extended_pibling(ctx, predicate=fn.always):
    up = parent(ctx)
    if up is not None:
        return previous_extended_cousin(up, predicate)


@guarded
def next_extended_pibling(ctx, predicate=fn.always):
    up = parent(ctx)
    if up is not None:
        return next_extended_cousin(up, predicate)


@guarded
def last_extended_pibling(ctx, predicate=fn.always):
    up = parent(ctx)
    if up is not None:
        return last_extended_cousin(up, predicate)


## Extended niblings
@guarded
def first_extended_nibling(ctx, predicate=fn.always):
    """
    The first matching child of the first extended cousin that has one.
    """
    cousin = first_extended_cousin(ctx, has_child(predicate))
    if cousin is not None:
        return first_child(cousin, predicate)


@guarded
def previous_extended_nibling(ctx, predicate=fn.always):
    cousin = previous_extended_cousin(ctx, has_child(predicate))
    if cousin is not None:
        return last_child(cousin, predicate)


@guarded
def next_extended_nibling(ctx, predicate=fn.always):
    cousin = next_extended_cousin(ctx, has_child(predicate))
    if cousin is not None:
        return first_child(cousin, predicate)


@guarded
def last_extended_nibling(ctx, predicate=fn.always):
    cousin = last_extended_cousin(ctx, has_child(predicate))
    if cousin is not None:
        return last_child(cousin, predicate)
