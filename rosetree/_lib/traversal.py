"""
Whole tree walks built from kinship lookups.

A move function takes a Context and returns the next Context or None.
The walks keep no stack or queue of their own, the Context they are at is
all the state they need to take the next step.

Each walk is a chain of candidate moves tried in order, the first one to
succeed wins:

    descend   depth first, pre-order
    ascend    depth first, reverse pre-order
    forward   level order
    backward  reverse level order
    rewind    straight up to the root

Predicates given to these functions are called with the candidate Context.
"""
from . import fn, kin
from .zipper import guarded, map_focus, parent


## Combinators
# Context -> (Context -> Context | None) -> Int -> Context | None
@guarded
def move_for(ctx, move_fn, reps):
    """
    Apply move_fn exactly reps times. None if any step fails or reps is
    not positive, there is no partial progress.
    """
    if reps <= 0:
        return None
    for _ in range(reps):
        ctx = move_fn(ctx)
        if ctx is None:
            return None
    return ctx


@guarded
def move_if(ctx, move_fn, predicate):
    moved = move_fn(ctx)
    if moved is not None and predicate(moved):
        return moved
    return None


@guarded
def move_until(ctx, move_fn, predicate):
    """
    Keep moving until a Context satisfies predicate, None if the moves run
    out first.
    """
    ctx = move_fn(ctx)
    while ctx is not None:
        if predicate(ctx):
            return ctx
        ctx = move_fn(ctx)
    return None


@guarded
def move_while(ctx, move_fn, predicate=fn.always):
    """
    Keep moving while the moves succeed and satisfy predicate, returning
    the last Context that did. Returns ctx itself if the first move fails.
    """
    while True:
        moved = move_fn(ctx)
        if moved is None or not predicate(moved):
            return ctx
        ctx = moved


@guarded
def find(ctx, predicate, move_fn):
    """Like move_until, but ctx itself is tested first."""
    if predicate(ctx):
        return ctx
    return move_until(ctx, move_fn, predicate)


@guarded
def map_walk(ctx, move_fn, map_fn):
    """
    Replace the focus with map_fn(focus) then move, until a move fails.
    Returns the last Context, which carries every replacement made on the
    way. The move sees the replaced focus, so a map_fn that changes
    children changes where a downward walk goes.
    """
    while True:
        ctx = map_focus(ctx, map_fn)
        moved = move_fn(ctx)
        if moved is None:
            return ctx
        ctx = moved


# Context -> (Context -> Context | None) -> a -> (Context -> a -> a) -> (Context, a)
@guarded
def accumulate(ctx, move_fn, acc, acc_fn):
    """
    Fold acc_fn over ctx and every Context the moves reach, returning the
    last Context and the final accumulator.
    """
    while True:
        acc = acc_fn(ctx, acc)
        moved = move_fn(ctx)
        if moved is None:
            return ctx, acc
        ctx = moved


## Walks
_DESCEND = (
    kin.first_child,
    kin.next_sibling,
    kin.next_ancestral_pibling,
)

_ASCEND = (
    kin.previous_descendant_nibling,
    kin.previous_sibling,
    kin.parent,
)

_FORWARD = (
    kin.next_sibling,
    kin.next_extended_cousin,
    kin.first_extended_nibling,
    kin.first_nibling,
    kin.first_child,
)

_BACKWARD = (
    kin.previous_sibling,
    kin.previous_extended_cousin,
    kin.last_extended_pibling,
    kin.last_pibling,
    kin.parent,
)


@guarded
def descend(ctx):
    """
    The next node in pre-order. None only at the last node of the tree.

    >>> from rosetree._lib.tree import Tree
    >>> from rosetree._lib.zipper import enter
    >>> ctx = enter(Tree(0, (Tree(1, (Tree(2),)), Tree(3))))
    >>> [descend_for(ctx, n).focus.term for n in (1, 2, 3)]
    [1, 2, 3]
    """
    return fn.first_of(_DESCEND, ctx)


@guarded
def ascend(ctx):
    """The previous node in pre-order. None only at the first node."""
    return fn.first_of(_ASCEND, ctx)


@guarded
def forward(ctx):
    """
    The next node in level order: the next node at the same depth, or
    once a level is exhausted the leftmost node one level down.
    """
    return fn.first_of(_FORWARD, ctx)


@guarded
def backward(ctx):
    """
    The previous node in level order: the previous node at the same depth,
    or once a level is exhausted the rightmost node one level up.
    """
    return fn.first_of(_BACKWARD, ctx)


rewind = parent


## descend
def descend_for(ctx, reps):
    return move_for(ctx, descend, reps)


def descend_if(ctx, predicate):
    return move_if(ctx, descend, predicate)


def descend_until(ctx, predicate):
    return move_until(ctx, descend, predicate)


def descend_while(ctx, predicate=fn.always):
    return move_while(ctx, descend, predicate)


def descend_find(ctx, predicate):
    return find(ctx, predicate, descend)


def descend_map(ctx, map_fn):
    return map_walk(ctx, descend, map_fn)


def descend_accumulate(ctx, acc, acc_fn):
    return accumulate(ctx, descend, acc, acc_fn)


def descend_to_last(ctx):
    return move_while(ctx, descend)


## ascend
def ascend_for(ctx, reps):
    return move_for(ctx, ascend, reps)


def ascend_if(ctx, predicate):
    return move_if(ctx, ascend, predicate)


def ascend_until(ctx, predicate):
    return move_until(ctx, ascend, predicate)


def ascend_while(ctx, predicate=fn.always):
    return move_while(ctx, ascend, predicate)


def ascend_find(ctx, predicate):
    return find(ctx, predicate, ascend)


def ascend_map(ctx, map_fn):
    return map_walk(ctx, ascend, map_fn)


def ascend_accumulate(ctx, acc, acc_fn):
    return accumulate(ctx, ascend, acc, acc_fn)


def ascend_to_root(ctx):
    return move_while(ctx, ascend)


## forward
def forward_for(ctx, reps):
    return move_for(ctx, forward, reps)


def forward_if(ctx, predicate):
    return move_if(ctx, forward, predicate)


def forward_until(ctx, predicate):
    return move_until(ctx, forward, predicate)


def forward_while(ctx, predicate=fn.always):
    return move_while(ctx, forward, predicate)


def forward_find(ctx, predicate):
    return find(ctx, predicate, forward)


def forward_map(ctx, map_fn):
    return map_walk(ctx, forward, map_fn)


def forward_accumulate(ctx, acc, acc_fn):
    return accumulate(ctx, forward, acc, acc_fn)


def forward_to_last(ctx):
    return move_while(ctx, forward)


## backward
def backward_for(ctx, reps):
    return move_for(ctx, backward, reps)


def backward_if(ctx, predicate):
    return move_if(ctx, backward, predicate)


def backward_until(ctx, predicate):
    return move_until(ctx, backward, predicate)


def backward_while(ctx, predicate=fn.always):
    return move_while(ctx, backward, predicate)


def backward_find(ctx, predicate):
    return find(ctx, predicate, backward)


def backward_map(ctx, map_fn):
    return map_walk(ctx, backward, map_fn)


def backward_accumulate(ctx, acc, acc_fn):
    return accumulate(ctx, backward, acc, acc_fn)


def backward_to_root(ctx):
    return move_while(ctx, backward)


## rewind
def rewind_for(ctx, reps):
    return move_for(ctx, rewind, reps)


def rewind_if(ctx, predicate):
    return move_if(ctx, rewind, predicate)


def rewind_until(ctx, predicate):
    return move_until(ctx, rewind, predicate)


def rewind_while(ctx, predicate=fn.always):
    return move_while(ctx, rewind, predicate)


def rewind_find(ctx, predicate):
    return find(ctx, predicate, rewind)


def rewind_map(ctx, map_fn):
    return map_walk(ctx, rewind, map_fn)


def rewind_accumulate(ctx, acc, acc_fn):
    return accumulate(ctx, rewind, acc, acc_fn)


def rewind_to_root(ctx):
    return move_while(ctx, rewind)


def to_root(ctx):
    """Move up until there is no parent left. Idempotent."""
    return rewind_to_root(ctx)
