"""
A zipper over rose trees.

A Context is a cursor: the Tree under focus, its siblings split around it
and the path of Locations leading back to the root. Siblings before the
focus are kept nearest first, so both moving sideways and moving up only
ever touch the front of a tuple.

                0
             /  |  \
            1   2   3
           / \
          4   5

Focused on 5, the context is:

    focus = 5
    prev  = (4,)
    next  = ()
    path  = (Location(1, prev=(), next=(2, 3)),
             Location(0, prev=(), next=()))
"""
import functools
import inspect
from collections import namedtuple

from . import fn, settings
from .exceptions import ContractViolation
from .tree import (
    Tree, all_trees, check_index, check_tree, check_trees, is_tree,
    map_children, remove_at, set_children,
)

_Location = namedtuple('Location', ['term', 'prev', 'next'])


class Location(_Location):
    __slots__ = ()


del _Location


_Context = namedtuple('Context', ['focus', 'prev', 'next', 'path'])


class Context(_Context):
    __slots__ = ()


del _Context


## Guards
def is_location(value):
    return (
        isinstance(value, Location) and
        isinstance(value.prev, tuple) and
        isinstance(value.next, tuple) and
        all_trees(value.prev) and
        all_trees(value.next)
    )


def is_context(value):
    """
    Shape check used on every guarded call. The direct elements of the
    sibling lists and the path are checked by type; their subtrees are
    only walked when deep checks are enabled.
    """
    if not (
        isinstance(value, Context) and
        is_tree(value.focus) and
        isinstance(value.prev, tuple) and
        isinstance(value.next, tuple) and
        isinstance(value.path, tuple)
    ):
        return False
    if settings.current().deep_checks:
        return (
            all_trees(value.prev) and
            all_trees(value.next) and
            all(is_location(loc) for loc in value.path)
        )
    return (
        all(isinstance(t, Tree) for t in value.prev) and
        all(isinstance(t, Tree) for t in value.next) and
        all(isinstance(loc, Location) for loc in value.path)
    )


def check_location(value, argument='location'):
    if not is_location(value):
        raise ContractViolation(argument, 'invalid')


def check_context(value, argument='ctx'):
    if not is_context(value):
        raise ContractViolation(argument, 'invalid')


_CALLABLE_ARGS = ('predicate', 'move_fn', 'map_fn', 'acc_fn')
_INT_ARGS = ('index', 'sibling_index', 'reps', 'generation', 'depth')


def guarded(f):
    """
    Validate the arguments of a public navigation function by name before
    calling it: ctx must be a Context, predicate, move_fn, map_fn and
    acc_fn must be callable and index, reps, generation and depth must be
    ints. An argument whose default is None may also be None.
    """
    sig = inspect.signature(f)

    @functools.wraps(f)
    def checked(*args, **kwargs):
        bound = sig.bind(*args, **kwargs)
        for name, value in bound.arguments.items():
            if value is None and sig.parameters[name].default is None:
                continue
            if name == 'ctx':
                check_context(value)
            elif name in _CALLABLE_ARGS:
                if not callable(value):
                    raise ContractViolation(name, 'expected a callable for')
            elif name in _INT_ARGS:
                check_index(value, name)
        return f(*args, **kwargs)
    return checked


## Construction
def new(focus, prev=(), next=(), path=()):
    """
    Build a Context around focus. prev and next are given in document
    order, path is nearest ancestor first.

    >>> from rosetree._lib.tree import Tree
    >>> ctx = new(Tree(3), prev=[Tree(1), Tree(2)])
    >>> [t.term for t in ctx.prev]
    [2, 1]
    """
    check_tree(focus, 'focus')
    check_trees(prev, 'prev')
    check_trees(next, 'next')
    if not isinstance(path, (tuple, list)):
        raise ContractViolation('path', 'expected a sequence for')
    for loc in path:
        check_location(loc, 'path')
    return Context(
        focus=focus,
        prev=tuple(reversed(tuple(prev))),
        next=tuple(next),
        path=tuple(path),
    )


def enter(tree):
    return new(tree)


def location(term, prev=(), next=()):
    """
    Build a Location, siblings in document order. A Tree given as term
    contributes only its term.
    """
    if isinstance(term, Tree):
        term = term.term
    check_trees(prev, 'prev')
    check_trees(next, 'next')
    return Location(term, tuple(reversed(tuple(prev))), tuple(next))


def from_locations(locations):
    """
    Rebuild a Context from a nearest first sequence of Locations. The first
    Location becomes a leaf focus that keeps that Location's siblings, the
    rest become its path.
    """
    locations = tuple(locations)
    if not locations:
        raise ContractViolation('locations', 'expected at least one item in')
    for loc in locations:
        check_location(loc, 'locations')
    head, path = locations[0], locations[1:]
    return Context(Tree(head.term), head.prev, head.next, path)


def location_of(ctx):
    """The Location ctx would push onto the path when moving to a child."""
    return Location(ctx.focus.term, ctx.prev, ctx.next)


def index_of_term(loc):
    return len(loc.prev)


def map_location_term(loc, map_fn):
    check_location(loc, 'loc')
    return loc._replace(term=map_fn(loc.term))


## Accessors
def is_root(ctx):
    return not ctx.path


def focused_term(ctx):
    return ctx.focus.term


def focused_children(ctx):
    return ctx.focus.children


def depth_of_focus(ctx):
    return len(ctx.path)


def index_of_focus(ctx):
    return len(ctx.prev)


def index_of_parent(ctx):
    if ctx.path:
        return index_of_term(ctx.path[0])


def index_of_grandparent(ctx):
    if len(ctx.path) > 1:
        return index_of_term(ctx.path[1])


def parent_location(ctx):
    if ctx.path:
        return ctx.path[0]


def parent_term(ctx):
    if ctx.path:
        return ctx.path[0].term


def previous_siblings(ctx):
    return tuple(reversed(ctx.prev))


def next_siblings(ctx):
    return ctx.next


## Local edits
def set_focus(ctx, tree):
    check_tree(tree, 'tree')
    return ctx._replace(focus=tree)


@guarded
def map_focus(ctx, map_fn):
    return set_focus(ctx, map_fn(ctx.focus))


def set_focused_term(ctx, term):
    return ctx._replace(focus=ctx.focus._replace(term=term))


@guarded
def map_focused_term(ctx, map_fn):
    return set_focused_term(ctx, map_fn(ctx.focus.term))


@guarded
def set_focused_children(ctx, children):
    return set_focus(ctx, set_children(ctx.focus, children))


@guarded
def map_focused_children(ctx, map_fn):
    return set_focus(ctx, map_children(ctx.focus, map_fn))


@guarded
def map_path(ctx, map_fn):
    """
    Replace each Location on the path with map_fn(location), nearest
    ancestor first. The results must be Locations.
    """
    path = tuple(map_fn(loc) for loc in ctx.path)
    for loc in path:
        check_location(loc, 'path')
    return ctx._replace(path=path)


@guarded
def map_previous_siblings(ctx, map_fn):
    """Replace each previous sibling with map_fn(sibling), in document order."""
    prev = tuple(map_fn(t) for t in previous_siblings(ctx))
    check_trees(prev, 'prev')
    return ctx._replace(prev=tuple(reversed(prev)))


@guarded
def map_next_siblings(ctx, map_fn):
    next = tuple(map_fn(t) for t in ctx.next)
    check_trees(next, 'next')
    return ctx._replace(next=next)


## Structural edits
# Siblings can be given as a Tree or as a bare term, which becomes a leaf.
def _as_tree(value):
    tree = value if isinstance(value, Tree) else Tree(value)
    check_tree(tree, 'sibling')
    return tree


@guarded
def insert_previous_sibling_at(ctx, sibling, index):
    """
    Insert sibling among the previous siblings so it ends up at index in
    document order. index follows list.insert: negative counts from the
    end and past either end means that end.
    """
    prev = list(previous_siblings(ctx))
    prev.insert(index, _as_tree(sibling))
    return ctx._replace(prev=tuple(reversed(prev)))


@guarded
def insert_next_sibling_at(ctx, sibling, index):
    """
    Insert sibling among the next siblings so it ends up at index, counted
    from the one right after the focus.
    """
    next = list(ctx.next)
    next.insert(index, _as_tree(sibling))
    return ctx._replace(next=tuple(next))


@guarded
def prepend_first_sibling(ctx, sibling):
    return insert_previous_sibling_at(ctx, sibling, 0)


@guarded
def append_previous_sibling(ctx, sibling):
    """Insert sibling right before the focus."""
    return insert_previous_sibling_at(ctx, sibling, len(ctx.prev))


@guarded
def prepend_next_sibling(ctx, sibling):
    """Insert sibling right after the focus."""
    return insert_next_sibling_at(ctx, sibling, 0)


@guarded
def append_last_sibling(ctx, sibling):
    return insert_next_sibling_at(ctx, sibling, len(ctx.next))


# Context -> Int -> (Context, Tree | None)
@guarded
def pop_previous_sibling_at(ctx, index):
    """
    Remove the previous sibling at index in document order, negative
    counting back from the focus. Returns (ctx, None) when there is none.
    """
    prev, removed = remove_at(previous_siblings(ctx), index)
    if removed is None:
        return ctx, None
    return ctx._replace(prev=tuple(reversed(prev))), removed


# Context -> Int -> (Context, Tree | None)
@guarded
def pop_next_sibling_at(ctx, index):
    next, removed = remove_at(ctx.next, index)
    if removed is None:
        return ctx, None
    return ctx._replace(next=next), removed


def pop_first_sibling(ctx):
    return pop_previous_sibling_at(ctx, 0)


def pop_previous_sibling(ctx):
    return pop_previous_sibling_at(ctx, -1)


def pop_next_sibling(ctx):
    return pop_next_sibling_at(ctx, 0)


def pop_last_sibling(ctx):
    return pop_next_sibling_at(ctx, -1)


# Context -> (Context, Tree | None)
@guarded
def remove_focus(ctx):
    """
    Remove the focused tree, returning the new context and the removed
    tree. The next sibling takes the focus, else the previous one, else
    the parent, which is left without children. A root with no siblings
    has nothing to fall back on and is returned as (ctx, None).
    """
    removed = ctx.focus
    if ctx.next:
        return ctx._replace(focus=ctx.next[0], next=ctx.next[1:]), removed
    if ctx.prev:
        return ctx._replace(focus=ctx.prev[0], prev=ctx.prev[1:]), removed
    if ctx.path:
        loc = ctx.path[0]
        return Context(Tree(loc.term), loc.prev, loc.next, ctx.path[1:]), removed
    return ctx, None


## Movement
@guarded
def parent(ctx):
    """
    Move to the parent, rebuilding it from the focus and its siblings.
    None at the root.
    """
    if not ctx.path:
        return None
    loc = ctx.path[0]
    children = previous_siblings(ctx) + (ctx.focus,) + ctx.next
    return Context(Tree(loc.term, children), loc.prev, loc.next, ctx.path[1:])


@guarded
def child_at(ctx, index):
    children = ctx.focus.children
    if not 0 <= index < len(children):
        return None
    return Context(
        focus=children[index],
        prev=tuple(reversed(children[:index])),
        next=children[index + 1:],
        path=(location_of(ctx),) + ctx.path,
    )


@guarded
def sibling_at(ctx, index):
    """
    Move to the sibling at index, counted from the first sibling in
    document order. The focus's own index is never a sibling.
    """
    siblings = previous_siblings(ctx) + (ctx.focus,) + ctx.next
    if index == len(ctx.prev) or not 0 <= index < len(siblings):
        return None
    return ctx._replace(
        focus=siblings[index],
        prev=tuple(reversed(siblings[:index])),
        next=siblings[index + 1:],
    )


@guarded
def first_child(ctx, predicate=fn.always):
    for i, child in enumerate(ctx.focus.children):
        if predicate(child):
            return child_at(ctx, i)
    return None


@guarded
def last_child(ctx, predicate=fn.always):
    children = ctx.focus.children
    for i in range(len(children) - 1, -1, -1):
        if predicate(children[i]):
            return child_at(ctx, i)
    return None


def _rewind(ctx):
    while ctx.path:
        ctx = parent(ctx)
    return ctx


## Exits
@guarded
def to_tree(ctx):
    return _rewind(ctx).focus


@guarded
def to_forest(ctx):
    """
    Rewind to the top level and return (previous roots, roots from the
    focus on), both in document order.
    """
    top = _rewind(ctx)
    return previous_siblings(top), (top.focus,) + top.next
