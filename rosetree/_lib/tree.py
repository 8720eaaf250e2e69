"""
The plain, immutable rose tree: a term and an ordered tuple of child trees.

Every function here returns a new Tree, nothing is ever changed in place.
Navigating and editing a tree from the inside is the job of the zipper
(see rosetree._lib.zipper).
"""
import logging
from collections import namedtuple

from . import settings
from .exceptions import ContractViolation
from .fn import curry

logger = logging.getLogger(__name__)

_Tree = namedtuple('Tree', ['term', 'children'])


class Tree(_Tree):
    __slots__ = ()

    def __new__(cls, term, children=()):
        return super(Tree, cls).__new__(cls, term, children)


del _Tree


def new(term, children=()):
    """
    Build a Tree, checking that every child is itself a Tree.

    >>> new(1, [new(2), new(3)])
    Tree(term=1, children=(Tree(term=2, children=()), Tree(term=3, children=())))
    """
    children = tuple(children)
    check_trees(children, 'children')
    return Tree(term, children)


## Guards
def is_tree(value):
    if settings.current().deep_checks:
        return _is_tree_deep(value)
    return isinstance(value, Tree) and isinstance(value.children, tuple)


def _is_tree_deep(value):
    todo = [value]
    while todo:
        node = todo.pop()
        if not isinstance(node, Tree) or not isinstance(node.children, tuple):
            return False
        todo.extend(node.children)
    return True


def all_trees(values):
    """True if every value is a Tree. True for an empty sequence."""
    return all(is_tree(v) for v in values)


def check_tree(value, argument='tree'):
    if not is_tree(value):
        raise ContractViolation(argument, 'invalid')


def check_trees(values, argument):
    if not isinstance(values, (tuple, list)):
        raise ContractViolation(argument, 'expected a sequence for')
    if not all_trees(values):
        raise ContractViolation(argument, 'invalid element in')


def check_index(value, argument='index'):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ContractViolation(argument, 'expected an int for')


def is_leaf(tree):
    return not tree.children


def is_parent(tree):
    return bool(tree.children)


# (Tree -> Bool) -> Tree -> Bool
@curry
def has_child(predicate, tree):
    """
    Whether any direct child satisfies predicate. Curried, so
    has_child(predicate) is itself a Tree predicate.
    """
    return any(predicate(c) for c in tree.children)


def size(tree):
    """Total number of nodes in the tree, the root included."""
    count = 0
    todo = [tree]
    while todo:
        node = todo.pop()
        count += 1
        todo.extend(node.children)
    return count


def depth(tree):
    """Length of the longest path from the root down to a leaf."""
    deepest = 0
    todo = [(tree, 0)]
    while todo:
        node, level = todo.pop()
        deepest = max(deepest, level)
        todo.extend((c, level + 1) for c in node.children)
    return deepest


## Editing
def set_term(tree, term):
    return tree._replace(term=term)


def map_term(tree, map_fn):
    return tree._replace(term=map_fn(tree.term))


def set_children(tree, children):
    children = tuple(children)
    check_trees(children, 'children')
    return tree._replace(children=children)


def map_children(tree, map_fn):
    """
    Replace each child with map_fn(child). The results must be Trees.
    """
    return set_children(tree, [map_fn(c) for c in tree.children])


def prepend_child(tree, child):
    check_tree(child, 'child')
    return tree._replace(children=(child,) + tree.children)


def append_child(tree, child):
    check_tree(child, 'child')
    return tree._replace(children=tree.children + (child,))


def insert_child(tree, child, index):
    """
    Insert child so it ends up at index. Like list.insert, a negative
    index counts from the end and an index past either end puts the
    child at that end.
    """
    check_tree(child, 'child')
    check_index(index)
    children = list(tree.children)
    children.insert(index, child)
    return tree._replace(children=tuple(children))


# Tree -> Int -> (Tree, Tree | None)
def remove_child(tree, index):
    """
    Remove the child at index, returning the new tree and the removed
    child. A negative index counts from the end. Returns (tree, None)
    when there is no child at index.
    """
    check_index(index)
    children, removed = remove_at(tree.children, index)
    if removed is None:
        return tree, None
    return tree._replace(children=children), removed


# [a] -> Int -> ([a], a | None)
def remove_at(items, index):
    """
    Remove the item at index from a tuple, a negative index counting from
    the end. Returns (items, None) when there is no item at index.

    >>> remove_at((1, 2, 3), -1)
    ((1, 2), 3)
    """
    if not -len(items) <= index < len(items):
        return items, None
    if index < 0:
        index += len(items)
    return items[:index] + items[index + 1:], items[index]


def pop_first_child(tree):
    return remove_child(tree, 0)


def pop_last_child(tree):
    return remove_child(tree, -1)


## Construction
# a -> (a -> (b, [a])) -> Tree
def unfold(seed, unfold_fn):
    """
    Grow a tree from a seed. unfold_fn(seed) returns the term for the node
    and the seeds of its children, in order. A node whose seeds are empty
    becomes a leaf.

    There is no cycle or termination detection, if unfold_fn keeps
    producing seeds this never returns.

    >>> t = unfold(2, lambda x: (x, range(x)))
    >>> [c.term for c in t.children]
    [0, 1]
    """
    if not callable(unfold_fn):
        raise ContractViolation('unfold_fn', 'expected a callable for')

    term, seeds = unfold_fn(seed)
    # each frame is [term, remaining seeds, finished children]
    stack = [(term, iter(seeds), [])]
    count = 0
    while True:
        term, todo, done = stack[-1]
        for next_seed in todo:
            child_term, child_seeds = unfold_fn(next_seed)
            stack.append((child_term, iter(child_seeds), []))
            break
        else:
            stack.pop()
            count += 1
            node = Tree(term, tuple(done))
            if not stack:
                logger.debug('unfolded %d nodes', count)
                return node
            stack[-1][2].append(node)
