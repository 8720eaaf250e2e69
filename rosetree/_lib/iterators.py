"""
Python iteration over trees and contexts.
"""
from .traversal import descend, forward
from .zipper import enter, parent


def preorder(tree):
    """
    Yield a Context for every node of tree, depth first.

    >>> from rosetree._lib.tree import Tree
    >>> [c.focus.term for c in preorder(Tree(0, (Tree(1), Tree(2))))]
    [0, 1, 2]
    """
    ctx = enter(tree)
    while ctx is not None:
        yield ctx
        ctx = descend(ctx)


def levelorder(tree):
    """Yield a Context for every node of tree, one level at a time."""
    ctx = enter(tree)
    while ctx is not None:
        yield ctx
        ctx = forward(ctx)


def terms(tree):
    for ctx in preorder(tree):
        yield ctx.focus.term


def path_to_root(ctx):
    """Yield ctx and then each of its ancestors, ending with the root."""
    while ctx is not None:
        yield ctx
        ctx = parent(ctx)
