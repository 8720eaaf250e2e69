from rosetree import Tree, enter
from rosetree import zipper


def t(term, *children):
    """
    Tree builder for tests, bare values become leaves.

    >>> t(1, 2, t(3, 4))
    Tree(term=1, children=(Tree(term=2, children=()), Tree(term=3, children=(Tree(term=4, children=()),))))
    """
    return Tree(term, tuple(
        c if isinstance(c, Tree) else Tree(c) for c in children
    ))


def at(tree, *indices):
    """Enter tree and follow child indices down."""
    ctx = enter(tree)
    for i in indices:
        ctx = zipper.child_at(ctx, i)
    return ctx


def term(ctx):
    if ctx is not None:
        return ctx.focus.term


def terms_of(contexts):
    return [c.focus.term for c in contexts]


def row(*values, **kwargs):
    """
    A context focused on one of a row of leaf siblings under a root 'r'.
    """
    focus = kwargs.get('focus', 0)
    return at(t('r', *values), focus)
