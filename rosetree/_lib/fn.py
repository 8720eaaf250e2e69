# Small functional helpers shared by the navigation modules. Arguments
# come data last, so a partially applied call reads as a predicate or
# a move.

import functools
import inspect


def curry(f):
    """
    Allow f to be called with fewer arguments than it takes, returning a
    function waiting for the rest.

    >>> add = curry(lambda x, y, z: x + y + z)
    >>> add(1)(2)(3)
    6
    """

    argc = len(inspect.signature(f).parameters)

    @functools.wraps(f)
    def curried(*args):
        if len(args) >= argc:
            return f(*args)
        return curry(functools.partial(f, *args))
    return curried


def always(_):
    return True


# [(a -> b | None)] -> a -> b | None
@curry
def first_of(fns, value):
    """
    Call each function with value, in order, and return the first result
    that is not None. Later functions are never called once one succeeds.

    >>> first_of([lambda v: None, lambda v: v * 2, lambda v: 1 / 0], 4)
    8
    """
    for f in fns:
        result = f(value)
        if result is not None:
            return result
    return None


# (a -> Bool) -> [a] -> a | None
def find_first(predicate, items):
    for item in items:
        if predicate(item):
            return item
    return None


# a -> Tree -> Bool
@curry
def term_is(value, tree):
    """
    >>> from rosetree._lib.tree import new
    >>> term_is(5)(new(5))
    True
    """
    return tree.term == value
