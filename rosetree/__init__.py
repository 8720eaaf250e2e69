import logging

from ._lib import (
    exceptions, fn, iterators, kin, settings, traversal, tree, zipper,
)
from ._lib.exceptions import ContractViolation, RoseTreeError
from ._lib.iterators import levelorder, path_to_root, preorder, terms
from ._lib.kin import FIRST, LAST, NEXT, PREVIOUS
from ._lib.traversal import (
    ascend, backward, descend, forward, move_for, move_if, move_until,
    move_while, to_root,
)
from ._lib.tree import Tree, unfold
from ._lib.zipper import (
    Context, Location, enter, from_locations, location, to_forest, to_tree,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'exceptions', 'fn', 'iterators', 'kin', 'settings', 'traversal', 'tree',
    'zipper',
    'ContractViolation', 'RoseTreeError',
    'levelorder', 'path_to_root', 'preorder', 'terms',
    'FIRST', 'LAST', 'NEXT', 'PREVIOUS',
    'ascend', 'backward', 'descend', 'forward', 'move_for', 'move_if',
    'move_until', 'move_while', 'to_root',
    'Tree', 'unfold',
    'Context', 'Location', 'enter', 'from_locations', 'location',
    'to_forest', 'to_tree',
]
