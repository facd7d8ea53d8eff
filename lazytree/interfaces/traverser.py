"""
Traverser capability passed to tree traversals.
"""

from typing import Any, Protocol


class Traverser(Protocol):
    """
    Anything callable with a single datum.

    Plain functions, lambdas, bound methods and ``list.append`` all qualify.
    The tree invokes it once per visited datum and never keeps a reference.
    Mutating the tree from inside a traverser is not supported.
    """

    def __call__(self, datum: Any, /) -> Any: ...
