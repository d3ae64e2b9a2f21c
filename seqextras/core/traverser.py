"""Forest traversal strategies for seqextras.

Traversers implement the algorithms for walking a forest: an iterable of
root nodes plus a callable returning each node's children. They know
nothing about the node type, so any caller-defined structure can be
flattened.

Neither traverser tracks visited nodes. A child relation containing a
cycle makes the traversal endless; callers must not pass cyclic forests
unless they only consume a finite prefix.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, List, Tuple, Union

from ..config import TraversalMode, parse_mode


ChildrenAccessor = Callable[[Any], Iterable[Any]]

_EXHAUSTED = object()


class TreeTraverser(ABC):
    """Abstract base class for forest traversal strategies.

    A traverser is stateless: all per-walk state (stack or queue) lives
    inside the iterator returned by traverse(), so one traverser can serve
    any number of independent walks.
    """

    def __init__(self, children: ChildrenAccessor):
        """Initialize traverser with a children accessor.

        Args:
            children: Callable returning an iterable of a node's children
        """
        self.children = children

    @abstractmethod
    def traverse(self, roots: Iterable[Any]) -> Iterator[Tuple[Any, int]]:
        """Traverse the forest rooted at each element of roots.

        Args:
            roots: Root nodes, in order

        Yields:
            Tuples of (node, level) where level is 0 for roots
        """
        pass


class DepthFirstTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node, then each of its child subtrees in the order the
    accessor yields them, before moving on to the node's next sibling.
    """

    def traverse(self, roots: Iterable[Any]) -> Iterator[Tuple[Any, int]]:
        """Traverse the forest depth-first, pre-order.

        Uses an explicit stack of child iterators instead of recursion so
        deep trees do not exhaust the interpreter stack. The stack holds one
        partially consumed iterator per level of the current path.
        """
        stack: List[Tuple[Iterator[Any], int]] = [(iter(roots), 0)]

        while stack:
            siblings, level = stack[-1]
            node = next(siblings, _EXHAUSTED)
            if node is _EXHAUSTED:
                stack.pop()
                continue

            yield (node, level)

            # Children are requested only once the consumer moves past node
            stack.append((iter(self.children(node)), level + 1))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits every node of a level before any node of the next level. Within
    a level, nodes come in frontier-generation order: roots in order, then
    each parent's children in accessor order.
    """

    def traverse(self, roots: Iterable[Any]) -> Iterator[Tuple[Any, int]]:
        """Traverse the forest breadth-first.

        Uses a queue of child iterators (a queue of queues). Each emitted
        node enqueues the iterator over its children, so only pending
        iterators of the current and next frontier are ever buffered.
        """
        queue: Deque[Tuple[Iterator[Any], int]] = deque([(iter(roots), 0)])

        while queue:
            frontier, level = queue.popleft()
            for node in frontier:
                yield (node, level)
                queue.append((iter(self.children(node)), level + 1))


_TRAVERSERS = {
    TraversalMode.DEPTH_FIRST: DepthFirstTraverser,
    TraversalMode.BREADTH_FIRST: BreadthFirstTraverser,
}


def create_traverser(mode: Union[TraversalMode, str],
                     children: ChildrenAccessor) -> TreeTraverser:
    """Create a traverser instance for a traversal mode.

    Args:
        mode: TraversalMode member or string alias (dfs, bfs, ...)
        children: Callable returning a node's children

    Returns:
        TreeTraverser instance

    Raises:
        ArgumentOutOfRangeError: If mode is not recognized
    """
    return _TRAVERSERS[parse_mode(mode)](children)
