"""Execution planning for seqextras flattening.

The FlattenPlan validates a FlattenConfig up front and then acts as a
lazy, restartable iterable over the flattened forest.
"""

import logging
from typing import Any, Iterable, Iterator, Tuple

from .config import FlattenConfig
from .core.traverser import ChildrenAccessor, TreeTraverser, create_traverser
from .errors import ArgumentError

logger = logging.getLogger(__name__)


class FlattenPlan:
    """Validated execution plan for flattening a forest.

    The plan is the bridge between the caller's request (roots, children
    accessor, FlattenConfig) and the traversal. All validation happens in
    the constructor, before any root is pulled. Iterating the plan starts
    a brand new walk each time; no cursor state is shared between walks.

    Example:
        >>> plan = FlattenPlan(roots, lambda n: n.children, FlattenConfig())
        >>> first = list(plan)
        >>> again = list(plan)   # walks the forest again
    """

    def __init__(self, roots: Iterable[Any], children: ChildrenAccessor, config: FlattenConfig):
        """Create and validate a flatten plan.

        Args:
            roots: Root nodes of the forest
            children: Callable returning a node's children
            config: Traversal mode and result projection

        Raises:
            ArgumentError: If the configuration is invalid
        """
        config_errors = config.validate()
        if config_errors:
            raise ArgumentError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.roots = roots
        self.children = children
        self.config = config
        self.traverser = self._select_traverser()

        logger.debug(
            "Built flatten plan: mode=%s include_level=%s",
            config.mode.value, config.include_level,
        )

    def _select_traverser(self) -> TreeTraverser:
        return create_traverser(self.config.mode, self.children)

    def traverse(self) -> Iterator[Tuple[Any, int]]:
        """Walk the forest, yielding raw (node, level) pairs."""
        logger.debug("Starting %s traversal", self.config.mode.value)
        return self.traverser.traverse(self.roots)

    def __iter__(self) -> Iterator[Any]:
        project = self.config.project
        for node, level in self.traverse():
            yield project(node, level)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(mode={self.config.mode.value!r}, "
            f"include_level={self.config.include_level})"
        )
