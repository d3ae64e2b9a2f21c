"""Configuration for seqextras flattening.

This module defines how callers describe a flattening request: which
traversal order to use and how each visited node is turned into a result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from .errors import ArgumentOutOfRangeError


class TraversalMode(Enum):
    """Order in which a forest is flattened."""
    DEPTH_FIRST = "depth_first"      # Parent, then each child subtree
    BREADTH_FIRST = "breadth_first"  # Level by level


_MODE_ALIASES = {
    'dfs': TraversalMode.DEPTH_FIRST,
    'depth_first': TraversalMode.DEPTH_FIRST,
    'depthfirst': TraversalMode.DEPTH_FIRST,
    'bfs': TraversalMode.BREADTH_FIRST,
    'breadth_first': TraversalMode.BREADTH_FIRST,
    'breadthfirst': TraversalMode.BREADTH_FIRST,
}


def parse_mode(mode: Union[TraversalMode, str], param_name: str = "mode") -> TraversalMode:
    """Parse a traversal mode from an enum member or a string alias.

    Args:
        mode: TraversalMode member, or one of 'dfs', 'depth_first',
            'bfs', 'breadth_first' (case-insensitive)
        param_name: Parameter name reported on failure

    Returns:
        TraversalMode member

    Raises:
        ArgumentOutOfRangeError: If mode is not a recognised value
    """
    if isinstance(mode, TraversalMode):
        return mode

    if isinstance(mode, str):
        parsed = _MODE_ALIASES.get(mode.lower())
        if parsed is not None:
            return parsed

    raise ArgumentOutOfRangeError(
        param_name, mode,
        message=(
            f"Unknown traversal mode: {mode!r}. "
            f"Choose from: {', '.join(_MODE_ALIASES.keys())}"
        ),
    )


@dataclass
class FlattenConfig:
    """Complete description of a flattening request.

    Attributes:
        mode: Traversal order
        selector: Maps each node (and its level, when include_level is
            set) to a result; None yields the node itself, or a
            (node, level) tuple when include_level is set
        include_level: Whether the selector receives the node's level
    """

    mode: TraversalMode = TraversalMode.DEPTH_FIRST
    selector: Optional[Callable[..., Any]] = None
    include_level: bool = False

    def validate(self) -> List[str]:
        """Return a list of configuration problems (empty when valid)."""
        errors = []

        if not isinstance(self.mode, TraversalMode):
            errors.append(f"mode must be a TraversalMode, got {self.mode!r}")

        if self.selector is not None and not callable(self.selector):
            errors.append("selector must be callable")

        return errors

    def project(self, node: Any, level: int) -> Any:
        """Turn a visited (node, level) pair into a result item."""
        if self.include_level:
            if self.selector is None:
                return (node, level)
            return self.selector(node, level)
        if self.selector is None:
            return node
        return self.selector(node)
