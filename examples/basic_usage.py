#!/usr/bin/env python3
"""
Basic seqextras example.

This example demonstrates:
- Flattening a nested menu depth-first and breadth-first
- Printing an indented outline using node levels
- Picking extremes and batching the flattened result
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from seqextras import (
    TraversalMode,
    batch,
    flatten,
    flatten_with_level,
    max_by,
    min_by,
)


MENU = [
    {"title": "File", "children": [
        {"title": "New", "children": []},
        {"title": "Open Recent", "children": [
            {"title": "report.txt", "children": []},
            {"title": "notes.md", "children": []},
        ]},
    ]},
    {"title": "Help", "children": [
        {"title": "About", "children": []},
    ]},
]


def children(item):
    return item["children"]


def main():
    """Walk the menu a few different ways."""
    print("Outline (depth-first):")
    print("-" * 50)
    outline = flatten_with_level(
        MENU, children, TraversalMode.DEPTH_FIRST,
        lambda item, level: "  " * level + item["title"],
    )
    for line in outline:
        print(line)

    titles = list(flatten(MENU, children, TraversalMode.BREADTH_FIRST, lambda item: item["title"]))
    print(f"\nBreadth-first: {', '.join(titles)}")

    print(f"Longest title: {max_by(titles, len)}")
    print(f"Shortest title: {min_by(titles, len)}")

    print("\nPages of 3:")
    for number, page in enumerate(batch(titles, 3), start=1):
        print(f"  {number}: {page}")


if __name__ == "__main__":
    main()
