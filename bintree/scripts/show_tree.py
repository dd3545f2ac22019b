from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Any, Callable, List, Sequence

from bintree.tree import BinaryTree
from bintree.viewers import PdfTreeDocument
from bintree.visualization import render_tree


def parse_elements(tokens: Sequence[str]) -> List[Any]:
    """Return the flat array form (index 0 unused) for command-line tokens.

    Tokens become integers when every one of them parses as an integer and
    stay strings otherwise.
    """

    try:
        values: List[Any] = [int(token) for token in tokens]
    except ValueError:
        values = list(tokens)
    return [None, *values]


def build_tree(tokens: Sequence[str], count: int | None) -> BinaryTree[Any]:
    if tokens and count is not None:
        raise ValueError("Give either explicit elements or --count, not both.")
    if count is not None:
        if count < 0:
            raise ValueError(f"--count must be non-negative, got {count}")
        return BinaryTree([None, *range(1, count + 1)])
    return BinaryTree(parse_elements(tokens))


def summarize_tree(
    tree: BinaryTree[Any],
    print_fn: Callable[[str], None] = print,
) -> None:
    print_fn(f"  Height:     {tree.height()}")
    print_fn(f"  Nodes:      {tree.node_count()}")
    print_fn(f"  Leaves:     {tree.leaf_count()}")
    print_fn(f"  Balance:    {tree.balance_factor()}")
    for name in ("preorder", "inorder", "postorder"):
        visited: List[str] = []
        getattr(tree, name)(lambda element: visited.append(str(element)))
        print_fn(f"  {name.capitalize() + ':':<11} {' '.join(visited)}")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a complete binary tree and draw it."
    )
    parser.add_argument(
        "elements",
        nargs="*",
        help="Elements in complete-tree order (root first, then level by level).",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Build the complete tree holding 1..COUNT instead of explicit elements.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional PDF file path to save the rendering.",
    )
    parser.add_argument(
        "--no-display",
        action="store_true",
        help="Only print the summary; do not open the interactive viewer.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        tree = build_tree(args.elements, args.count)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    n = tree.node_count()
    annotation = f"Complete tree having {n} nodes"

    print(f"{annotation}:")
    summarize_tree(tree)
    print("")

    if args.output:
        with PdfTreeDocument(args.output) as document:
            render_tree(tree, document, annotation)
        print(f"Saved rendering to {args.output}")
    elif not args.no_display:
        from bintree.viewers.tk import TkTreeViewer

        viewer = TkTreeViewer(tree, title="Binary tree", annotation=annotation)
        viewer.run()


if __name__ == "__main__":
    main()
