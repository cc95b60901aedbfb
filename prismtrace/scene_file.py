"""Reading JSON scene descriptions and looking up dotted paths in them."""

from __future__ import annotations

import json
from typing import Any

_MISSING = object()


def load_scene(filename: str) -> Any:
    """Parse the JSON scene file ``filename``."""
    print(f"\033[1;35mLoading scene: {filename}\033[0m")
    try:
        with open(filename, encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise OSError(f"\033[1;31mCould not open file + {filename}\033[0m") from exc


def _lookup(tree: Any, path: str) -> Any:
    node = tree
    for segment in path.split("."):
        if isinstance(node, dict) and segment in node:
            node = node[segment]
        elif isinstance(node, list) and segment.isdigit() and int(segment) < len(node):
            node = node[int(segment)]
        else:
            return _MISSING
    return node


def get_path(tree: Any, path: str) -> Any:
    """The node at the dotted ``path``; raise KeyError when there is none."""
    node = _lookup(tree, path)
    if node is _MISSING:
        raise KeyError(f"No such node ({path})")
    return node


def get_optional(tree: Any, path: str) -> Any:
    """The node at the dotted ``path``, or None when there is none."""
    node = _lookup(tree, path)
    return None if node is _MISSING else node