"""A string-keyed binary search tree and a path tree built on top of it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


def split_path(path: str, delim: str = "/") -> list[str]:
    """Split path on delim, skipping its first character.

    The first character is taken to be a leading delimiter. A single
    trailing delimiter does not produce an empty final component, but
    repeated delimiters inside the path do produce empty components.
    """
    if len(path) < 2:
        return []
    parts = path[1:].split(delim)
    if path.endswith(delim):
        parts.pop()
    return parts


def dir_to_list(path: str) -> list[str]:
    """Return the components of a Unix-style absolute path.

    Paths that do not begin with '/' give an empty list.
    """
    if not path.startswith("/"):
        return []
    return split_path(path, "/")


@dataclass(eq=False)
class BstNode:
    """A node of a binary search tree."""

    key: str
    data: Any = None
    left: BstNode | None = None
    right: BstNode | None = None


class BinarySearchTree:
    """An unbalanced binary search tree keyed by strings."""

    def __init__(self) -> None:
        self.root: BstNode | None = None

    def _locate(self, key: str) -> tuple[BstNode | None, BstNode | None]:
        """Return (parent, node) for key; node is None when absent."""
        parent = None
        node = self.root
        while node is not None:
            if key < node.key:
                parent, node = node, node.left
            elif key > node.key:
                parent, node = node, node.right
            else:
                break
        return parent, node

    def _attach(self, parent: BstNode | None, node: BstNode) -> None:
        if parent is None:
            self.root = node
        elif node.key < parent.key:
            parent.left = node
        else:
            parent.right = node

    def insert(self, key: str, data: Any = None) -> bool:
        """Insert key with data; return False if key is already present."""
        parent, node = self._locate(key)
        if node is not None:
            return False
        self._attach(parent, BstNode(key, data))
        return True

    def insert_get(self, key: str, data: Any = None) -> BstNode:
        """Return the node for key, inserting it with data if absent."""
        parent, node = self._locate(key)
        if node is None:
            node = BstNode(key, data)
            self._attach(parent, node)
        return node

    def find(self, key: str) -> Any:
        """Return the data stored under key, or None when absent."""
        _, node = self._locate(key)
        return None if node is None else node.data

    def delete(self, key: str) -> bool:
        """Remove key from the tree; return False if it was not present."""
        parent, node = self._locate(key)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.key = succ.key
            node.data = succ.data
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
            return True
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def _nodes(self) -> Iterator[BstNode]:
        stack: list[BstNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def in_order(self) -> Iterator[Any]:
        """Yield stored data in key order."""
        for node in self._nodes():
            yield node.data

    def keys(self) -> Iterator[str]:
        """Yield keys in sorted order."""
        for node in self._nodes():
            yield node.key

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield (key, data) pairs in key order."""
        for node in self._nodes():
            yield node.key, node.data

    def render(self) -> str:
        """Return one 'key : data' line per node, in key order."""
        return "".join(f"{key} : {data}\n" for key, data in self.items())

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._locate(key)[1] is not None

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())


@dataclass(eq=False)
class PathNode:
    """A directory (named) or a file (name None) in a PathTree."""

    name: str | None
    data: Any = None
    children: BinarySearchTree = field(default_factory=BinarySearchTree)
    file: PathNode | None = None

    def is_file(self) -> bool:
        """Return True when this node is a file."""
        return self.name is None


class PathTree:
    """A tree of named directories; a directory may hold a single file."""

    def __init__(self) -> None:
        self.root = BinarySearchTree()

    @staticmethod
    def _names(path: str | Iterable[str]) -> list[str]:
        if isinstance(path, str):
            return dir_to_list(path)
        return list(path)

    def make_path(self, path: str | Iterable[str]) -> PathNode | None:
        """Create every directory along path and return the last one.

        Returns None for an empty path. Raises NotADirectoryError when the
        path runs through a directory that holds a file.
        """
        tree = self.root
        node: PathNode | None = None
        for name in self._names(path):
            if node is not None and node.file is not None:
                raise NotADirectoryError(f"{node.name!r} holds a file")
            existing = tree.find(name)
            if existing is None:
                existing = PathNode(name)
                tree.insert(name, existing)
            node = existing
            tree = node.children
        return node

    def find(self, path: str | Iterable[str]) -> PathNode | None:
        """Return the node at path, or None when it does not exist.

        If a directory along the path holds a file, that file is returned.
        """
        tree = self.root
        node: PathNode | None = None
        for name in self._names(path):
            node = tree.find(name)
            if node is None:
                return None
            if node.file is not None:
                return node.file
            tree = node.children
        return node

    def insert(self, path: str | Iterable[str], data: Any) -> PathNode:
        """Store data as the file held by the directory at path.

        The directory's previous contents are replaced. Returns the file node.
        """
        node = self.find(path)
        if node is not None and node.is_file():
            node.data = data
            return node
        if node is None:
            node = self.make_path(path)
        if node is None:
            raise ValueError("cannot insert at an empty path")
        node.children = BinarySearchTree()
        node.file = PathNode(None, data)
        return node.file

    def render(self) -> str:
        """Return the directory names, indented two spaces per level."""
        lines: list[str] = []

        def walk(bst_node: BstNode | None, depth: int) -> None:
            if bst_node is None:
                return
            walk(bst_node.left, depth)
            walk(bst_node.right, depth)
            entry: PathNode = bst_node.data
            lines.append("  " * depth + bst_node.key + "\n")
            walk(entry.children.root, depth + 1)

        walk(self.root.root, 0)
        return "".join(lines)

    def clear(self) -> None:
        """Remove every directory and file."""
        self.root = BinarySearchTree()