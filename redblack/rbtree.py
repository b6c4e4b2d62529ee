"""A red-black tree of ordered keys that allows duplicate keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Any, Iterator, Optional


class Color(Enum):
    """Colour of a tree node."""

    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class Node:
    """A tree node; its links point at the tree's ``nil`` sentinel when absent."""

    key: Any
    color: Color = Color.RED
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)


class RBTree:
    """Balanced binary search tree; equal keys are kept as separate nodes."""

    def __init__(self) -> None:
        self.nil = Node(key=None, color=Color.BLACK)
        self.nil.parent = self.nil.left = self.nil.right = self.nil
        self.root: Node = self.nil
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        stack: list[Node] = []
        cur = self.root
        while stack or cur is not self.nil:
            while cur is not self.nil:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.key
            cur = cur.right

    # rotations -------------------------------------------------------

    def _left_rotate(self, x: Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self.nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, x: Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self.nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.right = x
        x.parent = y

    # insertion -------------------------------------------------------

    def insert(self, key: Any) -> Node:
        """Add ``key`` and return the node that holds it."""
        node = Node(key, Color.RED, self.nil, self.nil, self.nil)
        parent = self.nil
        cur = self.root
        while cur is not self.nil:
            parent = cur
            cur = cur.right if key >= cur.key else cur.left
        node.parent = parent
        if parent is self.nil:
            self.root = node
        elif key >= parent.key:
            parent.right = node
        else:
            parent.left = node
        self._insert_fixup(node)
        self._size += 1
        return node

    def _insert_fixup(self, z: Node) -> None:
        while z.parent.color is Color.RED:
            gp = z.parent.parent
            if z.parent is gp.left:
                uncle = gp.right
                if uncle.color is Color.RED:
                    z.parent.color = uncle.color = Color.BLACK
                    gp.color = Color.RED
                    z = gp
                    continue
                if z is z.parent.right:
                    z = z.parent
                    self._left_rotate(z)
                z.parent.color = Color.BLACK
                gp.color = Color.RED
                self._right_rotate(gp)
            else:
                uncle = gp.left
                if uncle.color is Color.RED:
                    z.parent.color = uncle.color = Color.BLACK
                    gp.color = Color.RED
                    z = gp
                    continue
                if z is z.parent.left:
                    z = z.parent
                    self._right_rotate(z)
                z.parent.color = Color.BLACK
                gp.color = Color.RED
                self._left_rotate(gp)
        self.root.color = Color.BLACK

    # lookup ----------------------------------------------------------

    def find(self, key: Any) -> Optional[Node]:
        """Return a node holding ``key``, or None if there is none."""
        cur = self.root
        while cur is not self.nil:
            if cur.key == key:
                return cur
            cur = cur.right if cur.key < key else cur.left
        return None

    def _leftmost(self, node: Node) -> Node:
        while node.left is not self.nil:
            node = node.left
        return node

    def _rightmost(self, node: Node) -> Node:
        while node.right is not self.nil:
            node = node.right
        return node

    def min(self) -> Optional[Node]:
        """Return the node with the smallest key, or None when empty."""
        if self.root is self.nil:
            return None
        return self._leftmost(self.root)

    def max(self) -> Optional[Node]:
        """Return the node with the largest key, or None when empty."""
        if self.root is self.nil:
            return None
        return self._rightmost(self.root)

    # removal ---------------------------------------------------------

    def _transplant(self, u: Node, v: Node) -> None:
        if u.parent is self.nil:
            self.root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def erase(self, node: Node) -> None:
        """Remove ``node`` from the tree."""
        if node is None or node is self.nil or node.parent is None:
            raise ValueError("node is not in the tree")
        removed_color = node.color
        if node.left is self.nil:
            x = node.right
            self._transplant(node, node.right)
        elif node.right is self.nil:
            x = node.left
            self._transplant(node, node.left)
        else:
            y = self._leftmost(node.right)
            removed_color = y.color
            x = y.right
            if y.parent is node:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = node.right
                y.right.parent = y
            self._transplant(node, y)
            y.left = node.left
            y.left.parent = y
            y.color = node.color
        if removed_color is Color.BLACK:
            self._erase_fixup(x)
        self.nil.parent = self.nil.left = self.nil.right = self.nil
        self.nil.color = Color.BLACK
        node.parent = node.left = node.right = None
        self._size -= 1

    def _erase_fixup(self, x: Node) -> None:
        while x is not self.root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._left_rotate(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                    continue
                if w.right.color is Color.BLACK:
                    w.left.color = Color.BLACK
                    w.color = Color.RED
                    self._right_rotate(w)
                    w = x.parent.right
                w.color = x.parent.color
                x.parent.color = Color.BLACK
                w.right.color = Color.BLACK
                self._left_rotate(x.parent)
                x = self.root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._right_rotate(x.parent)
                    w = x.parent.left
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                    continue
                if w.left.color is Color.BLACK:
                    w.right.color = Color.BLACK
                    w.color = Color.RED
                    self._left_rotate(w)
                    w = x.parent.left
                w.color = x.parent.color
                x.parent.color = Color.BLACK
                w.left.color = Color.BLACK
                self._right_rotate(x.parent)
                x = self.root
        x.color = Color.BLACK

    # export ----------------------------------------------------------

    def to_list(self, n: int) -> list:
        """Return at most the first ``n`` keys in ascending order."""
        if n < 0:
            raise ValueError("n must not be negative")
        return list(islice(self, n))