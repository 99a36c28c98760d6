from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple


class Tree(ABC):
    """Abstract base class representing a key-ordered map."""

    @abstractmethod
    def get(self, key: Any) -> Optional[Any]:
        """Return the value associated with key, or None."""
        pass

    @abstractmethod
    def put(self, key: Any, value: Any) -> None:
        """Insert (key, value), replacing the value if key is already present."""
        pass

    @abstractmethod
    def remove(self, key: Any) -> Optional[Any]:
        """Remove the entry with key and return its value, or None."""
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the map holds no entries."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""
        pass


class BinaryTreeNode:
    """A tree vertex owning its left and right subtrees."""
    __slots__ = 'key', 'value', 'left', 'right'

    def __init__(self, key, value, left=None, right=None):
        self.key = key
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self):
        return f"BinaryTreeNode({self.key!r}, {self.value!r}, left={self.left!r}, right={self.right!r})"

    def count(self) -> int:
        """Return the number of nodes in the subtree rooted here."""
        total = 1
        if self.left is not None:
            total += self.left.count()
        if self.right is not None:
            total += self.right.count()
        return total

    # ------------------ Removal ------------------
    def remove_descendant(self, key: Any) -> Optional[Any]:
        """
        Remove the child (or deeper descendant) holding key and return its value.

        The node this is called on is never removed. Note the right-hand
        descent tests ``key < self.key`` just like the left-hand one, so a
        key greater than this node's key is only matched against the
        immediate right child and never searched for below it.
        """
        if self.left is not None and self.left.key == key:
            return self.remove_left()

        if self.left is not None and key < self.key:
            return self.left.remove_descendant(key)

        if self.right is not None and self.right.key == key:
            return self.remove_right()

        if self.right is not None and key < self.key:
            return self.right.remove_descendant(key)

        return None

    def remove_left(self) -> Any:
        removed_left = self._take_left()
        self.left = removed_left.take_subtree()
        return removed_left.value

    def remove_right(self) -> Any:
        removed_right = self._take_right()
        self.right = removed_right.take_subtree()
        return removed_right.value

    def take_subtree(self) -> Optional["BinaryTreeNode"]:
        """Detach and return whatever should replace this node once it is deleted."""
        if self.left is None and self.right is None:
            return None
        if self.right is None:
            return self._take_left()
        if self.left is None:
            return self._take_right()
        return self.take_right_min_subtree()

    def _take_left(self) -> Optional["BinaryTreeNode"]:
        left, self.left = self.left, None
        return left

    def _take_right(self) -> Optional["BinaryTreeNode"]:
        right, self.right = self.right, None
        return right

    def take_right_min_subtree(self) -> "BinaryTreeNode":
        """
        Promote the in-order successor into a new node carrying both subtrees.

        The successor's old node is dropped with ``remove_descendant``, which
        only reaches it when it is the immediate right child. A deeper
        successor stays behind as the minimum of the right subtree, and
        removing the promoted key later promotes that leftover copy again.
        """
        min_key, min_value = self.right.min_key_value()
        new_node = BinaryTreeNode(min_key, min_value, self._take_left(), self._take_right())
        # the successor's old node is still in the right subtree
        new_node.remove_descendant(min_key)
        return new_node

    def min_key_value(self) -> Tuple[Any, Any]:
        """Return (key, value) of the smallest key in this subtree."""
        if self.left is None:
            return self.key, self.value
        return self.left.min_key_value()

    # ------------------ Lookup / insertion ------------------
    def find(self, key: Any) -> Optional[Any]:
        if key == self.key:
            return self.value
        elif key < self.key:
            if self.left is None:
                return None
            return self.left.find(key)
        else:
            if self.right is None:
                return None
            return self.right.find(key)

    def append(self, node: "BinaryTreeNode") -> None:
        """Merge node into this subtree; an equal key overwrites the value in place."""
        if node.key < self.key:
            self._insert_left(node)
        elif node.key == self.key:
            self.value = node.value
        else:
            self._insert_right(node)

    def _insert_left(self, node: "BinaryTreeNode") -> None:
        if self.left is None:
            self.left = node
        else:
            self.left.append(node)

    def _insert_right(self, node: "BinaryTreeNode") -> None:
        if self.right is None:
            self.right = node
        else:
            self.right.append(node)


class BinaryTree(Tree):
    """Map implementation using an unbalanced binary search tree."""

    def __init__(self):
        self._root: Optional[BinaryTreeNode] = None

    def __len__(self) -> int:
        """Return the number of nodes currently in the tree."""
        if self._root is None:
            return 0
        return self._root.count()

    def __repr__(self):
        return f"BinaryTree(root={self._root!r})"

    def get(self, key: Any) -> Optional[Any]:
        """Return the value associated with key, or None."""
        if self._root is None:
            return None
        return self._root.find(key)

    def put(self, key: Any, value: Any) -> None:
        """Insert or replace entry (key, value)."""
        if self._root is None:
            self._root = BinaryTreeNode(key, value)
        else:
            self._root.append(BinaryTreeNode(key, value))

    def remove(self, key: Any) -> Optional[Any]:
        """
        Remove entry with key and return its value, or None.

        A returned value does not always mean the key is gone. If the key
        was promoted by an earlier removal and its old node was left deeper
        in the right subtree, that old copy is promoted back and ``get``
        still finds the key.
        """
        if self._root is None:
            return None

        if self._root.key != key:
            return self._root.remove_descendant(key)

        removed_value = self._root.value
        self._root = self._root.take_subtree()
        return removed_value

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
