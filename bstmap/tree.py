import enum
import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class KeyNotFound(KeyError):
    """Raised when a lookup or deletion targets a key that is not bound"""

    def __init__(self, key):
        super().__init__(key)
        self.key = key


class Node:

    def __init__(self, key, value):
        self.key = key
        self.value = value
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def get_child(self, direction: Direction):
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node


class BinaryTreeMap:

    def __init__(self):
        self.root: Optional[Node] = None
        self._size = 0

    def is_empty(self):
        return not self.root

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self.size()

    def __contains__(self, key) -> bool:
        _, _, node = self._search(key)
        return node is not None

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __delitem__(self, key):
        self.delete(key)

    def insert(self, key, value):
        parent, direction, node = self._search(key)

        # the key is already bound, overwrite in place
        if node is not None:
            node.value = value
            return

        leaf = Node(key, value)
        self._link(parent, direction, leaf)
        self._size += 1

    def get(self, key):
        """Returns the value bound to key.

        The value object itself is returned, not a copy; the binding it came
        from is only guaranteed until the next insert or delete.
        """
        _, _, node = self._search(key)
        if node is None:
            raise KeyNotFound(key)
        return node.value

    def delete(self, key):
        """Remove the binding for key and return its value"""
        parent, direction, node = self._search(key)
        # nothing has been touched yet, so a miss leaves the tree as it was
        if node is None:
            raise KeyNotFound(key)

        # node has 2 children, promote the next largest key, the leftmost
        # node of the right subtree, into a fresh node at this slot
        if node.left is not None and node.right is not None:
            successor, right = self._extract_smallest(node.right)

            clone = Node(successor.key, successor.value)
            clone.left = node.left
            clone.right = right
            successor.right = None
            logger.debug("promoting successor %r in place of %r", successor.key, key)
            replacement = clone
        else:
            # 1 or 0 children, the child (if any) takes the node's slot
            replacement = node.left if node.left is not None else node.right

        self._link(parent, direction, replacement)
        self._size -= 1

        node.left = None
        node.right = None
        return node.value

    def smallest(self, node: Node = None) -> Node:
        """Returns the leftmost node in the subtree, the whole tree by default.

        This is a read-only query; delete detaches its successor with
        _extract_smallest, which also tracks the parent link to splice.
        """
        node = self.root if node is None else node
        if node is None:
            raise KeyNotFound(None)
        while node.left is not None:
            node = node.left
        return node

    def clear(self):
        self.root = None
        self._size = 0

    def height(self, node: Node) -> int:
        # unbalanced trees can be as deep as they are long, so walk with an
        # explicit stack rather than the interpreter's
        height = -1
        stack = [(node, 0)]
        while stack:
            node, depth = stack.pop()
            if node is None:
                continue
            height = max(height, depth)
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        return height

    def pprint(self, node: Node, depth=0, direction=Direction.ROOT):
        lines = []
        stack = [(node, depth, direction)]
        while stack:
            node, depth, direction = stack.pop()
            if node is None:
                lines.append("\t" * depth + "|_ null\n")
                continue
            lines.append("\t" * depth + f"|_ {direction.name} | {node.key}: {node.value!r}\n")
            # right first so the left subtree is drawn above it
            stack.append((node.right, depth + 1, Direction.RIGHT))
            stack.append((node.left, depth + 1, Direction.LEFT))
        return "".join(lines)

    def _search(self, key) -> Tuple[Optional[Node], Direction, Optional[Node]]:
        """Walk down from the root towards key.

        Returns the last node visited before the key's slot, the side of that
        node the slot is on, and the node bound to key (None on a miss).
        """
        parent = None
        direction = Direction.ROOT
        node = self.root
        while node is not None:
            if key == node.key:
                break
            parent = node
            direction = Direction.LEFT if key < node.key else Direction.RIGHT
            node = node.get_child(direction)
        return parent, direction, node

    def _link(self, parent: Optional[Node], direction: Direction, node: Optional[Node]):
        if parent is None:
            if self.root is not None:
                logger.debug("replacing root %r", self.root.key)
            self.root = node
        else:
            parent.set_child(direction, node)

    def _extract_smallest(self, sub: Node) -> Tuple[Node, Optional[Node]]:
        """Detach the leftmost node of sub.

        Returns the detached node and what remains of sub. The detached node
        never has a left child, so its right subtree takes its place.
        """
        if sub.left is None:
            return sub, sub.right

        parent = sub
        successor = sub.left
        while successor.left is not None:
            parent = successor
            successor = successor.left
        parent.left = successor.right
        return successor, sub
