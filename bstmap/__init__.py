from .tree import BinaryTreeMap, Direction, KeyNotFound, Node

__all__ = [
    "BinaryTreeMap",
    "Direction",
    "KeyNotFound",
    "Node",
]
