from .about import __version__
from .config import TreeConfig
from .core import (
    LEFT,
    RIGHT,
    STOP,
    BinarySearchTree,
    BinaryTreeNode,
    DuplicateKey,
    KeyNotFound,
    TreeException,
)
