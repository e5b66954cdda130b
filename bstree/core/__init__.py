from .errors import DuplicateKey, KeyNotFound, TreeException
from .tree import LEFT, RIGHT, STOP, BinarySearchTree, BinaryTreeNode
