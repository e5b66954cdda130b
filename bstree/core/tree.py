from collections import deque
from typing import Any, Callable, List, Optional, TextIO, Tuple

from wasabi import msg

from ..config import TreeConfig
from .errors import DuplicateKey, KeyNotFound

# ## Constants

# Return this from a node visit function to abort a tree visit.
STOP = "stop"
# The constant representing the left child side of a node.
LEFT = "left"
# The constant representing the right child side of a node.
RIGHT = "right"
# The traversal orders understood by `BinarySearchTree.to_list`
ORDERS = ("inorder", "preorder", "postorder", "levelorder")

VisitFunction = Callable[["BinaryTreeNode", int, Any], Optional[str]]


class BinaryTreeNode:
    """
    The binary tree node holds a single value and exclusively owns its left and
    right children. Nodes do not know their parent; code that needs it finds it
    by descending from the root.
    """

    value: Any
    left: Optional["BinaryTreeNode"]
    right: Optional["BinaryTreeNode"]

    def __init__(
        self,
        value: Any = None,
        left: "BinaryTreeNode" = None,
        right: "BinaryTreeNode" = None,
    ):
        self.value = value
        self.left = None
        self.right = None
        self.set_left(left)
        self.set_right(right)

    def clone(self) -> "BinaryTreeNode":
        """Create a clone of this tree"""
        result = self.__class__(self.value)
        pending = [(self, result)]
        while pending:
            source, target = pending.pop()
            if source.left is not None:
                target.set_left(source.left.__class__(source.left.value))
                pending.append((source.left, target.left))
            if source.right is not None:
                target.set_right(source.right.__class__(source.right.value))
                pending.append((source.right, target.right))
        return result

    def is_leaf(self) -> bool:
        """Is this node a leaf?  A node is a leaf if it has no children."""
        return self.left is None and self.right is None

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"BinaryTreeNode({self.value!r})"

    def visit_preorder(self, visit_fn: VisitFunction, depth=0, data=None):
        """Visit the tree preorder, which visits the current node, then its left
        child, and then its right child.

        *Visit -> Left -> Right*

        This method accepts a function that will be invoked for each node in the
        tree.  The callback function is passed three arguments: the node being
        visited, the current depth in the tree, and a user specified data parameter.

        !!! info

            Traversals may be canceled by returning `STOP` from any visit function.
        """
        stack = [(self, depth)]
        while stack:
            node, level = stack.pop()
            if visit_fn and visit_fn(node, level, data) == STOP:
                return STOP
            if node.right is not None:
                stack.append((node.right, level + 1))
            if node.left is not None:
                stack.append((node.left, level + 1))

    def visit_inorder(self, visit_fn: VisitFunction, depth=0, data=None):
        """Visit the tree inorder, which visits the left child, then the current node,
        and then its right child.

        *Left -> Visit -> Right*

        For a search tree this visits the values in ascending order.

        !!! info

            Traversals may be canceled by returning `STOP` from any visit function.
        """
        stack: List[Tuple[BinaryTreeNode, int]] = []
        node: Optional[BinaryTreeNode] = self
        level = depth
        while stack or node is not None:
            while node is not None:
                stack.append((node, level))
                node = node.left
                level += 1
            node, level = stack.pop()
            if visit_fn and visit_fn(node, level, data) == STOP:
                return STOP
            node = node.right
            level += 1

    def visit_postorder(self, visit_fn: VisitFunction, depth=0, data=None):
        """Visit the tree postorder, which visits its left child, then its right child,
        and finally the current node.

        *Left -> Right -> Visit*

        !!! info

            Traversals may be canceled by returning `STOP` from any visit function.
        """
        stack: List[Tuple[BinaryTreeNode, int]] = []
        node: Optional[BinaryTreeNode] = self
        level = depth
        last_visited: Optional[BinaryTreeNode] = None
        while stack or node is not None:
            if node is not None:
                stack.append((node, level))
                node = node.left
                level += 1
                continue
            top, top_level = stack[-1]
            if top.right is not None and top.right is not last_visited:
                node = top.right
                level = top_level + 1
                continue
            stack.pop()
            if visit_fn and visit_fn(top, top_level, data) == STOP:
                return STOP
            last_visited = top

    def visit_levelorder(self, visit_fn: VisitFunction, depth=0, data=None):
        """Visit the tree one level at a time, from the top down and left to right
        within each level.

        !!! info

            Traversals may be canceled by returning `STOP` from any visit function.
        """
        queue = deque([(self, depth)])
        while queue:
            node, level = queue.popleft()
            if visit_fn and visit_fn(node, level, data) == STOP:
                return STOP
            if node.left is not None:
                queue.append((node.left, level + 1))
            if node.right is not None:
                queue.append((node.right, level + 1))

    # **Child Management**
    #
    # Each child link is owned by exactly one slot, either a parent's left/right
    # or the tree's root.

    def set_left(self, child: "BinaryTreeNode" = None) -> "BinaryTreeNode":
        """Set the left node to the passed `child`"""
        if child is self:
            raise ValueError("nodes cannot be their own children")
        self.left = child
        return self

    def set_right(self, child: "BinaryTreeNode" = None) -> "BinaryTreeNode":
        """Set the right node to the passed `child`"""
        if child is self:
            raise ValueError("nodes cannot be their own children")
        self.right = child
        return self

    def get_side(self, child: "BinaryTreeNode") -> str:
        """Determine whether the given `child` is the left or right child of this
        node"""
        if child is self.left:
            return LEFT

        if child is self.right:
            return RIGHT

        raise ValueError("BinaryTreeNode.get_side: not a child of this node")

    def set_side(self, child: Optional["BinaryTreeNode"], side: str):
        """Set a new `child` on the given `side`"""
        if side == LEFT:
            return self.set_left(child)

        if side == RIGHT:
            return self.set_right(child)

        raise ValueError("BinaryTreeNode.set_side: Invalid side")

    def get_children(self) -> List["BinaryTreeNode"]:
        """Get children as an array.  If there are two children, the first object will
        always represent the left child, and the second will represent the right."""
        result = []
        if self.left is not None:
            result.append(self.left)

        if self.right is not None:
            result.append(self.right)

        return result


class BinarySearchTree:
    """An unbalanced binary search tree of unique, ordered values.

    Values only need to support `<` against each other. Nothing rebalances the
    tree, so inserting sorted input degrades it into a linked list; every walk
    uses an explicit stack so that remains safe.

    ```python
    tree = BinarySearchTree()
    for value in [5, 3, 8]:
        tree.insert(value)
    tree.inorder(sys.stdout)  # 3  5  8
    ```
    """

    root: Optional[BinaryTreeNode]
    config: TreeConfig

    def __init__(self, config: Optional[TreeConfig] = None):
        if config is None:
            config = TreeConfig()
        if not isinstance(config, TreeConfig):
            raise ValueError("config must be a TreeConfig instance")
        self.config = config
        self.root = None
        self._count = 0

    def empty(self) -> bool:
        """Return True if the tree holds no values"""
        return self.root is None

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item) -> bool:
        return self.search(item)

    def __repr__(self):
        return f"BinarySearchTree(size={self._count})"

    def search(self, item) -> bool:
        """Return True if `item` is stored in the tree."""
        node = self.root
        while node is not None:
            if item < node.value:
                node = node.left
            elif node.value < item:
                node = node.right
            else:
                return True
        return False

    def locate(
        self, item
    ) -> Tuple[bool, Optional[BinaryTreeNode], Optional[BinaryTreeNode]]:
        """Find the node holding `item` along with its parent.

        # Returns
        (Tuple[bool, BinaryTreeNode, BinaryTreeNode]): whether the item was found,
        the node holding it, and that node's parent. The parent is None when the
        item is at the root. When the item is missing the node is None and the
        parent is the last node visited.
        """
        node = self.root
        parent = None
        while node is not None:
            if item < node.value:
                parent = node
                node = node.left
            elif node.value < item:
                parent = node
                node = node.right
            else:
                return True, node, parent
        return False, None, parent

    def insert(self, item) -> "BinarySearchTree":
        """Insert `item` as a new leaf.

        Raises `DuplicateKey` if an equal value is already in the tree, in which
        case the tree is left untouched."""
        node = self.root
        parent = None
        while node is not None:
            parent = node
            if item < node.value:
                node = node.left
            elif node.value < item:
                node = node.right
            else:
                raise DuplicateKey("Item already in the tree")

        leaf = BinaryTreeNode(item)
        if parent is None:
            self.root = leaf
        elif item < parent.value:
            parent.set_left(leaf)
        else:
            parent.set_right(leaf)
        self._count += 1
        if self.config.verbose:
            msg.info(f"inserted {item}")
        return self

    def remove(self, item) -> "BinarySearchTree":
        """Remove `item` from the tree.

        A node with two children takes the value of its inorder successor, and
        the successor's node is unlinked instead. Raises `KeyNotFound` if the item
        is not in the tree."""
        found, node, parent = self.locate(item)
        if not found:
            raise KeyNotFound("Item not in the BST")
        assert node is not None

        if node.left is not None and node.right is not None:
            successor = node.right
            parent = node
            while successor.left is not None:
                parent = successor
                successor = successor.left
            node.value = successor.value
            node = successor

        # At most one child remains
        subtree = node.left if node.left is not None else node.right
        if parent is None:
            self.root = subtree
        else:
            parent.set_side(subtree, parent.get_side(node))
        node.left = node.right = None
        self._count -= 1
        if self.config.verbose:
            msg.info(f"removed {item}")
        return self

    def level(self, item) -> int:
        """Return the depth of `item` in the tree, where the root is level 0.
        Raises `KeyNotFound` if the item is not in the tree."""
        node = self.root
        depth = 0
        while node is not None:
            if item < node.value:
                node = node.left
            elif node.value < item:
                node = node.right
            else:
                return depth
            depth += 1
        raise KeyNotFound("Item not in the BST")

    def height(self) -> int:
        """The number of levels in the tree. An empty tree has height 0."""
        if self.root is None:
            return 0
        deepest = 0

        def node_visit(node, depth, data):
            nonlocal deepest
            deepest = max(deepest, depth)

        self.root.visit_preorder(node_visit)
        return deepest + 1

    def clear(self) -> "BinarySearchTree":
        """Release every node in the tree"""
        self.root = None
        self._count = 0
        return self

    def clone(self) -> "BinarySearchTree":
        """Create an independent copy with the same shape and config"""
        result = BinarySearchTree(config=self.config)
        if self.root is not None:
            result.root = self.root.clone()
        result._count = self._count
        return result

    # **Traversals**
    #
    # Each one writes every value followed by the separator, so the output
    # always ends with a separator when the tree is not empty.

    def inorder(self, out: TextIO, separator: Optional[str] = None):
        """Write the values in ascending order (*Left -> Visit -> Right*)"""
        self._write_values("inorder", out, separator)

    def preorder(self, out: TextIO, separator: Optional[str] = None):
        """Write the values preorder (*Visit -> Left -> Right*)"""
        self._write_values("preorder", out, separator)

    def postorder(self, out: TextIO, separator: Optional[str] = None):
        """Write the values postorder (*Left -> Right -> Visit*)"""
        self._write_values("postorder", out, separator)

    def levelorder(self, out: TextIO, separator: Optional[str] = None):
        """Write the values one level at a time, top to bottom"""
        self._write_values("levelorder", out, separator)

    def to_list(self, order: str = "inorder") -> List[Any]:
        """Collect the values of a full traversal into a list.

        # Arguments
        order (str): One of "inorder", "preorder", "postorder" or "levelorder"

        # Returns
        (List[Any]): The values in visit order
        """
        result: List[Any] = []

        def node_visit(node, depth, data):
            result.append(node.value)

        self._visit(order, node_visit)
        return result

    def graph(self, out: TextIO):
        """Write a sideways picture of the tree to `out`.

        The right subtree is drawn above its parent and the left subtree below,
        each level indented `config.indent_step` columns further than the one
        before it. Empty child links are drawn with `config.placeholder`, so for
        the values 5, 3 and 8 the output is:

        ```
                        _
                8
                        _
         5
                        _
                3
                        _
        ```
        """
        step = self.config.indent_step
        placeholder = self.config.placeholder
        stack: List[Tuple[Optional[BinaryTreeNode], int, bool]] = [
            (self.root, 0, False)
        ]
        while stack:
            node, indent, expanded = stack.pop()
            pad = " ".rjust(indent)
            if node is None:
                out.write(f"{pad}{placeholder}\n")
            elif expanded:
                out.write(f"{pad}{node.value}\n")
            else:
                stack.append((node.left, indent + step, False))
                stack.append((node, indent, True))
                stack.append((node.right, indent + step, False))

    def _visit(self, order: str, visit_fn: VisitFunction):
        if order not in ORDERS:
            raise ValueError(
                f"unknown traversal order '{order}', expected one of {ORDERS}"
            )
        if self.root is None:
            return
        getattr(self.root, f"visit_{order}")(visit_fn)

    def _write_values(self, order: str, out: TextIO, separator: Optional[str]):
        if separator is None:
            separator = self.config.separator

        def node_visit(node, depth, data):
            out.write(f"{node.value}{separator}")

        self._visit(order, node_visit)
