__title__ = "bstree"
__version__ = "0.1.0"
__summary__ = "Bstree - an unbalanced binary search tree with traversal printers"
__uri__ = "https://github.com/bstree/bstree"
__author__ = "bstree contributors"
__email__ = "bstree@users.noreply.github.com"
__license__ = "MIT"
