from bintree.indexing import BinaryTree, BinaryTreeNode, Tree

__all__ = ["Tree", "BinaryTree", "BinaryTreeNode"]
