"""Binary tree nodes and algorithms that work on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from algopad.maths import INT32_MAX


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree of integers."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level, top to bottom."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """Average value of the nodes on each level."""
    return [sum(node.val for node in level) / len(level) for level in _levels(root)]


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    return [node.val for node in _inorder_nodes(root)]


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    return [node.val for node in _preorder_nodes(root)]


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted values."""

    def build(left: int, right: int) -> Optional[TreeNode]:
        if left > right:
            return None
        mid = left + (right - left) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)


def count_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _preorder_nodes(root))


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Delete ``key`` from a search tree and return the new root."""
    if root is None:
        return None
    if key < root.val:
        root.left = delete_node(root.left, key)
    elif key > root.val:
        root.right = delete_node(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete_node(root.right, successor.val)
    return root


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    for node in _preorder_nodes(root):
        node.left, node.right = node.right, node.left
    return root


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def get_minimum_difference(root: Optional[TreeNode]) -> int:
    """Smallest absolute difference between values of a search tree.

    A tree with fewer than two nodes gives the largest 32-bit integer.
    """
    result = INT32_MAX
    previous: Optional[int] = None
    for node in _inorder_nodes(root):
        if previous is not None:
            result = min(result, abs(node.val - previous))
        previous = node.val
    return result


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    stack = [(root, root.val)] if root is not None else []
    while stack:
        node, total = stack.pop()
        if total == target_sum and node.is_leaf:
            return True
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, total + child.val))
    return False


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    stack = [(p, q)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.left, b.left))
        stack.append((a.right, b.right))
    return True


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node of a search tree holding ``val``, or None."""
    while root is not None:
        if val == root.val:
            return root
        root = root.right if val > root.val else root.left
    return None


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror of itself."""
    if root is None:
        return True
    stack = [(root.left, root.right)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.left, b.right))
        stack.append((a.right, b.left))
    return True


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    balanced = True

    def height(node: Optional[TreeNode]) -> int:
        nonlocal balanced
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        if abs(left - right) > 1:
            balanced = False
        return max(left, right) + 1

    height(root)
    return balanced


def _leaves(root: Optional[TreeNode]) -> list[int]:
    return [node.val for node in _preorder_nodes(root) if node.is_leaf]


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Tell whether both trees have the same leaf values from left to right."""
    return _leaves(root1) == _leaves(root2)


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    left = min_depth(root.left)
    right = min_depth(root.right)
    if not left or not right:
        return max(left, right) + 1
    return min(left, right) + 1