"""Binary and n-ary trees: comparison, traversals and path queries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from algonotes.linked_lists import ListNode, to_values


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass(eq=False)
class NaryNode:
    """A node of a tree with any number of children; None children are ignored."""

    val: int
    children: list[Optional["NaryNode"]] = field(default_factory=list)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return whether two binary trees have the same shape and values."""
    if p is None:
        return q is None
    if q is None:
        return False
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of a binary tree level by level."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.val for node in level])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def sorted_list_to_bst(head: Optional[ListNode]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from a sorted linked list."""
    values = to_values(head)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low >= high:
            return None
        mid = (low + high) // 2
        return TreeNode(values[mid], build(low, mid), build(mid + 1, high))

    return build(0, len(values))


def max_path_sum(root: TreeNode) -> int:
    """Return the largest sum along any path between two nodes."""
    if root is None:
        raise ValueError("max_path_sum needs a non-empty tree")

    def best(node: TreeNode) -> tuple[int, int]:
        # (best path anywhere in subtree, best path ending at node)
        ending_here = best_path = node.val
        through_here = node.val
        if node.left is not None:
            left_best, left_end = best(node.left)
            if left_end > 0:
                through_here = ending_here = left_end + node.val
            best_path = max(best_path, left_best)
        if node.right is not None:
            right_best, right_end = best(node.right)
            if right_end > 0:
                ending_here = max(ending_here, right_end + node.val)
                through_here += right_end
            best_path = max(best_path, right_best)
        return max(best_path, through_here, ending_here), ending_here

    return best(root)[0]


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    if root is None:
        return
    yield from _inorder(root.left)
    yield root.val
    yield from _inorder(root.right)


def find_target(root: Optional[TreeNode], k: int) -> bool:
    """Return whether two distinct nodes of a search tree sum to k."""
    items = list(_inorder(root))
    low, high = 0, len(items) - 1
    while low < high:
        total = items[low] + items[high]
        if total < k:
            low += 1
        elif total > k:
            high -= 1
        else:
            return True
    return False


def nary_level_order(root: Optional[NaryNode]) -> list[list[int]]:
    """Return the values of an n-ary tree level by level."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.val for node in level])
        level = [child for node in level for child in node.children if child is not None]
    return levels


def max_depth(root: Optional[NaryNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max((max_depth(child) for child in root.children), default=0)


def preorder(root: Optional[NaryNode]) -> list[int]:
    """Return the values of an n-ary tree in preorder."""
    results: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        results.append(node.val)
        stack.extend(reversed(node.children))
    return results


def postorder(root: Optional[NaryNode]) -> list[int]:
    """Return the values of an n-ary tree in postorder."""
    results: list[int] = []
    stack = [(root, iter(root.children))] if root is not None else []
    while stack:
        node, children = stack[-1]
        for child in children:
            if child is not None:
                stack.append((child, iter(child.children)))
                break
        else:
            stack.pop()
            results.append(node.val)
    return results