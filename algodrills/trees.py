"""Binary trees, singly linked lists and a prefix tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: ListNode | None = None


def build_tree(values: Sequence[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, ``None`` marking a missing child.

    Children are listed only for nodes that exist, as in the usual
    breadth-first serialisation.
    """
    if not values or values[0] is None:
        return None
    root = TreeNode(values[0])
    pending = deque([root])
    remaining = iter(values[1:])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(remaining)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _walk(head: ListNode | None) -> Iterator[int]:
    while head is not None:
        yield head.val
        head = head.next


def list_values(head: ListNode | None) -> list[int]:
    """The values of a linked list, from head to tail."""
    return list(_walk(head))


def is_symmetric(root: TreeNode | None) -> bool:
    """True if the tree is a mirror image of itself; an empty tree is."""
    if root is None:
        return True
    pairs = [(root.left, root.right)]
    while pairs:
        first, second = pairs.pop()
        if first is None and second is None:
            continue
        if first is None or second is None or first.val != second.val:
            return False
        pairs.append((first.left, second.right))
        pairs.append((first.right, second.left))
    return True


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Node values level by level, each level from left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    return sum(1 for _ in _levels(root))


def preorder(root: TreeNode | None) -> list[int]:
    """Node values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[int]:
    """Node values in left, root, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def right_side_view(root: TreeNode | None) -> list[int]:
    """The value of the rightmost node on each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_end = True

    def _find(self, text: str) -> _TrieNode | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """True if ``word`` was inserted."""
        node = self._find(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """True if some inserted word begins with ``prefix``."""
        return self._find(prefix) is not None