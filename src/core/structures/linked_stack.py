from typing import Any, Optional


class _StackNode:
    def __init__(self, item: Any, below: Optional["_StackNode"] = None):
        self.item = item
        self.below = below


class LinkedStack:
    """
    Pilha LIFO encadeada.
    Sustenta os percursos em profundidade (pré, in e pós-ordem) sem recursão.
    """
    def __init__(self):
        self._top: Optional[_StackNode] = None
        self._size = 0

    def push(self, item: Any):
        self._top = _StackNode(item, self._top)
        self._size += 1

    def pop(self) -> Optional[Any]:
        """Remove e retorna o topo (O(1)). Pilha vazia retorna None."""
        if self._top is None:
            return None

        node = self._top
        self._top = node.below
        self._size -= 1
        return node.item

    def peek(self) -> Optional[Any]:
        return self._top.item if self._top else None

    def is_empty(self) -> bool:
        return self._top is None

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"LinkedStack(size={self._size})"
