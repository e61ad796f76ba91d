from typing import Any, Optional


class _QueueNode:
    def __init__(self, item: Any):
        self.item = item
        self.next: Optional["_QueueNode"] = None


class LinkedQueue:
    """
    Fila FIFO encadeada.
    Usada pelo percurso em nível da AVL para guardar pares (nó, profundidade).
    Todas as operações são O(1).
    """
    def __init__(self):
        self._first: Optional[_QueueNode] = None
        self._last: Optional[_QueueNode] = None
        self._size = 0

    def enqueue(self, item: Any):
        node = _QueueNode(item)
        if self._last is None:
            self._first = self._last = node
        else:
            self._last.next = node
            self._last = node
        self._size += 1

    def dequeue(self) -> Optional[Any]:
        """Remove e retorna o item mais antigo, ou None se a fila estiver vazia."""
        if self._first is None:
            return None

        node = self._first
        self._first = node.next
        if self._first is None:
            self._last = None
        self._size -= 1
        return node.item

    def peek(self) -> Optional[Any]:
        return self._first.item if self._first else None

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"LinkedQueue(size={self._size})"
