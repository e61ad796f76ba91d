import math
import random
from typing import List, Sequence
import numpy as np
from src.core.structures.avl_tree import AVLTree


def avl_height_bound(n: int) -> float:
    """Limite de pior caso da altura de uma AVL com n nós (~1.45 * log2(n + 1))."""
    return HeightProfiler.HEIGHT_COEFFICIENT * math.log2(n + 1)


class HeightProfiler:
    """
    Mede empiricamente a altura da AVL em função de n.
    Serve para validar que a altura cresce em O(log n) para qualquer ordem de inserção.
    """
    HEIGHT_COEFFICIENT = 1.45
    DEFAULT_SEED = 42
    DEFAULT_SIZES = [10, 100, 1000, 5000, 10000]
    ORDERINGS = ("sequential", "reversed", "random")

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = seed

    def build_values(self, n: int, ordering: str) -> List[int]:
        if n <= 0:
            raise ValueError(f"O tamanho da árvore deve ser positivo (recebido {n}).")
        if ordering not in self.ORDERINGS:
            raise ValueError(f"Ordem de inserção desconhecida: {ordering}. Use uma de {self.ORDERINGS}.")

        values = list(range(n))
        if ordering == "reversed":
            values.reverse()
        elif ordering == "random":
            random.Random(self.seed).shuffle(values)
        return values

    def measure(self, sizes: Sequence[int] = None, ordering: str = "random"):
        """
        Constrói uma árvore para cada n e registra a altura final.
        Retorna (sizes, heights) como arrays numpy.
        """
        sizes = list(sizes) if sizes is not None else list(self.DEFAULT_SIZES)
        heights = []
        for n in sizes:
            tree = AVLTree(self.build_values(n, ordering))
            heights.append(tree.height())
        return np.array(sizes, dtype=np.int64), np.array(heights, dtype=np.int64)

    def bounds(self, sizes) -> np.ndarray:
        return self.HEIGHT_COEFFICIENT * np.log2(np.asarray(sizes, dtype=np.float64) + 1)

    def within_bound(self, sizes, heights) -> bool:
        """True se todas as alturas respeitam o limite de pior caso da AVL."""
        return bool(np.all(np.asarray(heights) <= self.bounds(sizes)))
