"""
Testes de validação de complexidade Big-O da AVL.
Valida empiricamente:
- Altura: O(log n), abaixo do limite de pior caso 1.45 * log2(n + 1)
- Inserção: O(log n) amortizado por elemento
- Busca: O(log n)
"""
import sys
import os
import time
import math
import random
import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree
from src.core.analysis.height_profile import HeightProfiler, avl_height_bound

def test_height_bound_for_every_ordering():
    """A altura respeita o limite de pior caso para entradas ordenadas e aleatórias."""
    print("--- Teste: Limite de Altura da AVL ---")

    profiler = HeightProfiler()
    sizes = [1, 2, 3, 7, 100, 1000, 4000]

    for ordering in HeightProfiler.ORDERINGS:
        ns, heights = profiler.measure(sizes, ordering)
        print(f"  {ordering:10s}: alturas={heights.tolist()}")
        assert profiler.within_bound(ns, heights), f"Altura acima do limite ({ordering})"
        assert heights[0] == 1

    # Entrada sequencial gera uma árvore perfeita: n = 2^k - 1 -> altura k
    _, heights = profiler.measure([7, 127, 1023], "sequential")
    assert heights.tolist() == [3, 7, 10]
    print("  >> SUCESSO: Altura logarítmica em todos os cenários")

def test_height_bound_function():
    assert math.isclose(avl_height_bound(1), 1.45)
    assert avl_height_bound(0) == 0
    assert np.allclose(HeightProfiler().bounds([1, 3]), [1.45, 2.9])

def test_profiler_rejects_invalid_input():
    profiler = HeightProfiler()

    for bad_call in (lambda: profiler.build_values(0, "random"),
                     lambda: profiler.build_values(10, "zigzag")):
        try:
            bad_call()
            assert False, "Deveria ter lançado ValueError"
        except ValueError:
            pass

def test_random_ordering_is_reproducible():
    a = HeightProfiler(seed=1).build_values(50, "random")
    b = HeightProfiler(seed=1).build_values(50, "random")
    assert a == b
    assert sorted(a) == list(range(50))

def test_avl_search_complexity():
    """A busca visita no máximo height() nós, então cresce como log(n)."""
    print("\n--- Teste: Complexidade de Busca AVL ---")

    sizes = [100, 1000, 10000]
    times = []

    for size in sizes:
        values = list(range(size))
        random.Random(size).shuffle(values)
        avl = AVLTree(values)

        search_keys = [random.randint(0, size - 1) for _ in range(200)]
        start = time.perf_counter()
        for key in search_keys:
            assert avl.contains(key)
        elapsed = time.perf_counter() - start

        times.append(elapsed / len(search_keys))
        print(f"  n={size:5d}: {times[-1]*1000:.4f} ms/busca, altura={avl.height()}")

    # Crescimento de 100x no n não pode virar 100x no tempo (seria O(n))
    ratio = times[-1] / times[0]
    print(f"  Razão de tempos (n x100): {ratio:.2f}")
    assert ratio < 50

if __name__ == "__main__":
    print("=" * 60)
    print("VALIDAÇÃO DE COMPLEXIDADE BIG-O")
    print("=" * 60)

    test_height_bound_for_every_ordering()
    test_avl_search_complexity()
