from typing import Any, Iterable, List
from src.core.structures.avl_tree import AVLTree


class TreePrinter:
    """
    Camada de apresentação da AVL.
    A árvore só produz sequências; aqui elas viram texto e vão para o log.
    """
    SEPARATOR = ", "
    LEVEL_SEPARATOR = " "
    MAX_LOGS = 50

    def __init__(self, echo: bool = True):
        self.echo = echo
        self.logs: List[str] = []

    @classmethod
    def format_sequence(cls, values: Iterable[Any]) -> str:
        return cls.SEPARATOR.join(str(v) for v in values)

    @classmethod
    def format_levels(cls, tree: AVLTree) -> str:
        """Uma linha por profundidade, quebrando quando a profundidade muda."""
        lines: List[List[str]] = []
        current_depth = None
        for depth, value in tree.level_order():
            if depth != current_depth:
                lines.append([])
                current_depth = depth
            lines[-1].append(str(value))
        return "\n".join(cls.LEVEL_SEPARATOR.join(line) for line in lines)

    # --- Saída ---

    def print_preorder(self, tree: AVLTree) -> str:
        return self._emit("Pré-ordem", self.format_sequence(tree.preorder()))

    def print_inorder(self, tree: AVLTree) -> str:
        return self._emit("In-ordem", self.format_sequence(tree.inorder()))

    def print_postorder(self, tree: AVLTree) -> str:
        return self._emit("Pós-ordem", self.format_sequence(tree.postorder()))

    def print_level_order(self, tree: AVLTree) -> str:
        return self._emit("Em nível", self.format_levels(tree))

    def print_summary(self, tree: AVLTree) -> str:
        return self._emit("Resumo", f"nós={tree.weight()} altura={tree.height()}")

    def _emit(self, label: str, text: str) -> str:
        self.log(f"[{label}] {text}")
        return text

    def log(self, msg: str):
        if self.echo:
            print(msg)
        self.logs.append(msg)
        # Mantém apenas as últimas MAX_LOGS mensagens em memória
        if len(self.logs) > self.MAX_LOGS:
            self.logs.pop(0)
