from typing import Any, Iterable, Iterator, List, Optional, Tuple
from src.core.structures.linked_queue import LinkedQueue
from src.core.structures.linked_stack import LinkedStack


class TreeInvariantError(RuntimeError):
    """Falha interna: a árvore violou uma de suas invariantes (AVL, BST ou altura)."""


class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena o valor e a altura da subárvore enraizada nele.
    Filhos ausentes são None (altura 0), sem nós sentinela.
    """
    def __init__(self, value):
        self.value = value
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Altura inicial do nó é 1

    def __repr__(self):
        return f"AVLNode({self.value!r}, h={self.height})"


class AVLTree:
    """
    Árvore AVL de elementos ordenáveis.
    Duplicatas vão para a subárvore direita, então o in-order é um multiconjunto ordenado.
    Inserção e busca em O(log n). Remoção não é suportada.
    """
    MAX_IMBALANCE = 1  # |fator de balanceamento| permitido em cada nó

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self.root: Optional[AVLNode] = None
        if values is not None:
            self.insert_many(values)

    # --- API Pública ---

    def is_empty(self) -> bool:
        return self.root is None

    def insert(self, value):
        """Insere um valor e rebalanceia a árvore automaticamente."""
        if value is None:
            raise ValueError("None não pode ser inserido na árvore.")

        if self.is_empty():
            self.root = AVLNode(value)
        else:
            self.root = self._insert_recursive(self.root, value)

    def insert_many(self, values: Iterable[Any]):
        """Insere uma sequência de valores, um a um."""
        for value in values:
            self.insert(value)

    def contains(self, value) -> bool:
        """Busca um valor em O(log n)."""
        current = self.root
        while current:
            if value == current.value:
                return True
            elif value > current.value:
                current = current.right
            else:
                current = current.left
        return False

    def height(self) -> int:
        """Altura da raiz (0 para árvore vazia)."""
        return self._get_height(self.root)

    def weight(self) -> int:
        """Quantidade total de nós, contando duplicatas. O(n)."""
        return sum(1 for _ in self.preorder())

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.weight()

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __repr__(self):
        return f"AVLTree(weight={self.weight()}, height={self.height()})"

    # --- Inserção e Balanceamento ---

    def _insert_recursive(self, node: Optional[AVLNode], value) -> AVLNode:
        # 1. Inserção normal de BST (duplicatas à direita)
        if not node:
            return AVLNode(value)

        if value >= node.value:
            node.right = self._insert_recursive(node.right, value)
        else:
            node.left = self._insert_recursive(node.left, value)

        # 2. Atualizar altura do nó ancestral
        self._update_height(node)

        # 3. Restaurar a propriedade AVL neste nível
        return self._rebalance(node)

    def _rebalance(self, node: AVLNode) -> AVLNode:
        """
        Aplica uma das quatro rotações conforme o fator de balanceamento.
        Retorna a nova raiz da subárvore.
        """
        balance = self._get_balance(node)

        if abs(balance) <= self.MAX_IMBALANCE:
            return node

        if abs(balance) > self.MAX_IMBALANCE + 1:
            raise TreeInvariantError(
                f"Fator de balanceamento {balance} no nó {node.value!r}: "
                f"a árvore deveria ter sido rebalanceada antes."
            )

        if balance > 0:
            # Caso 3 - Rotação Dupla à Direita (Left-Right Case)
            if self._get_balance(node.left) < 0:
                node.left = self._rotate_left(node.left)
            # Caso 1 - Rotação à Direita (Left-Left Case)
            return self._rotate_right(node)

        # Caso 4 - Rotação Dupla à Esquerda (Right-Left Case)
        if self._get_balance(node.right) > 0:
            node.right = self._rotate_right(node.right)
        # Caso 2 - Rotação à Esquerda (Right-Right Case)
        return self._rotate_left(node)

    # --- Métodos Auxiliares e Rotações ---

    @staticmethod
    def _get_height(node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return node.height

    def _get_balance(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _update_height(self, node: AVLNode):
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _rotate_left(self, z: AVLNode) -> AVLNode:
        """
        Realiza rotação simples à esquerda.
        Usada quando o peso está na direita (Right-Right).
        """
        y = z.right
        T2 = y.left

        # Rotação
        y.left = z
        z.right = T2

        # Atualiza alturas (z primeiro, pois y depende dele)
        self._update_height(z)
        self._update_height(y)

        return y

    def _rotate_right(self, z: AVLNode) -> AVLNode:
        """
        Realiza rotação simples à direita.
        Usada quando o peso está na esquerda (Left-Left).
        """
        y = z.left
        T3 = y.right

        # Rotação
        y.right = z
        z.left = T3

        self._update_height(z)
        self._update_height(y)

        return y

    # --- Percursos ---

    def preorder(self) -> Iterator[Any]:
        """Raiz, esquerda, direita."""
        stack = LinkedStack()
        if self.root:
            stack.push(self.root)
        while not stack.is_empty():
            node = stack.pop()
            yield node.value
            # Direita empilhada primeiro para a esquerda sair antes
            if node.right:
                stack.push(node.right)
            if node.left:
                stack.push(node.left)

    def inorder(self) -> Iterator[Any]:
        """Esquerda, raiz, direita: valores em ordem não decrescente."""
        stack = LinkedStack()
        current = self.root
        while current or not stack.is_empty():
            while current:
                stack.push(current)
                current = current.left
            node = stack.pop()
            yield node.value
            current = node.right

    def postorder(self) -> Iterator[Any]:
        """Esquerda, direita, raiz."""
        stack = LinkedStack()
        last_visited = None
        current = self.root
        while current or not stack.is_empty():
            while current:
                stack.push(current)
                current = current.left
            node = stack.peek()
            if node.right and node.right is not last_visited:
                current = node.right
            else:
                stack.pop()
                yield node.value
                last_visited = node

    def level_order(self) -> Iterator[Tuple[int, Any]]:
        """
        Busca em largura com uma fila de pares (nó, profundidade).
        A mudança de profundidade entre dois pares marca a quebra de nível.
        """
        if self.is_empty():
            return

        tree_height = self.height()
        queue = LinkedQueue()
        queue.enqueue((self.root, 0))

        while not queue.is_empty():
            node, depth = queue.dequeue()
            yield depth, node.value

            # Não desce além das folhas
            if depth + 1 < tree_height:
                if node.left:
                    queue.enqueue((node.left, depth + 1))
                if node.right:
                    queue.enqueue((node.right, depth + 1))

    def levels(self) -> List[List[Any]]:
        """Percurso em nível agrupado por profundidade."""
        grouped: List[List[Any]] = []
        for depth, value in self.level_order():
            if depth == len(grouped):
                grouped.append([])
            grouped[depth].append(value)
        return grouped

    # --- Verificação de Invariantes ---

    def validate(self):
        """
        Percorre a árvore inteira conferindo altura armazenada, fator de
        balanceamento e ordenação BST. Lança TreeInvariantError na primeira falha.
        """
        self._validate_recursive(self.root, None, None)

    def is_balanced(self) -> bool:
        try:
            self.validate()
        except TreeInvariantError:
            return False
        return True

    def _validate_recursive(self, node: Optional[AVLNode], lower, upper) -> int:
        # Rotações podem levar duplicatas para a esquerda, então os dois limites são inclusivos
        if not node:
            return 0

        if lower is not None and node.value < lower:
            raise TreeInvariantError(f"Valor {node.value!r} menor que o ancestral {lower!r}.")
        if upper is not None and node.value > upper:
            raise TreeInvariantError(f"Valor {node.value!r} maior que o ancestral {upper!r}.")

        left_height = self._validate_recursive(node.left, lower, node.value)
        right_height = self._validate_recursive(node.right, node.value, upper)

        if node.height != 1 + max(left_height, right_height):
            raise TreeInvariantError(
                f"Altura armazenada {node.height} do nó {node.value!r} "
                f"difere da calculada {1 + max(left_height, right_height)}."
            )
        if abs(left_height - right_height) > self.MAX_IMBALANCE:
            raise TreeInvariantError(
                f"Nó {node.value!r} desbalanceado: alturas {left_height} e {right_height}."
            )
        return node.height
