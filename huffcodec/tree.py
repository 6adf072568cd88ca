"""
tree.py

Huffman tree construction and code derivation.

Nodes live in a NodeArena and refer to each other by integer id. A
branch always has two children; a leaf has none and carries a symbol.
"""


import heapq
from typing import Dict, List, Optional

from .exceptions import EmptyInputError
from .logger import Logger, TreeConstructionLog, CodeAssignmentLog
from .models import Symbol, FrequencyModel
from .settings import LEFT_BIT, RIGHT_BIT
from .validators import validate_type


class TreeNode:
    """
    A node of a Huffman tree.
    """

    def __init__(self, node_id: int, symbol: Optional[Symbol] = None, frequency: int = 0) -> None:
        self.node_id: int = node_id
        self.symbol: Optional[Symbol] = symbol
        self.frequency: int = frequency
        self.left: Optional[int] = None
        self.right: Optional[int] = None
        self.parent: Optional[int] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_complete(self) -> bool:
        return self.left is not None and self.right is not None

    def __str__(self) -> str:
        if self.symbol is None:
            return str(self.frequency)
        return f"{self.symbol},{self.frequency}"

    def __repr__(self) -> str:
        return f"TreeNode(id={self.node_id}, symbol={self.symbol!r}, frequency={self.frequency})"


class NodeArena:
    """
    Owns every node of one tree.
    """

    def __init__(self) -> None:
        self.nodes: List[TreeNode] = []

    def new_node(self, symbol: Optional[Symbol] = None, frequency: int = 0) -> int:
        node_id = len(self.nodes)
        self.nodes.append(TreeNode(node_id, symbol, frequency))
        return node_id

    def new_branch(self, left: int, right: int) -> int:
        """Create a branch over two parentless nodes and return its id."""
        branch_id = self.new_node(frequency=self.nodes[left].frequency + self.nodes[right].frequency)
        self.attach(branch_id, left)
        self.attach(branch_id, right)
        return branch_id

    def attach(self, parent: int, child: int) -> None:
        """
        Attach child under parent, filling the left slot first.

        Raises:
            ValueError: If parent already has two children or child already has a parent.
        """
        parent_node = self.nodes[parent]
        child_node = self.nodes[child]
        if child_node.parent is not None:
            raise ValueError(f"Node {child} already has a parent")
        if parent_node.left is None:
            parent_node.left = child
        elif parent_node.right is None:
            parent_node.right = child
        else:
            raise ValueError(f"Node {parent} already has two children")
        child_node.parent = parent

    def __getitem__(self, node_id: int) -> TreeNode:
        return self.nodes[node_id]

    def __len__(self) -> int:
        return len(self.nodes)


class HuffmanTree:
    """
    A Huffman tree together with the arena holding its nodes.
    """

    def __init__(self, arena: NodeArena, root: int) -> None:
        self.arena: NodeArena = arena
        self.root: int = root
        self._codes: Optional[Dict[Symbol, str]] = None

    @staticmethod
    def build(frequency_model: FrequencyModel, logger: Optional[Logger] = None) -> 'HuffmanTree':
        """
        Build a tree by repeatedly merging the two least frequent nodes.

        The first node taken from the queue becomes the left child and the
        second the right child. Equal frequencies are taken in node creation
        order; callers must not depend on that order.

        Args:
            frequency_model (FrequencyModel): Counts of the symbols to encode.
            logger (Optional[Logger]): Logger instance for logging.

        Returns:
            HuffmanTree: The built tree. A single distinct symbol yields a lone leaf.

        Raises:
            EmptyInputError: If the model holds no symbols.
        """
        validate_type(frequency_model, "Frequency model", FrequencyModel)
        if frequency_model.get_size() == 0:
            raise EmptyInputError("Cannot build a tree without symbols")

        arena = NodeArena()
        heap = []
        for symbol, frequency in frequency_model.items():
            node_id = arena.new_node(symbol, frequency)
            heap.append((frequency, node_id))
        heapq.heapify(heap)

        merges = 0
        while len(heap) > 1:
            _, a = heapq.heappop(heap)
            _, b = heapq.heappop(heap)
            branch = arena.new_branch(a, b)
            heapq.heappush(heap, (arena[branch].frequency, branch))
            merges += 1

        tree = HuffmanTree(arena, heap[0][1])
        if logger is not None:
            logger.log(TreeConstructionLog(frequency_model.get_size(), merges, tree.depth()))
        return tree

    def is_degenerate(self) -> bool:
        """True when the root itself is a leaf."""
        return self.arena[self.root].is_leaf()

    def leaves(self) -> List[TreeNode]:
        """Leaves in pre-order, left before right."""
        result = []
        stack = [self.root]
        while stack:
            node = self.arena[stack.pop()]
            if node.is_leaf():
                result.append(node)
                continue
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def depth(self) -> int:
        """Number of edges on the longest root-to-leaf path."""
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            node_id, level = stack.pop()
            node = self.arena[node_id]
            deepest = max(deepest, level)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, level + 1))
        return deepest

    def derive_codes(self, logger: Optional[Logger] = None) -> Dict[Symbol, str]:
        """
        Derive the code of every symbol from its leaf's path to the root.

        A left edge is labelled 1 and a right edge 0. The walk goes from the
        leaf up, so the collected bits are reversed before being stored.

        Returns:
            Dict[Symbol, str]: Codes as strings of '0' and '1'. The symbol of a
            lone-leaf tree maps to the empty string.
        """
        codes: Dict[Symbol, str] = {}
        for leaf in self.leaves():
            if leaf.symbol is None:
                continue
            bits = []
            current = leaf
            while current.parent is not None:
                parent = self.arena[current.parent]
                bits.append(LEFT_BIT if parent.left == current.node_id else RIGHT_BIT)
                current = parent
            code = ''.join(str(bit) for bit in reversed(bits))
            codes[leaf.symbol] = code
            if logger is not None:
                logger.log(CodeAssignmentLog(leaf.symbol, code))
        self._codes = codes
        return codes

    @property
    def codes(self) -> Dict[Symbol, str]:
        if self._codes is None:
            self.derive_codes()
        return self._codes

    def dump(self) -> str:
        """
        Render the tree as an indented listing, one node per line.
        """
        lines: List[str] = []
        self._dump_node(self.root, "", True, lines)
        return "\n".join(lines) + "\n"

    def _dump_node(self, node_id: int, prefix: str, is_tail: bool, lines: List[str]) -> None:
        node = self.arena[node_id]
        lines.append(prefix + ("└── " if is_tail else "├── ") + str(node))
        child_prefix = prefix + ("    " if is_tail else "│   ")
        if node.left is not None:
            self._dump_node(node.left, child_prefix, False, lines)
        if node.right is not None:
            self._dump_node(node.right, child_prefix, True, lines)

    def __str__(self) -> str:
        return self.dump()


def average_code_length(codes: Dict[Symbol, str], frequency_model: FrequencyModel) -> float:
    """
    Frequency-weighted mean code length in bits per symbol.
    """
    total = frequency_model.total()
    weighted = sum(len(codes[symbol]) * frequency for symbol, frequency in frequency_model.items())
    return weighted / total
