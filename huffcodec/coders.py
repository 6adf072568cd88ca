"""
coders.py

Huffman coder: writes a tree and its payload to a framed bitstream and
reads them back.

Stream body, in order:
  - tree shape, pre-order: a branch writes 1 before each child, an absent
    child writes 0, so every leaf contributes the pair 00
  - one 8-bit symbol per leaf, in the same pre-order
  - the code of every input symbol, in input order
The framing added by BitOutputStream puts the body on a byte boundary.
"""


import abc
import enum
from typing import Dict, List, Optional

from .bitstream import BitOutputStream, BitInputStream
from .exceptions import EmptyInputError, DegenerateInputError, MalformedBitstreamError
from .logger import Logger, Log, LogLevel, DecodeStateLog, CodingProgressStep
from .models import Symbol, FrequencyModel
from .settings import LEFT_BIT
from .tree import HuffmanTree, NodeArena
from .validators import validate_type


class HuffmanCoderSettings:
    """
    Settings for the Huffman coder.

    allow_single_symbol: accept input made of one distinct symbol. Such a
        tree is written as a branch over two copies of its leaf and every
        occurrence is written as a single 1 bit.
    strict_end: reject a payload that stops in the middle of a code instead
        of dropping the incomplete code.
    """

    def __init__(self, allow_single_symbol: bool = True, strict_end: bool = True) -> None:
        validate_type(allow_single_symbol, "allow_single_symbol", bool)
        validate_type(strict_end, "strict_end", bool)
        self.allow_single_symbol: bool = allow_single_symbol
        self.strict_end: bool = strict_end


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    @abc.abstractmethod
    def encode(self, symbols: List[Symbol], frequency_model: Optional[FrequencyModel] = None) -> bytes:
        """
        Encode a sequence of symbols into a compressed byte stream.

        Args:
            symbols (List[Symbol]): The list of symbols to be encoded.
            frequency_model (Optional[FrequencyModel]): Counts of the symbols, computed when omitted.

        Returns:
            bytes: The encoded data.
        """
        pass

    @abc.abstractmethod
    def decode(self, data: bytes) -> List[Symbol]:
        """
        Decode a compressed byte stream back into a list of Symbol objects.

        Args:
            data (bytes): The encoded data.

        Returns:
            List[Symbol]: The decoded list of symbols.
        """
        pass


class HuffmanSerializer:
    """
    Writes a tree, its leaf symbols and a payload into one stream.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def serialize(self, tree: HuffmanTree, symbols: List[Symbol], codes: Dict[Symbol, str]) -> bytes:
        """
        Serialize tree and the encoded symbols.

        Args:
            tree (HuffmanTree): The tree the codes were derived from.
            symbols (List[Symbol]): The input, in order.
            codes (Dict[Symbol, str]): Code of every symbol in the input.

        Returns:
            bytes: The framed, byte-aligned stream.

        Raises:
            ValueError: If a symbol has no code.
        """
        validate_type(tree, "Tree", HuffmanTree)
        out = BitOutputStream()
        if tree.is_degenerate():
            self._write_single_symbol(out, tree, symbols)
        else:
            self._write_shape(out, tree, tree.root)
            for leaf in tree.leaves():
                out.write_byte(leaf.symbol.value)
            self._write_payload(out, symbols, codes)
        return out.finish()

    def _write_shape(self, out: BitOutputStream, tree: HuffmanTree, node_id: int) -> None:
        node = tree.arena[node_id]
        for child in (node.left, node.right):
            if child is None:
                out.write(0)
            else:
                out.write(1)
                self._write_shape(out, tree, child)

    def _write_single_symbol(self, out: BitOutputStream, tree: HuffmanTree, symbols: List[Symbol]) -> None:
        symbol = tree.arena[tree.root].symbol
        # branch over two copies of the leaf
        out.write_code("100100")
        out.write_byte(symbol.value)
        out.write_byte(symbol.value)
        for current in symbols:
            if current != symbol:
                raise ValueError(f"No code for symbol {current}")
            out.write(LEFT_BIT)
            self._log_progress(len(symbols))

    def _write_payload(self, out: BitOutputStream, symbols: List[Symbol], codes: Dict[Symbol, str]) -> None:
        for symbol in symbols:
            code = codes.get(symbol)
            if not code:
                raise ValueError(f"No code for symbol {symbol}")
            out.write_code(code)
            self._log_progress(len(symbols))

    def _log_progress(self, total: int) -> None:
        if self.logger is not None:
            self.logger.log(CodingProgressStep("Encoding symbols", total))


class DecodeState(enum.Enum):
    BUILDING_SHAPE = "building_shape"
    READING_LEAF_SYMBOLS = "reading_leaf_symbols"
    WALKING_PAYLOAD = "walking_payload"
    DONE = "done"


class HuffmanDecoder:
    """
    Rebuilds the tree from a stream, then walks the payload through it.

    Shape reconstruction keeps a stack of nodes still missing children.
    A 1 bit adds a child to the top node and pushes it. Two 0 bits in a
    row pop the top node as a finished leaf; the first of them only arms
    a pending pop.
    """

    def __init__(self, settings: Optional[HuffmanCoderSettings] = None, logger: Optional[Logger] = None) -> None:
        self.settings: HuffmanCoderSettings = settings if settings is not None else HuffmanCoderSettings()
        self.logger: Optional[Logger] = logger
        self._reset()

    def _reset(self) -> None:
        self.state: DecodeState = DecodeState.BUILDING_SHAPE
        self.arena: NodeArena = NodeArena()
        self.root: int = self.arena.new_node()
        self.stack: List[int] = [self.root]
        self.pending_pop: bool = False
        self.leaf_order: List[int] = []
        self.output: List[Symbol] = []

    def decode(self, data: bytes) -> List[Symbol]:
        """
        Decode a stream produced by HuffmanSerializer.

        Raises:
            MalformedBitstreamError: If the stream does not hold a valid tree and payload.
        """
        stream = BitInputStream(data)
        self._reset()
        self._log_state()
        handlers = {
            DecodeState.BUILDING_SHAPE: self._build_shape,
            DecodeState.READING_LEAF_SYMBOLS: self._read_leaf_symbols,
            DecodeState.WALKING_PAYLOAD: self._walk_payload,
        }
        while self.state != DecodeState.DONE:
            handlers[self.state](stream)
        return self.output

    @property
    def tree(self) -> HuffmanTree:
        """The tree rebuilt by the last decode()."""
        return HuffmanTree(self.arena, self.root)

    def _transition(self, state: DecodeState) -> None:
        self.state = state
        self._log_state()

    def _log_state(self) -> None:
        if self.logger is not None:
            self.logger.log(DecodeStateLog(self.state.name))

    def _build_shape(self, stream: BitInputStream) -> None:
        while self.stack and self.arena[self.stack[-1]].is_complete():
            self.stack.pop()
        if not self.stack:
            self._transition(DecodeState.READING_LEAF_SYMBOLS)
            return

        bit = stream.read()
        if bit == -1:
            raise MalformedBitstreamError("Stream ended inside the tree shape")
        if bit == 1:
            child = self.arena.new_node()
            self.arena.attach(self.stack[-1], child)
            self.stack.append(child)
        elif self.pending_pop:
            self.pending_pop = False
            node_id = self.stack.pop()
            if not self.arena[node_id].is_leaf():
                raise MalformedBitstreamError(f"Branch {node_id} has a single child")
            self.leaf_order.append(node_id)
        else:
            self.pending_pop = True

    def _read_leaf_symbols(self, stream: BitInputStream) -> None:
        for node_id in self.leaf_order:
            self.arena[node_id].symbol = Symbol.from_int(stream.read_byte())
        self._transition(DecodeState.WALKING_PAYLOAD)

    def _walk_payload(self, stream: BitInputStream) -> None:
        current = self.arena[self.root]
        while not stream.at_end():
            bit = stream.read()
            next_id = current.left if bit == LEFT_BIT else current.right
            if next_id is None:
                raise MalformedBitstreamError(f"Payload steps past node {current.node_id}")
            current = self.arena[next_id]
            if current.is_leaf():
                self.output.append(current.symbol)
                current = self.arena[self.root]

        if current.node_id != self.root:
            if self.settings.strict_end:
                raise MalformedBitstreamError("Payload ends inside a code")
            if self.logger is not None:
                self.logger.log(Log("Decoder", LogLevel.WARNING, "Dropped an incomplete trailing code"))
        self._transition(DecodeState.DONE)


class HuffmanCoder(CoderBase):
    """
    Static Huffman coder over byte symbols.
    """

    def __init__(self, settings: Optional[HuffmanCoderSettings] = None, logger: Optional[Logger] = None) -> None:
        self.settings: HuffmanCoderSettings = settings if settings is not None else HuffmanCoderSettings()
        self.logger: Optional[Logger] = logger
        self.serializer = HuffmanSerializer(logger)
        self.decoder = HuffmanDecoder(self.settings, logger)

    def build_tree(self, symbols: List[Symbol], frequency_model: Optional[FrequencyModel] = None) -> HuffmanTree:
        """
        Build the tree for symbols, applying the single-symbol setting.

        Raises:
            EmptyInputError: If symbols is empty.
            DegenerateInputError: If symbols has one distinct value and that is disabled.
        """
        if len(symbols) == 0:
            raise EmptyInputError("Cannot encode an empty input")
        if frequency_model is None:
            frequency_model = FrequencyModel.count(symbols)
        tree = HuffmanTree.build(frequency_model, self.logger)
        if tree.is_degenerate() and not self.settings.allow_single_symbol:
            raise DegenerateInputError("Input holds a single distinct symbol")
        return tree

    def encode(self, symbols: List[Symbol], frequency_model: Optional[FrequencyModel] = None) -> bytes:
        tree = self.build_tree(symbols, frequency_model)
        codes = tree.derive_codes(self.logger)
        return self.serializer.serialize(tree, symbols, codes)

    def decode(self, data: bytes) -> List[Symbol]:
        return self.decoder.decode(data)
