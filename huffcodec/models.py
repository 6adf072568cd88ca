"""
models.py

The shared objects used in huffcodec: symbols and the frequency model
the Huffman tree is built from.

"""


from typing import Iterable, List, Dict, Tuple

import numpy as np

from .exceptions import EmptyInputError
from .settings import SYMBOL_COUNT
from .validators import validate_byte_value

class Symbol:
    """
    Represents a single 8-bit symbol in the data.
    """
    def __init__(self, data: bytes) -> None:
        if not isinstance(data, bytes):
            raise ValueError("Data must be of type bytes")
        if len(data) != 1:
            raise ValueError("Symbol data must be exactly one byte")
        self.data: bytes = data

    @staticmethod
    def from_int(value: int) -> 'Symbol':
        validate_byte_value(value, "Symbol value")
        return Symbol(bytes((value,)))

    @property
    def value(self) -> int:
        return self.data[0]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self.data == other.data
        return False

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return str(self.data)

    def __hash__(self) -> int:
        return hash(self.data)


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Symbol, frequency: int) -> None:
        self.symbol: Symbol = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"


class FrequencyModel:
    """
    Occurrence counts of every distinct symbol of an input.

    Built once through count() and never modified afterwards. Every
    symbol it holds has a count of at least one.
    """
    def __init__(self, counts: Dict[Symbol, int]) -> None:
        if not counts:
            raise EmptyInputError("Frequency model needs at least one symbol")
        for symbol, frequency in counts.items():
            if not isinstance(symbol, Symbol):
                raise ValueError("Frequency model keys must be of type Symbol")
            if not isinstance(frequency, int) or frequency < 1:
                raise ValueError(f"Frequency of {symbol} must be a positive integer")
        self._counts: Dict[Symbol, int] = dict(sorted(counts.items(), key=lambda item: item[0].value))

    @staticmethod
    def count(symbols: Iterable[Symbol]) -> 'FrequencyModel':
        """
        Count the occurrences of each distinct symbol.

        Args:
            symbols (Iterable[Symbol]): The full input sequence.

        Returns:
            FrequencyModel: The model of the input.

        Raises:
            EmptyInputError: If the sequence holds no symbols.
        """
        values = np.fromiter((symbol.value for symbol in symbols), dtype=np.uint8)
        if values.size == 0:
            raise EmptyInputError("Cannot count frequencies of an empty input")
        return FrequencyModel.count_bytes(values.tobytes())

    @staticmethod
    def count_bytes(data: bytes) -> 'FrequencyModel':
        """Count the occurrences of each byte value in data."""
        if len(data) == 0:
            raise EmptyInputError("Cannot count frequencies of an empty input")
        counts = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=SYMBOL_COUNT)
        present = np.flatnonzero(counts)
        return FrequencyModel({Symbol.from_int(int(value)): int(counts[value]) for value in present})

    def get_frequency(self, symbol: Symbol) -> int:
        """
        Get the count of the given symbol.

        Raises:
            KeyError: If the symbol never occurred.
        """
        return self._counts[symbol]

    def contains(self, symbol: Symbol) -> bool:
        return symbol in self._counts

    def get_symbols(self) -> List[Symbol]:
        """Symbols ordered by ascending byte value."""
        return list(self._counts)

    def get_size(self) -> int:
        """Number of distinct symbols."""
        return len(self._counts)

    def total(self) -> int:
        """Number of symbols in the counted input."""
        return sum(self._counts.values())

    def items(self) -> List[Tuple[Symbol, int]]:
        return list(self._counts.items())

    def frequencies(self) -> List[SymbolFrequency]:
        return [SymbolFrequency(symbol, frequency) for symbol, frequency in self._counts.items()]

    def to_dict(self) -> Dict[Symbol, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyModel):
            return False
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"FrequencyModel({self.frequencies()})"
