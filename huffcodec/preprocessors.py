import abc
from typing import List, Tuple, Optional

from .models import Symbol, FrequencyModel
from .logger import Logger, PreprocessingProgressStep


class BasePreprocessor(abc.ABC):
    @abc.abstractmethod
    def convert_to_symbols(self, data: bytes) -> Tuple[List[Symbol], FrequencyModel]:
        """
        Convert raw data (bytes) to a list of symbols and count their frequencies.

        Args:
            data (bytes): The input data as bytes.

        Returns:
            Tuple[List[Symbol], FrequencyModel]: The symbols and the frequency model built from them.
        """
        pass

    @abc.abstractmethod
    def convert_from_symbols(self, symbols: List[Symbol]) -> bytes:
        """
        Convert a list of symbols back to data in bytes.

        Args:
            symbols (List[Symbol]): The list of symbols.

        Returns:
            bytes: The reconstructed data.
        """
        pass


class BytePreprocessor(BasePreprocessor):
    """
    Byte Preprocessor: Each byte of data is assigned to a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def convert_to_symbols(self, data: bytes) -> Tuple[List[Symbol], FrequencyModel]:
        if not isinstance(data, bytes):
            raise ValueError("Data should be in form of bytes")

        frequency_model = FrequencyModel.count_bytes(data)
        symbols: List[Symbol] = []
        cache = {}
        for b in data:
            if b not in cache:
                cache[b] = Symbol(bytes((b,)))
            symbols.append(cache[b])
            if self.logger is not None:
                self.logger.log(PreprocessingProgressStep("Converting data to symbols", len(data)))

        return symbols, frequency_model

    def convert_from_symbols(self, symbols: List[Symbol]) -> bytes:
        return b''.join(symbol.data for symbol in symbols)
