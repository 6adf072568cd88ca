from typing import Optional

from .coders import HuffmanCoder, HuffmanCoderSettings
from .exceptions import EmptyInputError
from .logger import Logger, CodingLog
from .preprocessors import BasePreprocessor, BytePreprocessor
from .validators import validate_type


class HuffmanCodec:
    """Compresses and decompresses whole byte strings in memory."""

    def __init__(
        self,
        settings: Optional[HuffmanCoderSettings] = None,
        logger: Optional[Logger] = None,
        preprocessor: Optional[BasePreprocessor] = None,
    ) -> None:
        if settings is not None:
            validate_type(settings, "Settings", HuffmanCoderSettings)
        self.logger: Optional[Logger] = logger
        self.preprocessor: BasePreprocessor = preprocessor if preprocessor is not None else BytePreprocessor(logger)
        self.coder = HuffmanCoder(settings, logger)

    def compress(self, data: bytes) -> bytes:
        """
        Compress data into a self-describing Huffman stream.

        Raises:
            ValueError: If data is not bytes.
            EmptyInputError: If data is empty.
        """
        validate_type(data, "Data", bytes)
        if len(data) == 0:
            raise EmptyInputError("Cannot compress empty data")
        symbols, frequency_model = self.preprocessor.convert_to_symbols(data)
        encoded = self.coder.encode(symbols, frequency_model)
        if self.logger is not None:
            self.logger.log(CodingLog(len(symbols), len(encoded)))
        return encoded

    def decompress(self, data: bytes) -> bytes:
        """
        Restore the bytes compressed by compress().

        Raises:
            ValueError: If data is not bytes.
            MalformedBitstreamError: If data is not a valid stream.
        """
        validate_type(data, "Data", bytes)
        symbols = self.coder.decode(data)
        if self.logger is not None:
            self.logger.log(CodingLog(len(symbols), len(data)))
        return self.preprocessor.convert_from_symbols(symbols)
