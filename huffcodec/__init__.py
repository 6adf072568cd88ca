"""
huffcodec: lossless compression of byte strings with static Huffman codes.
"""

from .codecs import HuffmanCodec

from .coders import (
    CoderBase,
    HuffmanCoderSettings,
    HuffmanSerializer,
    HuffmanDecoder,
    HuffmanCoder,
    DecodeState,
)

from .bitstream import (
    BitOutputStream,
    BitInputStream,
    pack_bits_to_bytes,
    unpack_bytes_to_bits,
)

from .tree import (
    TreeNode,
    NodeArena,
    HuffmanTree,
    average_code_length,
)

from .models import (
    Symbol,
    SymbolFrequency,
    FrequencyModel,
)

from .preprocessors import (
    BasePreprocessor,
    BytePreprocessor,
)

from .exceptions import (
    HuffmanError,
    EmptyInputError,
    DegenerateInputError,
    MalformedBitstreamError,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    TreeConstructionLog,
    CodeAssignmentLog,
    CodingLog,
    DecodeStateLog,
    PreprocessingProgressStep,
    CodingProgressStep,
)

__all__ = [
    "HuffmanCodec",

    "CoderBase",
    "HuffmanCoderSettings",
    "HuffmanSerializer",
    "HuffmanDecoder",
    "HuffmanCoder",
    "DecodeState",

    "BitOutputStream",
    "BitInputStream",
    "pack_bits_to_bytes",
    "unpack_bytes_to_bits",

    "TreeNode",
    "NodeArena",
    "HuffmanTree",
    "average_code_length",

    "Symbol",
    "SymbolFrequency",
    "FrequencyModel",

    "BasePreprocessor",
    "BytePreprocessor",

    "HuffmanError",
    "EmptyInputError",
    "DegenerateInputError",
    "MalformedBitstreamError",

    "Logger",
    "Log",
    "LogLevel",
    "TreeConstructionLog",
    "CodeAssignmentLog",
    "CodingLog",
    "DecodeStateLog",
    "PreprocessingProgressStep",
    "CodingProgressStep",
]
