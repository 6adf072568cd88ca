"""
settings.py

Constants shared by the huffcodec modules.
"""

# width of a serialized leaf symbol
SYMBOL_BITS = 8
SYMBOL_COUNT = 1 << SYMBOL_BITS

# edge labels used by code derivation and the payload walk
LEFT_BIT = 1
RIGHT_BIT = 0

# bit written ahead of the padding when framing a stream
MARKER_BIT = 0
