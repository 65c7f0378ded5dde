"""Common constants shared across protocol components.

This module contains the wire-level layout of an ES51986 serial frame.

Frame layout (9 payload bytes between line terminators):

    [range:1][digit:4][function:1][status:1][option1:1][option2:1]
"""

FRAME_LENGTH = 9  # Payload bytes between terminators

CR = 0x0D  # Carriage return
LF = 0x0A  # Line feed

# Field offsets within a frame
RANGE_OFFSET = 0
DIGITS_OFFSET = 1
DIGITS_LENGTH = 4
FUNCTION_OFFSET = 5
STATUS_OFFSET = 6
OPTION1_OFFSET = 7  # Defined by the chip, not used by this protocol revision
OPTION2_OFFSET = 8
