"""Grammar markers and fixed field widths of the thermo.inp format."""

HEADER_MARKER = "thermo"
END_MARKER = "END"
COMMENT_PREFIX = "!"

HEADER_BREAKPOINT_COUNT = 4

COEFFICIENT_COUNT = 7  # a1..a7
INTEGRATION_CONSTANT_COUNT = 2  # b1, b2

# Coefficient slots filled from the second and third line of a range block.
LINE2_COEFFICIENTS = 5
LINE3_COEFFICIENTS = 2
# Line 3 carries integration constants only when it has at least this many tokens.
MIN_TOKENS_FOR_CONSTANTS = 4
