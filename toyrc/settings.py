# toyrc global settings

# Probabilities are multiples of 1/16 (1 << PROB_BITS).
PROB_BITS = 4
PROB_MIN = 1
PROB_MAX = 15
PROB_START = 8        # 8/16 = 50%, also where adaptive mode starts
ADAPTIVE = -1         # sentinel; a negative probability is otherwise invalid

# Decimal interval, four digits of precision
WIDTH_INIT = 9999
RENORM_THRESHOLD = 1000
CARRY_THRESHOLD = 9000
LOW_MODULUS = 10000
HEADER_DIGITS = 4
FLUSH_STEPS = 5

MARKER = ord("0")

# Blog alphabet: 'b' (blue) is the low symbol, 'g' (green) the high one
SYMBOL_LETTERS = "bg"
