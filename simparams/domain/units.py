# Unit Constants

# Time
SECONDS_PER_HOUR = 3600

# Theoretical platform sizes (bits)
INTEGER_SIZE = 32
DOUBLE_SIZE = 64
BOOLEAN_SIZE = 1
ENUM_SIZE = 8

# Data sizes
BITS_PER_BYTE = 8
BYTES_PER_KB = 1024
BITS_PER_KB = BYTES_PER_KB * BITS_PER_BYTE
BYTES_PER_MB = BYTES_PER_KB * 1024

# Float equality: two values a and b are equal when abs(a - b) < precision
DOUBLE_EQUAL_PRECISION = 1e-10
DOUBLE_EQUAL_WEAK_PRECISION = 1e-6

# Display formats, used as ONE_DEC.format(value)
ZERO_DEC = "{:.0f}"
ONE_DEC = "{:.1f}"
TWO_DEC = "{:.2f}"
TEN_DEC = "{:.10f}"
LEADING_ZEROES = "{:08.0f}"  # width 8 including any sign, zero padded
