"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ABC_PREFIXES = ("A", "B", "C")
DEFAULT_ABC_THRESHOLD = 11171

INCREMENT_E = 1
INCREMENT_G = 10
INCREMENT_OTHER = 100

DEFAULT_SQLITE_TIMEOUT = 5.0
MAX_NAME_LENGTH = 255

# Stored values are signed 64-bit integers (BIGINT / SQLite INTEGER).
MIN_VALUE = -(2**63)
MAX_VALUE = 2**63 - 1
