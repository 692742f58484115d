"""Global configuration for modarith."""

import os

# ---------- Default integer type ----------
# Used whenever a caller omits ``kind``.  Any name accepted by
# ``modarith.integers.resolve_integer_type`` works, e.g. "i64" or "u32".
DEFAULT_INTEGER_TYPE = os.environ.get("MODARITH_DEFAULT_INTEGER_TYPE", "bigint")

# ---------- Fixed-width catalogue ----------
STANDARD_WIDTHS = (8, 16, 32, 64, 128)
