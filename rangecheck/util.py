"""Default settings shared by the range predicates.

Both bounds of a range are inclusive unless told otherwise. A flag passed
as ``None`` falls back to these values when the range is constructed.
"""

DEFAULT_START_INCLUSIVE = True
DEFAULT_END_INCLUSIVE = True
