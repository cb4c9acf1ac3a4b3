"""Common literal values used across resume_artboard.

These constants keep the custom section prefix and the rating scale
centralized so the dispatcher, the rating helper and tests share one value.
Intended for internal use within the resume_artboard package.

Examples
--------
>>> from resume_artboard import _constants
>>> _constants.CUSTOM_SECTION_PREFIX + "abc123"
'custom.abc123'
"""

CUSTOM_SECTION_PREFIX = "custom."
RATING_SCALE = 5

