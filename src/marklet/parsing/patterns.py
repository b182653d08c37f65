"""Pre-compiled patterns shared by the block and inline parsers.

Every pattern is used through ``match``/``fullmatch``/``search`` with an
explicit position, never through shared cursor state, so the same compiled
object is safe to reuse from any frame or thread.

Line patterns are applied to a single line with no trailing newline.
"""

import re

# =============================================================================
# Block patterns
# =============================================================================

# ```lang  (language may be empty; trailing whitespace allowed)
FENCE_OPEN = re.compile(r"```([\w+#.-]*)\s*")
FENCE_CLOSE = re.compile(r"```\s*")

# ---, ***, ___ (3+ of the same character, nothing else)
HORIZONTAL_RULE = re.compile(r"([*\-_])\1{2,}")

# One quote marker plus at most one following space
QUOTE_MARKER = re.compile(r"> ?")

# # Heading ... ###### Heading
HEADING = re.compile(r"(#{1,6})\s+(.*)")

# List items, matched against the raw line so the indent group is kept.
TASK_ITEM = re.compile(r"(\s*)([-*+])\s+\[([ xX])\](?:\s+(.*))?")
# At most 9 digits (CommonMark limit)
ORDERED_ITEM = re.compile(r"(\s*)(\d{1,9})\.\s+(.*)")
UNORDERED_ITEM = re.compile(r"(\s*)([-*+])\s+(.*)")

# |---|:---:|---:| (leading/trailing pipes optional)
TABLE_SEPARATOR = re.compile(r"\|?\s*:?-+:?\s*(?:\|\s*:?-+:?\s*)*\|?")

# =============================================================================
# Inline patterns (atomic spans)
# =============================================================================

# Bracket text may not contain another "[": the innermost opener wins.
IMAGE = re.compile(r"!\[([^\[\]]*)\]\(([^)]+)\)")
LINK = re.compile(r"\[([^\[\]]+)\]\(([^)]+)\)")
CODE_SPAN = re.compile(r"`([^`]+)`")

# Placeholder for a backslash-escaped character during inline lexing
ESCAPE_SENTINEL = "\x00"
