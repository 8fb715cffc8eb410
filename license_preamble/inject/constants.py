"""Constants for the preamble injector."""

# File extension (no dot, case-sensitive) -> line comment prefix
COMMENT_PREFIXES = {
    "rs": "//",
    "swift": "//",
    "js": "//",
    "ts": "//",
    "tsx": "//",
    "jsx": "//",
}

# Separates the stamped block from the original file content
BLOCK_SEPARATOR = "\n\n"
