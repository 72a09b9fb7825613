"""Terminal styling and prompt contract constants."""

BOLD = "\033[1m"
CYAN = "\033[36m"
YELLOW = "\033[33m"
RESET = "\033[0m"

# Line prefixes the model is told to emit for non-command content.
EXPLAIN_SENTINEL = "# explain:"
CLARIFY_SENTINEL = "# clarify:"
