# src/llmcontext/config.py

DEFAULT_ROOT_DIR = "docs"
DEFAULT_OUTPUT_FILE = "static/llm-context.md"
DEFAULT_EXTENSIONS = {".md"}
DEFAULT_TITLE = "Project"
DEFAULT_IGNORE_FILE = ".llmignore"

# Rough heuristic: 1 word ~ 1.3 tokens
TOKENS_PER_WORD = 1.3

TOC_SEPARATOR = " / "
SECTION_SEPARATOR = " > "

READ_ERROR_POLICIES = ("abort", "skip")
