# src/llmcontext/utils/tokenizer.py
import tiktoken

from llmcontext.config import TOKENS_PER_WORD
from llmcontext.errors import AggregatorError

class Tokenizer:
    _encoding = None

    @classmethod
    def get_encoding(cls):
        if cls._encoding is None:
            try:
                try:
                    cls._encoding = tiktoken.get_encoding("cl100k_base")
                except ValueError:
                    # Fallback for tiktoken builds without cl100k_base
                    cls._encoding = tiktoken.get_encoding("p50k_base")
            except (OSError, ValueError) as e:
                # The BPE file is downloaded on first use; offline runs land here.
                raise AggregatorError(f"Could not load tiktoken encoding ({e})") from e
        return cls._encoding

    @staticmethod
    def count_words(text: str) -> int:
        """Number of whitespace-delimited tokens."""
        return len(text.split())

    @staticmethod
    def estimate(word_count: int) -> int:
        """Heuristic token estimate from a word count. Not an exact count."""
        return round(word_count * TOKENS_PER_WORD)

    @staticmethod
    def count(text: str) -> int:
        """Exact token count under the cl100k_base encoding."""
        encoding = Tokenizer.get_encoding()
        return len(encoding.encode(text, disallowed_special=()))
