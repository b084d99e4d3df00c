"""Doc extractors — leading comment blocks and per-function help blocks."""

from .comments import extract_comment_docs
from .helpblocks import extract_help_docs

__all__ = ["extract_comment_docs", "extract_help_docs"]
