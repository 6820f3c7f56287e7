"""
Rulebook extraction for sotdl-gen.

This package contains:
- Tier templates per path category (patterns)
- Field parsers that fold captured text into Level records (fields)
- The ExtractionEngine that drives both over a whole document (engine)
- The pdftotext collaborator that turns the source PDF into text (pdftotext)
"""

from .engine import ExtractionEngine
from .patterns import LEVEL_PATTERNS, compile_patterns
from .pdftotext import pdf_to_text

__all__ = [
    "ExtractionEngine",
    "LEVEL_PATTERNS",
    "compile_patterns",
    "pdf_to_text",
]
