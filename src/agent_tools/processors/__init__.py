"""Post-processors that reshape oversized tool results before they re-enter a conversation."""

from .base import BaseProcessor, ResultPipeline, ResultProcessor, estimate_size, is_large, preserve_structure
from .options import SampleOptions, SummarizeOptions, TruncateOptions
from .sample import Sample
from .summarize import Shape, Summarize, classify
from .truncate import Truncate

__all__ = [
    "BaseProcessor",
    "ResultPipeline",
    "ResultProcessor",
    "estimate_size",
    "is_large",
    "preserve_structure",
    "SampleOptions",
    "SummarizeOptions",
    "TruncateOptions",
    "Sample",
    "Shape",
    "Summarize",
    "classify",
    "Truncate",
]
