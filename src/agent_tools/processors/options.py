"""Validated configuration for the result processors."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_SIZE = 1_000
DEFAULT_MARKER = "... [truncated]"
DEFAULT_SAMPLE_SIZE = 5
DEFAULT_SUMMARY_SAMPLE_SIZE = 3
DEFAULT_MAX_SUMMARY_SIZE = 500
DEFAULT_MAX_RECURSION_DEPTH = 3

SampleStrategy = Literal["first", "random", "distributed"]
SummarizeStrategy = Literal["auto", "list", "map", "text"]


class TruncateOptions(BaseModel):
    """
    Attributes:
        max_size: Maximum characters, items or keys kept.
        marker: Text appended to anything that was cut.
    """

    model_config = ConfigDict(frozen=True)

    max_size: int = Field(default=DEFAULT_MAX_SIZE, gt=0)
    marker: str = DEFAULT_MARKER


class SampleOptions(BaseModel):
    """
    Attributes:
        sample_size: Number of items kept from a long list.
        strategy: How the items are picked.
        seed: Seed for the ``random`` strategy. None draws fresh randomness.
    """

    model_config = ConfigDict(frozen=True)

    sample_size: int = Field(default=DEFAULT_SAMPLE_SIZE, gt=0)
    strategy: SampleStrategy = "first"
    seed: Optional[int] = None


class SummarizeOptions(BaseModel):
    """
    Attributes:
        strategy: ``auto`` picks by payload shape, the others only summarize matching payloads.
        sample_size: Items or keys sampled per level.
        max_summary_size: Ceiling in serialized bytes for a single summary.
        max_recursion_depth: Nesting level past which raw sample values are kept.
    """

    model_config = ConfigDict(frozen=True)

    strategy: SummarizeStrategy = "auto"
    sample_size: int = Field(default=DEFAULT_SUMMARY_SAMPLE_SIZE, gt=0)
    max_summary_size: int = Field(default=DEFAULT_MAX_SUMMARY_SIZE, gt=0)
    max_recursion_depth: int = Field(default=DEFAULT_MAX_RECURSION_DEPTH, ge=0)
