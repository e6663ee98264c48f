"""Batch retrieval of declared dependencies."""

from .models import FetchResult, FetchSummary
from .orchestrator import Fetcher, clean_output_dir
from .protocol import TextFetcher

__all__ = [
    "FetchResult",
    "FetchSummary",
    "Fetcher",
    "TextFetcher",
    "clean_output_dir",
]
