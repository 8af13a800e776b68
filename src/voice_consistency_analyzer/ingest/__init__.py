"""Sample ingestion - load writing samples from disk."""

from .loader import load_sample

__all__ = ["load_sample"]
