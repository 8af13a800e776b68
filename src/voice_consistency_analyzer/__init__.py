"""Voice Consistency Analyzer - check new copy against an established writing voice."""

__version__ = "0.1.0"
