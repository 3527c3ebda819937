"""Customer dashboard data pipeline: sheet loading, normalization and joins."""

__version__ = "0.1.0"
