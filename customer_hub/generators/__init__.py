"""Sample sheet generation for development and demos."""

from customer_hub.generators.sheets import SampleSheetGenerator

__all__ = ["SampleSheetGenerator"]
