"""Output sinks for exporting loaded snapshots."""

from customer_hub.sinks.console import ConsoleSink
from customer_hub.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
