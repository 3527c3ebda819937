"""JSON file sink for exporting snapshots."""

import json
from pathlib import Path
from typing import Any

from customer_hub.models.base import LoadResult
from customer_hub.sinks.serialization import to_dict


class JsonFileSink:
    """Output records to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_snapshot(self, result: LoadResult) -> Path:
        """Write a snapshot to ``customers.json`` with its fallback flag."""
        file_path = self.output_dir / "customers.json"
        self._dump(
            file_path,
            {
                "used_fallback": result.used_fallback,
                "customers": [to_dict(customer) for customer in result.customers],
            },
        )
        self._counts["customers"] = len(result.customers)
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")

    def _dump(self, file_path: Path, data: Any) -> None:
        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            else:
                json.dump(data, f, ensure_ascii=False, default=str)
