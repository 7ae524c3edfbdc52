"""Export services for property analyses.

Tabulates metrics with pandas and saves analyses to JSON files.
"""

import json
import os
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from propvest.core.logging import get_logger
from propvest.core.settings import get_settings
from propvest.domain.calculator.metrics import analyze_property
from propvest.domain.calculator.offer import assess_offer
from propvest.domain.models.property import Property

log = get_logger(__name__)


def metrics_frame(properties: Iterable[Property]) -> pd.DataFrame:
    """One row per property with its headline fields and every metric.

    Not-applicable ratios appear as missing values.
    """
    rows = []
    for prop in properties:
        rows.append({
            "id": prop.id,
            "address": prop.address,
            "price": prop.price,
            "is_favorite": prop.is_favorite,
            **analyze_property(prop).model_dump(),
        })
    frame = pd.DataFrame(rows)
    if not frame.empty:
        frame = frame.set_index("id")
    return frame


class PortfolioExporter:
    """Handles exporting of property analyses."""

    def __init__(self, output_dir: Optional[str] = None):
        """Initialize exporter.

        Args:
            output_dir: Directory where analyses will be saved.
                Defaults to the export_dir setting.
        """
        self.output_dir = output_dir or get_settings().export_dir

    def _ensure_dir(self):
        if not os.path.exists(self.output_dir):
            os.makedirs(self.output_dir)
            log.info("created_output_directory", path=self.output_dir)

    def build_payload(
        self,
        properties: List[Property],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Assemble the JSON document for a list of properties."""
        records = []
        for prop in properties:
            metrics = analyze_property(prop)
            records.append({
                "property": prop.model_dump(),
                "metrics": metrics.model_dump(),
                "offer": assess_offer(prop, metrics).model_dump(mode="json"),
            })

        return {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "count": len(records),
                **(metadata or {}),
            },
            "properties": records,
        }

    def save(
        self,
        properties: List[Property],
        prefix: str = "portfolio",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Save analyses to a JSON file.

        Args:
            properties: Properties to export.
            prefix: Filename prefix.
            metadata: Optional metadata to include in the file.

        Returns:
            Path to the saved file.
        """
        self._ensure_dir()
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filepath = os.path.join(self.output_dir, f"{prefix}_{timestamp}.json")
        payload = self.build_payload(properties, metadata)

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.error("export_save_failed", path=filepath, error=str(e))
            raise

        log.info("export_saved", path=filepath, count=len(properties))
        return filepath
