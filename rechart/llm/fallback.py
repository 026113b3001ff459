"""Deterministic, network-free payload generation."""

import logging

from rechart.dsl.schema import ChartPayload, DiagramPayload
from rechart.engine.csv_parser import EmptyInputError, parse_csv
from rechart.engine.key_selector import build_chart_payload
from rechart.engine.samples import default_chart, sample_chart, sample_diagram

logger = logging.getLogger(__name__)


class FallbackProcessor:
    """Builds payloads when no model output is available.

    CSV input is parsed and charted heuristically; free-form descriptions
    get the canned sample for the chart type; diagrams get the template
    for the diagram type.
    """

    def process_chart(self, data: str, chart_type: str, is_csv: bool) -> ChartPayload:
        """Build a chart payload without calling a model.

        Args:
            data: CSV text or a natural-language description.
            chart_type: Requested chart type.
            is_csv: Whether data is CSV.

        Returns:
            ChartPayload; the default chart when CSV input is unusable.
        """
        if not is_csv:
            return sample_chart(chart_type)

        try:
            record = parse_csv(data)
        except EmptyInputError as e:
            logger.warning(f"Fallback CSV processing failed: {e}")
            return default_chart()

        return build_chart_payload(record, chart_type)

    def process_diagram(self, description: str, diagram_type: str) -> DiagramPayload:
        """Build a diagram payload from the template bank."""
        return sample_diagram(diagram_type, description)
