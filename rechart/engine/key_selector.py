"""Heuristic axis selection and chart payload construction for CSV data."""

from dataclasses import dataclass

from rechart.dsl.schema import ChartConfig, ChartPayload
from rechart.engine.csv_parser import TabularRecord
from rechart.engine.types import display_name


@dataclass(frozen=True)
class KeySelection:
    """Chosen axis keys plus the candidate lists they came from."""

    x_key: str
    y_key: str
    numeric_keys: list[str]
    string_keys: list[str]


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def select_keys(record: TabularRecord) -> KeySelection:
    """Pick category and measure keys from coerced columns.

    A column counts as numeric when at least one row holds a number in it,
    and as textual only when every row holds a string. The first textual
    column becomes the x key and the first numeric column the y key, with
    header order as the fallback.

    Args:
        record: Parsed CSV.

    Returns:
        KeySelection for the record.
    """
    headers = record.headers

    numeric_keys = [
        header for header in headers
        if any(_is_number(value) for value in record.column(header))
    ]
    string_keys = [
        header for header in headers
        if all(isinstance(value, str) for value in record.column(header))
    ]

    x_key = string_keys[0] if string_keys else headers[0]
    if numeric_keys:
        y_key = numeric_keys[0]
    elif len(headers) > 1:
        y_key = headers[1]
    else:
        y_key = headers[0]

    return KeySelection(
        x_key=x_key,
        y_key=y_key,
        numeric_keys=numeric_keys,
        string_keys=string_keys,
    )


def build_chart_payload(record: TabularRecord, chart_type: str) -> ChartPayload:
    """Build a chart payload from parsed CSV.

    Title, description and insights are structural text only; no
    statistics are computed.
    """
    keys = select_keys(record)

    return ChartPayload(
        chart_data=[dict(row) for row in record.rows],
        config=ChartConfig(x_key=keys.x_key, y_key=keys.y_key),
        title=f"{display_name(chart_type)} Chart",
        description=f"Visualization of {', '.join(record.headers)} data",
        insights=(
            f"Chart shows relationship between {keys.x_key} and {keys.y_key}. "
            f"Data contains {len(record.rows)} records."
        ),
    )
