"""Canned datasets used when there is no real data to chart.

Everything here is a fixed literal: the same chart or diagram type always
yields an identical payload.
"""

from rechart.dsl.schema import ChartConfig, ChartPayload, DiagramPayload
from rechart.engine.diagram_templates import diagram_template
from rechart.engine.types import ChartType, display_name


# chart type -> (rows, x key, y key, title, description, insights)
CHART_SAMPLES = {
    ChartType.BAR: (
        [
            {"category": "Category A", "value": 100},
            {"category": "Category B", "value": 200},
            {"category": "Category C", "value": 150},
            {"category": "Category D", "value": 300},
        ],
        "category",
        "value",
        "Sample Bar Chart",
        "Sample bar chart data",
        "Category D has the highest value, followed by Category B.",
    ),
    ChartType.LINE: (
        [
            {"month": "Jan", "value": 100},
            {"month": "Feb", "value": 120},
            {"month": "Mar", "value": 140},
            {"month": "Apr", "value": 160},
            {"month": "May", "value": 180},
            {"month": "Jun", "value": 200},
        ],
        "month",
        "value",
        "Sample Line Chart",
        "Monthly trend data",
        "Values show a steady increasing trend over the months.",
    ),
    ChartType.PIE: (
        [
            {"name": "Segment A", "value": 30},
            {"name": "Segment B", "value": 40},
            {"name": "Segment C", "value": 20},
            {"name": "Segment D", "value": 10},
        ],
        "name",
        "value",
        "Sample Pie Chart",
        "Distribution by segment",
        "Segment B represents the largest portion at 40%.",
    ),
    ChartType.AREA: (
        [
            {"period": "Week 1", "value": 100},
            {"period": "Week 2", "value": 150},
            {"period": "Week 3", "value": 130},
            {"period": "Week 4", "value": 180},
            {"period": "Week 5", "value": 220},
        ],
        "period",
        "value",
        "Sample Area Chart",
        "Weekly cumulative data",
        "Values show an overall increasing trend with a slight dip in Week 3.",
    ),
    ChartType.SCATTER: (
        [
            {"x": 10, "y": 20},
            {"x": 15, "y": 25},
            {"x": 20, "y": 30},
            {"x": 25, "y": 35},
            {"x": 30, "y": 40},
            {"x": 35, "y": 45},
            {"x": 40, "y": 50},
        ],
        "x",
        "y",
        "Sample Scatter Plot",
        "Correlation between X and Y",
        "There appears to be a positive correlation between X and Y variables.",
    ),
    ChartType.TREND: (
        [
            {"quarter": "Q1 2023", "value": 100},
            {"quarter": "Q2 2023", "value": 120},
            {"quarter": "Q3 2023", "value": 140},
            {"quarter": "Q4 2023", "value": 160},
            {"quarter": "Q1 2024", "value": 180},
            {"quarter": "Q2 2024", "value": 200},
        ],
        "quarter",
        "value",
        "Sample Trend Chart",
        "Quarterly trend analysis",
        "Values show a consistent upward trend across all quarters.",
    ),
}

GENERIC_SAMPLE = (
    [
        {"label": "Item 1", "value": 100},
        {"label": "Item 2", "value": 200},
        {"label": "Item 3", "value": 150},
        {"label": "Item 4", "value": 300},
    ],
    "label",
    "value",
    "Sample Data Visualization",
    "Sample data for visualization",
    "Item 4 has the highest value, followed by Item 2.",
)

# Returned when even CSV fallback processing cannot make sense of the input
DEFAULT_SAMPLE = (
    [
        {"name": "Data 1", "value": 100},
        {"name": "Data 2", "value": 200},
        {"name": "Data 3", "value": 150},
    ],
    "name",
    "value",
    "Default Chart",
    "Default sample data",
    "Unable to process the provided data. Please check the format and try again.",
)


def _build(sample: tuple) -> ChartPayload:
    rows, x_key, y_key, title, description, insights = sample
    return ChartPayload(
        chart_data=[dict(row) for row in rows],
        config=ChartConfig(x_key=x_key, y_key=y_key),
        title=title,
        description=description,
        insights=insights,
    )


def sample_chart(chart_type: str) -> ChartPayload:
    """Canned chart for a chart type; unknown types get a generic sample."""
    kind = ChartType.lookup(chart_type)
    if kind is None:
        return _build(GENERIC_SAMPLE)
    return _build(CHART_SAMPLES[kind])


def default_chart() -> ChartPayload:
    """Last-resort chart for input that could not be processed at all."""
    return _build(DEFAULT_SAMPLE)


def sample_diagram(diagram_type: str, description: str | None = "") -> DiagramPayload:
    """Template diagram for a diagram type.

    The declared type is echoed back unchanged even when it is unknown and
    the flowchart template is used in its place.
    """
    diagram_type = diagram_type or ""
    return DiagramPayload(
        mermaid_code=diagram_template(diagram_type, description),
        title=f"{display_name(diagram_type)} Diagram",
        description=f"Generated {diagram_type} diagram based on: {description or ''}",
        diagram_type=diagram_type,
    )
