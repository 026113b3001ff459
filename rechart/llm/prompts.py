"""Prompts for chart-data and diagram completions."""

CHART_SYSTEM_PROMPT = (
    "You are a data processing expert that converts raw data into chart-ready "
    "formats. Always respond with valid JSON only."
)

DIAGRAM_SYSTEM_PROMPT = (
    "You are a Mermaid diagram expert that creates valid diagram syntax. "
    "Always respond with valid JSON only."
)


CHART_PROMPT = """You are a data processing expert. I need you to process the following data for a {chart_type} chart.

{data_label}
{data}

Please return a JSON response with the following structure:
{{
  "processedData": {{
    "chartData": [array of objects with consistent keys],
    "config": {{
      "xKey": "string - the key for x-axis data",
      "yKey": "string - the key for y-axis data"
    }},
    "title": "string - descriptive title for the chart",
    "description": "string - brief description of the data",
    "insights": "string - key insights from the data"
  }}
}}

Requirements:
1. For {chart_type} charts, ensure the data format is appropriate
2. Convert all data to proper types (numbers for values, strings for labels)
3. Handle missing or invalid data gracefully
4. Provide meaningful insights about the data patterns
5. Ensure the chartData array has consistent object structure
6. For pie charts, make sure each object has a name and value field
7. For other charts, ensure x and y axis data is properly formatted

Return ONLY the JSON response, no additional text."""


DIAGRAM_PROMPT = """You are a Mermaid diagram expert. I need you to create a {diagram_type} diagram based on this description:

Description: {description}

Please return a JSON response with the following structure:
{{
  "processedData": {{
    "mermaidCode": "string - valid Mermaid syntax for the diagram",
    "title": "string - descriptive title for the diagram",
    "description": "string - brief description of what the diagram shows",
    "diagramType": "{diagram_type}"
  }}
}}

Requirements for {diagram_type} diagrams:
{requirements}

Return ONLY the JSON response, no additional text."""


SEQUENCE_REQUIREMENTS = """- Use "sequenceDiagram" as the first line
- Define participants with "participant Name as DisplayName"
- Use arrows: ->> for sync calls, -->> for responses, -x for async
- Use proper syntax: "ParticipantA->>ParticipantB: Message"
- No numbers or special characters in participant names
- Keep messages clear and concise"""

GENERIC_REQUIREMENTS = """- Generate valid Mermaid syntax for a {diagram_type}
- Make sure the syntax is correct and will render properly
- Include appropriate labels and connections
- Keep the diagram clear and well-organized
- Use proper Mermaid syntax for {diagram_type} diagrams"""


def build_chart_prompt(data: str, chart_type: str, is_csv: bool) -> str:
    """User prompt asking for a chart payload."""
    return CHART_PROMPT.format(
        chart_type=chart_type,
        data_label="CSV Data:" if is_csv else "User Description:",
        data=data,
    )


def build_diagram_prompt(description: str, diagram_type: str) -> str:
    """User prompt asking for a diagram payload."""
    if diagram_type == "sequence":
        requirements = SEQUENCE_REQUIREMENTS
    else:
        requirements = GENERIC_REQUIREMENTS.format(diagram_type=diagram_type)

    return DIAGRAM_PROMPT.format(
        diagram_type=diagram_type,
        description=description,
        requirements=requirements,
    )
