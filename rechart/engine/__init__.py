# rechart data-shaping engine

from .types import ChartType, DiagramType
from .csv_parser import EmptyInputError, TabularRecord, parse_csv
from .coercion import coerce_cell, is_numeric
from .key_selector import KeySelection, build_chart_payload, select_keys
from .samples import default_chart, sample_chart, sample_diagram
from .diagram_templates import diagram_example, diagram_template

__all__ = [
    'ChartType',
    'DiagramType',
    'EmptyInputError',
    'TabularRecord',
    'parse_csv',
    'coerce_cell',
    'is_numeric',
    'KeySelection',
    'build_chart_payload',
    'select_keys',
    'default_chart',
    'sample_chart',
    'sample_diagram',
    'diagram_example',
    'diagram_template',
]
