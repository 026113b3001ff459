"""Tests for canned chart samples and Mermaid diagram templates."""

import pytest

from rechart.engine.diagram_templates import (
    EXAMPLES,
    MINDMAP_ROOT_DEFAULT,
    TEMPLATES,
    diagram_example,
    diagram_template,
    mindmap_root,
)
from rechart.engine.samples import default_chart, sample_chart, sample_diagram
from rechart.engine.types import ChartType, DiagramType, display_name


class TestChartSamples:
    """Tests for per-type chart samples."""

    @pytest.mark.parametrize("chart_type", [t.value for t in ChartType])
    def test_sample_keys_exist_in_rows(self, chart_type):
        """Test each sample's axis keys appear in every record."""
        payload = sample_chart(chart_type)

        assert payload.chart_data
        for row in payload.chart_data:
            assert payload.config.x_key in row
            assert payload.config.y_key in row

    def test_pie_sample(self):
        """Test the pie sample literal."""
        payload = sample_chart("pie")

        assert payload.title == "Sample Pie Chart"
        assert payload.config.x_key == "name"
        assert payload.config.y_key == "value"
        assert [row["value"] for row in payload.chart_data] == [30, 40, 20, 10]
        assert payload.insights == "Segment B represents the largest portion at 40%."

    def test_samples_are_deterministic(self):
        """Test two calls give byte-identical payloads."""
        assert sample_chart("pie").model_dump_json() == sample_chart("pie").model_dump_json()

    def test_samples_do_not_share_rows(self):
        """Test callers cannot mutate the canned literal."""
        first = sample_chart("bar")
        first.chart_data[0]["value"] = -1

        assert sample_chart("bar").chart_data[0]["value"] == 100

    def test_unknown_type_gets_generic_sample(self):
        """Test unknown chart types fall back to the generic sample."""
        payload = sample_chart("radar")

        assert payload.title == "Sample Data Visualization"
        assert payload.config.x_key == "label"
        assert len(payload.chart_data) == 4

    def test_default_chart(self):
        """Test the last-resort chart."""
        payload = default_chart()

        assert payload.title == "Default Chart"
        assert [row["name"] for row in payload.chart_data] == ["Data 1", "Data 2", "Data 3"]
        assert payload.insights == (
            "Unable to process the provided data. Please check the format and try again."
        )


class TestDiagramTemplates:
    """Tests for the fallback template bank."""

    @pytest.mark.parametrize("diagram_type", list(DiagramType))
    def test_every_type_has_template(self, diagram_type):
        """Test each supported type has non-empty Mermaid source."""
        assert TEMPLATES[diagram_type].strip()
        assert diagram_template(diagram_type.value, "anything").strip()

    def test_unknown_type_uses_flowchart(self):
        """Test unknown types get the flowchart template."""
        assert diagram_template("venn", "x") == TEMPLATES[DiagramType.FLOWCHART]

    def test_sequence_template_header(self):
        """Test the sequence template starts with its Mermaid keyword."""
        assert diagram_template("sequence").startswith("sequenceDiagram")

    def test_mindmap_root_from_description(self):
        """Test the mindmap root is the first two words."""
        code = diagram_template("mindmap", "Project planning for Q3")

        assert "root((Project planning))" in code

    def test_mindmap_root_default(self):
        """Test an empty description gives the default root label."""
        code = diagram_template("mindmap", "")

        assert f"root(({MINDMAP_ROOT_DEFAULT}))" in code

    def test_mindmap_root_words(self):
        """Test root label extraction."""
        assert mindmap_root("one") == "one"
        assert mindmap_root("  spaced   out words ") == "spaced out"
        assert mindmap_root(None) == MINDMAP_ROOT_DEFAULT
        assert mindmap_root("   ") == MINDMAP_ROOT_DEFAULT

    def test_examples_cover_every_type(self):
        """Test the starter bank has an entry per type."""
        assert set(EXAMPLES) == set(DiagramType)

    def test_example_unknown_type(self):
        """Test unknown types have no starter text."""
        assert diagram_example("venn") == ""
        assert diagram_example("gantt").startswith("gantt")


class TestSampleDiagram:
    """Tests for template-backed diagram payloads."""

    def test_flowchart(self):
        """Test title and description wording."""
        payload = sample_diagram("flowchart", "Login flow")

        assert payload.title == "Flowchart Diagram"
        assert payload.description == "Generated flowchart diagram based on: Login flow"
        assert payload.diagram_type == "flowchart"
        assert payload.mermaid_code == TEMPLATES[DiagramType.FLOWCHART]

    def test_unknown_type_echoed(self):
        """Test the declared type is echoed even when unknown."""
        payload = sample_diagram("venn", "Sets")

        assert payload.diagram_type == "venn"
        assert payload.title == "Venn Diagram"
        assert payload.mermaid_code == TEMPLATES[DiagramType.FLOWCHART]

    def test_deterministic(self):
        """Test identical inputs give identical payloads."""
        first = sample_diagram("mindmap", "Team goals")
        second = sample_diagram("mindmap", "Team goals")

        assert first.model_dump_json() == second.model_dump_json()


class TestTypes:
    """Tests for type lookup helpers."""

    def test_lookup(self):
        """Test known and unknown identifiers."""
        assert ChartType.lookup("bar") is ChartType.BAR
        assert ChartType.lookup("Bar") is None
        assert ChartType.lookup(None) is None
        assert DiagramType.lookup("gitgraph") is DiagramType.GITGRAPH

    def test_display_name(self):
        """Test only the first character changes."""
        assert display_name("bar") == "Bar"
        assert display_name("gitgraph") == "Gitgraph"
        assert display_name("") == ""
