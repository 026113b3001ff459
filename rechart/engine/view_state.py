"""Explicit view-state machine for the chart and diagram workflow.

The workflow runs landing -> selection -> input -> visualization, with the
dashboard and the saved-record lists reachable from anywhere. Each event is
a method returning a new ViewState; the current state is never mutated.
"""

from dataclasses import dataclass, replace
from enum import Enum

from rechart.dsl.schema import ChartPayload, DiagramPayload


class View(str, Enum):
    """Screens of the application."""

    LANDING = "landing"
    DASHBOARD = "dashboard"
    CHARTS = "charts"
    DIAGRAMS = "diagrams"
    CHART_SELECTION = "chart-selection"
    DATA_INPUT = "data-input"
    VISUALIZATION = "visualization"
    DIAGRAM_SELECTION = "diagram-selection"
    DIAGRAM_INPUT = "diagram-input"
    DIAGRAM_VISUALIZATION = "diagram-visualization"


class ViewEvent(str, Enum):
    """Events that move between views."""

    GET_STARTED = "get_started"
    NAVIGATE = "navigate"
    CREATE_CHART = "create_chart"
    SELECT_CHART = "select_chart"
    CHART_PROCESSED = "chart_processed"
    VIEW_SAVED_CHART = "view_saved_chart"
    CREATE_DIAGRAM = "create_diagram"
    SELECT_DIAGRAM = "select_diagram"
    DIAGRAM_PROCESSED = "diagram_processed"
    VIEW_SAVED_DIAGRAM = "view_saved_diagram"
    START_OVER = "start_over"


# Views reachable through plain navigation
NAVIGABLE_VIEWS = frozenset({View.DASHBOARD, View.CHARTS, View.DIAGRAMS})

# event -> (allowed source views, None meaning any; target view, None meaning caller-chosen)
TRANSITIONS: dict[ViewEvent, tuple[frozenset[View] | None, View | None]] = {
    ViewEvent.GET_STARTED: (frozenset({View.LANDING}), View.DASHBOARD),
    ViewEvent.NAVIGATE: (None, None),
    ViewEvent.CREATE_CHART: (None, View.CHART_SELECTION),
    ViewEvent.SELECT_CHART: (frozenset({View.CHART_SELECTION}), View.DATA_INPUT),
    ViewEvent.CHART_PROCESSED: (frozenset({View.DATA_INPUT}), View.VISUALIZATION),
    ViewEvent.VIEW_SAVED_CHART: (None, View.VISUALIZATION),
    ViewEvent.CREATE_DIAGRAM: (None, View.DIAGRAM_SELECTION),
    ViewEvent.SELECT_DIAGRAM: (frozenset({View.DIAGRAM_SELECTION}), View.DIAGRAM_INPUT),
    ViewEvent.DIAGRAM_PROCESSED: (frozenset({View.DIAGRAM_INPUT}), View.DIAGRAM_VISUALIZATION),
    ViewEvent.VIEW_SAVED_DIAGRAM: (None, View.DIAGRAM_VISUALIZATION),
    ViewEvent.START_OVER: (
        frozenset({View.VISUALIZATION, View.DIAGRAM_VISUALIZATION}),
        View.DASHBOARD,
    ),
}


class InvalidTransition(ValueError):
    """Raised when an event is not allowed from the current view."""

    def __init__(self, event: ViewEvent, view: View):
        super().__init__(f"Event '{event.value}' is not allowed from view '{view.value}'")
        self.event = event
        self.view = view


@dataclass(frozen=True)
class ViewState:
    """Current view plus the selection and payload it is working on."""

    view: View = View.LANDING
    chart_type: str | None = None
    chart_payload: ChartPayload | None = None
    diagram_type: str | None = None
    diagram_payload: DiagramPayload | None = None
    saved_record_id: str | None = None

    def _move(self, event: ViewEvent, target: View | None = None, **changes) -> "ViewState":
        sources, default_target = TRANSITIONS[event]
        if sources is not None and self.view not in sources:
            raise InvalidTransition(event, self.view)
        return replace(self, view=target or default_target, **changes)

    def _cleared(self) -> dict:
        return {
            "chart_type": None,
            "chart_payload": None,
            "diagram_type": None,
            "diagram_payload": None,
            "saved_record_id": None,
        }

    def get_started(self) -> "ViewState":
        return self._move(ViewEvent.GET_STARTED)

    def navigate(self, view: View | str) -> "ViewState":
        """Jump to the dashboard or one of the saved-record lists."""
        view = View(view)
        if view not in NAVIGABLE_VIEWS:
            raise InvalidTransition(ViewEvent.NAVIGATE, self.view)
        return self._move(ViewEvent.NAVIGATE, target=view, **self._cleared())

    def create_chart(self) -> "ViewState":
        return self._move(ViewEvent.CREATE_CHART, **self._cleared())

    def select_chart(self, chart_type: str) -> "ViewState":
        return self._move(ViewEvent.SELECT_CHART, chart_type=chart_type)

    def chart_processed(self, payload: ChartPayload) -> "ViewState":
        return self._move(ViewEvent.CHART_PROCESSED, chart_payload=payload)

    def view_saved_chart(self, record_id: str, chart_type: str, payload: ChartPayload) -> "ViewState":
        return self._move(
            ViewEvent.VIEW_SAVED_CHART,
            chart_type=chart_type,
            chart_payload=payload,
            saved_record_id=record_id,
        )

    def create_diagram(self) -> "ViewState":
        return self._move(ViewEvent.CREATE_DIAGRAM, **self._cleared())

    def select_diagram(self, diagram_type: str) -> "ViewState":
        return self._move(ViewEvent.SELECT_DIAGRAM, diagram_type=diagram_type)

    def diagram_processed(self, payload: DiagramPayload) -> "ViewState":
        return self._move(ViewEvent.DIAGRAM_PROCESSED, diagram_payload=payload)

    def view_saved_diagram(
        self, record_id: str, diagram_type: str, payload: DiagramPayload
    ) -> "ViewState":
        return self._move(
            ViewEvent.VIEW_SAVED_DIAGRAM,
            diagram_type=diagram_type,
            diagram_payload=payload,
            saved_record_id=record_id,
        )

    def start_over(self) -> "ViewState":
        return self._move(ViewEvent.START_OVER)
