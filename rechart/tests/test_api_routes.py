"""Tests for the HTTP API."""

import json

from rechart.api.dependencies import get_reconciler


CSV_TEXT = "category,value\nA,10\nB,20\nC,15\n"


class TestProcessData:
    """Tests for /api/process-data."""

    def test_csv_without_credential(self, client, stub_api):
        """Test CSV input is charted locally when no credential is set."""
        response = client.post(
            "/api/process-data",
            json={"data": CSV_TEXT, "chartType": "bar", "isCSV": True},
        )

        assert response.status_code == 200
        assert response.json() == {
            "processedData": {
                "chartData": [
                    {"category": "A", "value": 10},
                    {"category": "B", "value": 20},
                    {"category": "C", "value": 15},
                ],
                "config": {"xKey": "category", "yKey": "value"},
                "title": "Bar Chart",
                "description": "Visualization of category, value data",
                "insights": "Chart shows relationship between category and value. Data contains 3 records.",
            }
        }
        assert stub_api.calls == []

    def test_description_gets_sample(self, client):
        """Test a description gets the canned sample for the type."""
        response = client.post(
            "/api/process-data",
            json={"data": "monthly revenue", "chartType": "line"},
        )

        assert response.status_code == 200
        assert response.json()["processedData"]["title"] == "Sample Line Chart"

    def test_unusable_csv_gets_default(self, client):
        """Test CSV with only a header yields the default chart."""
        response = client.post(
            "/api/process-data",
            json={"data": "a,b", "chartType": "bar", "isCSV": True},
        )

        assert response.status_code == 200
        assert response.json()["processedData"]["title"] == "Default Chart"

    def test_ai_payload_used(self, client, make_api):
        """Test valid model output is returned as-is."""
        ai_chart = {
            "chartData": [{"label": "x", "n": 1}],
            "config": {"xKey": "label", "yKey": "n"},
            "title": "From AI",
            "description": "",
            "insights": "",
        }
        api = make_api({"grok-3-mini": (200, json.dumps({"processedData": ai_chart}))})
        client.app.dependency_overrides[get_reconciler] = lambda: api.reconciler()

        response = client.post(
            "/api/process-data",
            json={"data": "x is 1", "chartType": "bar", "isCSV": False},
        )

        assert response.status_code == 200
        assert response.json()["processedData"] == ai_chart
        assert api.calls == ["grok-3-mini"]

    def test_nan_in_model_output_uses_sample(self, client, make_api):
        """Test model output containing NaN is replaced by the sample chart."""
        reply = '{"chartData": [{"x": "a", "y": NaN}], "config": {"xKey": "x", "yKey": "y"}}'
        api = make_api({"grok-3-mini": (200, reply)})
        client.app.dependency_overrides[get_reconciler] = lambda: api.reconciler()

        response = client.post(
            "/api/process-data",
            json={"data": "monthly revenue", "chartType": "bar"},
        )

        assert response.status_code == 200
        assert response.json()["processedData"]["title"] == "Sample Bar Chart"

    def test_missing_field_is_422(self, client):
        """Test a malformed request body is rejected."""
        response = client.post("/api/process-data", json={"data": CSV_TEXT})

        assert response.status_code == 422


class TestProcessDiagram:
    """Tests for /api/process-diagram."""

    def test_template_without_credential(self, client):
        """Test the template bank is used without a credential."""
        response = client.post(
            "/api/process-diagram",
            json={"description": "Login flow", "diagramType": "flowchart"},
        )

        assert response.status_code == 200
        data = response.json()["processedData"]
        assert data["title"] == "Flowchart Diagram"
        assert data["diagramType"] == "flowchart"
        assert data["description"] == "Generated flowchart diagram based on: Login flow"
        assert data["mermaidCode"].startswith("graph TD")

    def test_mindmap_root(self, client):
        """Test the mindmap root label comes from the description."""
        response = client.post(
            "/api/process-diagram",
            json={"description": "Marketing strategy 2025", "diagramType": "mindmap"},
        )

        assert "root((Marketing strategy))" in response.json()["processedData"]["mermaidCode"]

    def test_unknown_type_echoed(self, client):
        """Test unknown diagram types are echoed with the flowchart template."""
        response = client.post(
            "/api/process-diagram",
            json={"description": "x", "diagramType": "venn"},
        )

        assert response.status_code == 200
        data = response.json()["processedData"]
        assert data["diagramType"] == "venn"
        assert data["mermaidCode"].startswith("graph TD")

    def test_missing_type_is_422(self, client):
        """Test a body without diagramType is rejected."""
        response = client.post("/api/process-diagram", json={"description": "x"})

        assert response.status_code == 422


class TestHealth:
    """Tests for health endpoints."""

    def test_root_health(self, client):
        """Test the liveness endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_api_health_unconfigured(self, client, stub_api):
        """Test health without a credential makes no completion calls."""
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["xaiConfigured"] is False
        assert data["apiConnected"] is False
        assert data["availableModels"] == []
        assert stub_api.requests == []

    def test_api_health_configured(self, client, make_api):
        """Test health lists models when the API answers."""
        api = make_api(models=["grok-3-mini"])
        client.app.dependency_overrides[get_reconciler] = lambda: api.reconciler()

        data = client.get("/api/health").json()

        assert data["xaiConfigured"] is True
        assert data["apiConnected"] is True
        assert data["availableModels"] == ["grok-3-mini"]

    def test_readiness(self, client):
        """Test the readiness endpoint checks the database."""
        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"ready": True, "checks": {"database": True}}


class TestDiagramExamples:
    """Tests for diagram starter text."""

    def test_known_type(self, client):
        """Test a known type returns its starter text."""
        response = client.get("/api/examples/diagrams/sequence")

        assert response.status_code == 200
        assert response.json()["mermaidCode"].startswith("sequenceDiagram")

    def test_unknown_type(self, client):
        """Test an unknown type returns empty text."""
        response = client.get("/api/examples/diagrams/venn")

        assert response.json() == {"diagramType": "venn", "mermaidCode": ""}


class TestCharts:
    """Tests for saved chart CRUD."""

    def _create(self, client, headers, payload, title="Sales", chart_type="bar"):
        response = client.post(
            "/api/charts",
            json={
                "title": title,
                "description": "Quarterly sales",
                "chart_type": chart_type,
                "payload": payload,
            },
            headers=headers,
        )
        assert response.status_code == 200
        return response.json()

    def test_requires_user(self, client):
        """Test requests without a user id are rejected."""
        response = client.get("/api/charts")

        assert response.status_code == 401

    def test_create_and_get(self, client, auth_headers, bar_payload):
        """Test a saved chart can be read back."""
        created = self._create(client, auth_headers, bar_payload)

        response = client.get(f"/api/charts/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Sales"
        assert data["user_id"] == "user-1"
        assert data["chart_data"] == bar_payload["chartData"]
        assert data["config"] == {"xKey": "category", "yKey": "value"}

    def test_payload_round_trip(self, client, auth_headers, bar_payload):
        """Test the saved record renders as the payload it was saved from."""
        created = self._create(client, auth_headers, bar_payload)

        data = client.get(f"/api/charts/{created['id']}/payload", headers=auth_headers).json()

        assert data["chartData"] == bar_payload["chartData"]
        assert data["config"] == bar_payload["config"]
        assert data["title"] == "Sales"
        assert data["insights"] == bar_payload["insights"]

    def test_list_filters(self, client, auth_headers, bar_payload):
        """Test type filter and search."""
        self._create(client, auth_headers, bar_payload, title="Revenue", chart_type="bar")
        self._create(client, auth_headers, bar_payload, title="Visitors", chart_type="line")

        all_charts = client.get("/api/charts?chart_type=all", headers=auth_headers).json()
        lines = client.get("/api/charts?chart_type=line", headers=auth_headers).json()
        found = client.get("/api/charts?search=reven", headers=auth_headers).json()

        assert all_charts["total"] == 2
        assert [c["title"] for c in lines["charts"]] == ["Visitors"]
        assert [c["title"] for c in found["charts"]] == ["Revenue"]

    def test_other_user_cannot_read(self, client, auth_headers, bar_payload):
        """Test records are scoped to their owner."""
        created = self._create(client, auth_headers, bar_payload)

        response = client.get(
            f"/api/charts/{created['id']}", headers={"X-User-ID": "someone-else"}
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Chart not found"

    def test_update(self, client, auth_headers, bar_payload):
        """Test renaming a chart."""
        created = self._create(client, auth_headers, bar_payload)

        response = client.put(
            f"/api/charts/{created['id']}",
            json={"title": "Renamed"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Renamed"
        assert response.json()["chart_type"] == "bar"

    def test_delete(self, client, auth_headers, bar_payload):
        """Test deleting a chart."""
        created = self._create(client, auth_headers, bar_payload)

        response = client.delete(f"/api/charts/{created['id']}", headers=auth_headers)

        assert response.json() == {"message": "Chart deleted"}
        assert client.get(f"/api/charts/{created['id']}", headers=auth_headers).status_code == 404

    def test_invalid_payload_is_422(self, client, auth_headers):
        """Test a chart payload without config is rejected."""
        response = client.post(
            "/api/charts",
            json={
                "title": "Bad",
                "chart_type": "bar",
                "payload": {"chartData": []},
            },
            headers=auth_headers,
        )

        assert response.status_code == 422


class TestDiagrams:
    """Tests for saved diagram CRUD."""

    def _create(self, client, headers, payload):
        response = client.post(
            "/api/diagrams",
            json={
                "title": "Checkout",
                "diagram_type": "flowchart",
                "payload": payload,
            },
            headers=headers,
        )
        assert response.status_code == 200
        return response.json()

    def test_create_and_payload(self, client, auth_headers, flowchart_payload):
        """Test a saved diagram renders as its payload."""
        created = self._create(client, auth_headers, flowchart_payload)

        assert created["mermaid_code"] == flowchart_payload["mermaidCode"]
        assert created["diagram_data"] == flowchart_payload

        data = client.get(
            f"/api/diagrams/{created['id']}/payload", headers=auth_headers
        ).json()
        assert data["mermaidCode"] == flowchart_payload["mermaidCode"]
        assert data["diagramType"] == "flowchart"
        assert data["title"] == "Checkout"

    def test_list(self, client, auth_headers, flowchart_payload):
        """Test listing the caller's diagrams."""
        self._create(client, auth_headers, flowchart_payload)

        data = client.get("/api/diagrams", headers=auth_headers).json()

        assert data["total"] == 1
        assert data["diagrams"][0]["title"] == "Checkout"

    def test_delete_missing(self, client, auth_headers):
        """Test deleting an unknown diagram."""
        response = client.delete("/api/diagrams/nope", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Diagram not found"


class TestSharing:
    """Tests for share links."""

    def _chart_id(self, client, headers, payload):
        response = client.post(
            "/api/charts",
            json={"title": "Shared", "chart_type": "bar", "payload": payload},
            headers=headers,
        )
        return response.json()["id"]

    def test_share_and_fetch(self, client, auth_headers, bar_payload):
        """Test a shared chart is publicly readable by token."""
        chart_id = self._chart_id(client, auth_headers, bar_payload)

        share = client.post(
            "/api/share",
            json={"resource_id": chart_id, "resource_type": "chart"},
            headers=auth_headers,
        ).json()

        assert share["share_url"] == f"http://localhost:3000/shared/{share['share_token']}"
        assert share["embed_code"].startswith(f'<iframe src="{share["share_url"]}?embed=true"')
        assert share["allow_embed"] is False

        response = client.get(f"/api/shared/{share['share_token']}")

        assert response.status_code == 200
        data = response.json()
        assert data["resourceType"] == "chart"
        assert data["isEmbed"] is False
        assert data["resource"]["id"] == chart_id

    def test_embed_not_allowed(self, client, auth_headers, bar_payload):
        """Test embedding is refused unless the share allows it."""
        chart_id = self._chart_id(client, auth_headers, bar_payload)
        share = client.post(
            "/api/share",
            json={"resource_id": chart_id, "resource_type": "chart"},
            headers=auth_headers,
        ).json()

        response = client.get(f"/api/shared/{share['share_token']}?embed=true")

        assert response.status_code == 403
        assert response.json()["detail"] == "Embedding not allowed"

    def test_embed_allowed(self, client, auth_headers, bar_payload):
        """Test embedding works when the share allows it."""
        chart_id = self._chart_id(client, auth_headers, bar_payload)
        share = client.post(
            "/api/share",
            json={"resource_id": chart_id, "resource_type": "chart", "allow_embed": True},
            headers=auth_headers,
        ).json()

        response = client.get(f"/api/shared/{share['share_token']}?embed=true")

        assert response.status_code == 200
        assert response.json()["isEmbed"] is True

    def test_unknown_token(self, client):
        """Test an unknown token is a 404."""
        response = client.get("/api/shared/does-not-exist")

        assert response.status_code == 404
        assert response.json()["detail"] == "Resource not found"

    def test_cannot_share_others_resource(self, client, auth_headers, bar_payload):
        """Test sharing requires ownership."""
        chart_id = self._chart_id(client, auth_headers, bar_payload)

        response = client.post(
            "/api/share",
            json={"resource_id": chart_id, "resource_type": "chart"},
            headers={"X-User-ID": "intruder"},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Chart not found"

    def test_deleted_resource(self, client, auth_headers, bar_payload):
        """Test a share pointing at a deleted chart is a 404."""
        chart_id = self._chart_id(client, auth_headers, bar_payload)
        share = client.post(
            "/api/share",
            json={"resource_id": chart_id, "resource_type": "chart"},
            headers=auth_headers,
        ).json()
        client.delete(f"/api/charts/{chart_id}", headers=auth_headers)

        response = client.get(f"/api/shared/{share['share_token']}")

        assert response.status_code == 404


class TestDashboard:
    """Tests for the dashboard overview."""

    def test_overview(self, client, auth_headers, bar_payload, flowchart_payload):
        """Test counts and per-type totals."""
        for chart_type in ["bar", "bar", "pie"]:
            client.post(
                "/api/charts",
                json={"title": "C", "chart_type": chart_type, "payload": bar_payload},
                headers=auth_headers,
            )
        client.post(
            "/api/diagrams",
            json={"title": "D", "diagram_type": "flowchart", "payload": flowchart_payload},
            headers=auth_headers,
        )

        data = client.get("/api/dashboard/overview", headers=auth_headers).json()

        assert data["totalCharts"] == 3
        assert data["totalDiagrams"] == 1
        assert data["chartTypes"] == {"bar": 2, "pie": 1}
        assert len(data["recentCharts"]) == 3

    def test_overview_empty(self, client, auth_headers):
        """Test a new user has an empty overview."""
        data = client.get("/api/dashboard/overview", headers=auth_headers).json()

        assert data == {
            "totalCharts": 0,
            "totalDiagrams": 0,
            "recentCharts": [],
            "chartTypes": {},
        }
