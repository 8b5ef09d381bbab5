"""
API Route Tests

Exercises the FastAPI app with the connector dependency overridden:
1. GET / renders one table row per valid contact
2. GET /contacts returns the table and the fetch outcome
3. A failed fetch renders an empty table (page) and is flagged (JSON)
4. Health probes
"""

import pytest
from fastapi.testclient import TestClient

from api.routes.contacts import get_connector
from api.server import create_app
from core.settings import Settings
from test_contacts_fetcher import SCENARIO_RECORDS, FakeConnector


@pytest.fixture
def make_client():
    """Build a TestClient whose requests use the given fake connector."""
    def _make(connector: FakeConnector) -> TestClient:
        app = create_app(Settings(holded_api_key="test-key"))
        app.dependency_overrides[get_connector] = lambda: connector
        return TestClient(app)
    return _make


class TestContactsPage:

    def test_renders_rows(self, make_client):
        client = make_client(FakeConnector(records=SCENARIO_RECORDS))

        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        page = response.text
        assert page.count("<tr data-key=") == 2
        assert page.index("Acme") < page.index("Beta")
        assert "chip chip-success" in page
        assert "chip chip-warning" in page
        assert "Bad" not in page

    def test_failure_renders_empty_table(self, make_client):
        client = make_client(FakeConnector(error=RuntimeError("invalid key")))

        response = client.get("/")

        assert response.status_code == 200
        assert response.text.count("<tr data-key=") == 0
        assert "invalid key" not in response.text


class TestContactsJson:

    def test_table_payload(self, make_client):
        client = make_client(FakeConnector(records=SCENARIO_RECORDS))

        data = client.get("/contacts").json()

        assert data["fetch_failed"] is False
        assert data["dropped"] == 1
        rows = data["table"]["rows"]
        assert [row["key"] for row in rows] == ["1", "3"]
        assert rows[0]["chip"] == {"label": "client", "color": "success", "variant": "flat"}
        assert rows[1]["chip"]["color"] == "warning"
        assert [c["label"] for c in data["table"]["columns"]][0] == "NOMBRE"

    def test_failure_flagged(self, make_client):
        client = make_client(FakeConnector(error=RuntimeError("network down")))

        data = client.get("/contacts").json()

        assert data["fetch_failed"] is True
        assert data["table"]["rows"] == []

    def test_zero_contacts_not_flagged(self, make_client):
        client = make_client(FakeConnector(records=[]))

        data = client.get("/contacts").json()

        assert data["fetch_failed"] is False
        assert data["table"]["rows"] == []

    def test_fresh_fetch_per_request(self, make_client):
        connector = FakeConnector(records=SCENARIO_RECORDS)
        client = make_client(connector)

        client.get("/")
        client.get("/contacts")

        assert connector.calls == 2


class TestDefaultConnector:

    def test_holded_connector_built_from_settings(self):
        app = create_app(Settings(holded_api_key=None))
        client = TestClient(app)

        # No key configured: the fetch fails before any network call
        data = client.get("/contacts").json()

        assert data["fetch_failed"] is True
        assert data["table"]["rows"] == []


class TestHealth:

    def test_health(self):
        client = TestClient(create_app(Settings()))

        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert "holded" in data["connectors"]

    @pytest.mark.parametrize("path,status", [("/ready", "ready"), ("/live", "alive")])
    def test_probes(self, path, status):
        client = TestClient(create_app(Settings()))
        assert client.get(path).json() == {"status": status}
