"""Integration tests for the REST API.

These tests verify the FastAPI application end-to-end, including:
- Calculation from request bodies and from plan configurations
- Printer preset listing and lookup
- Error responses for unknown presets and rejected input
"""

import pytest
from fastapi.testclient import TestClient

from gridfinity.web import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app())


def kitchen_request(**overrides) -> dict:
    body = {
        "drawer": {"width": 22.5, "height": 16.5},
        "printer": {"x": 256, "y": 256},
    }
    body.update(overrides)
    return body


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestCalculateEndpoint:
    """Tests for POST /api/v1/calculate."""

    def test_full_size_layout(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json=kitchen_request())

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["baseplates"] == {"6x6": 2, "1x6": 1, "6x3": 2, "1x3": 1}
        assert data["spacers"]["252mm x 41.1mm"] == 2
        assert data["totals"]["pieces"] == 12
        assert len(data["layout"]) == 12

    def test_layout_items_carry_labels(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json=kitchen_request())

        layout = response.json()["layout"]
        first = layout[0]
        assert first["type"] == "baseplate"
        assert first["label"] == "6x6"
        assert first["pixel_width"] == 252
        spacer_labels = {item["label"] for item in layout if item["type"] == "spacer"}
        assert spacer_labels == set(response.json()["spacers"])

    @pytest.mark.parametrize("mode", ["half_size_only", "prefer_half_size_for_gaps"])
    def test_spacer_labels_match_tallies_in_half_size_modes(
        self, client: TestClient, mode: str
    ) -> None:
        response = client.post("/api/v1/calculate", json=kitchen_request(half_size_mode=mode))

        data = response.json()
        spacer_labels = {item["label"] for item in data["layout"] if item["type"] == "spacer"}
        assert spacer_labels
        assert spacer_labels == set(data["spacers"])

    def test_prefer_half_size(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json=kitchen_request(half_size_mode="prefer_half_size_for_gaps"),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["half_size_bins"]["6x0.5"] == 2
        assert data["totals"]["pieces"] == 18

    def test_millimetre_drawer(self, client: TestClient) -> None:
        body = kitchen_request(drawer={"width": 571.5, "height": 419.1, "unit": "mm"})

        response = client.post("/api/v1/calculate", json=body)

        assert response.status_code == 200
        assert response.json()["baseplates"]["6x6"] == 2

    def test_whole_cell_millimetre_drawer(self, client: TestClient) -> None:
        body = kitchen_request(drawer={"width": 420, "height": 420, "unit": "mm"})

        response = client.post("/api/v1/calculate", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["spacers"] == {}
        assert data["baseplates"] == {"6x6": 1, "4x6": 1, "6x4": 1, "4x4": 1}

    def test_drawer_matching_the_bed(self, client: TestClient) -> None:
        body = kitchen_request(drawer={"width": 256, "height": 256, "unit": "mm"})

        response = client.post("/api/v1/calculate", json=body)

        data = response.json()
        assert data["baseplates"] == {"6x6": 1}
        assert data["spacers"] == {"4mm x 252mm": 1, "252mm x 4mm": 1, "4mm x 4mm": 1}

    def test_preset_and_totals(self, client: TestClient) -> None:
        body = kitchen_request(printer={"preset": "Bambu Lab X1C"}, num_drawers=4)

        response = client.post("/api/v1/calculate", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["num_drawers"] == 4
        assert data["totals"]["baseplates"]["6x6"] == 8
        assert data["totals"]["pieces"] == 48

    def test_default_printer(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate", json={"drawer": {"width": 10, "height": 10}}
        )

        assert response.status_code == 200
        assert response.json()["baseplates"] == {"6x6": 1}

    def test_unknown_preset(self, client: TestClient) -> None:
        body = kitchen_request(printer={"preset": "Imaginary Printer 3000"})

        response = client.post("/api/v1/calculate", json=body)

        assert response.status_code == 404
        data = response.json()
        assert data["error_type"] == "not_found"
        assert "Bambu Lab X1C" in data["details"]["available"]

    def test_exclusions_eat_the_bed(self, client: TestClient) -> None:
        body = kitchen_request(
            printer={"x": 100, "y": 100, "exclusion_zone": {"left": 60, "right": 60}}
        )

        response = client.post("/api/v1/calculate", json=body)

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "calculation"
        assert data["details"][0]["message"] == (
            "Left and right exclusion zones leave no usable bed width"
        )

    @pytest.mark.parametrize("width", [0, -3])
    def test_non_positive_width(self, client: TestClient, width: float) -> None:
        body = kitchen_request(drawer={"width": width, "height": 16.5})

        response = client.post("/api/v1/calculate", json=body)

        assert response.status_code == 422

    def test_too_many_drawers(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json=kitchen_request(num_drawers=101))

        assert response.status_code == 422


class TestCalculateFromConfigEndpoint:
    """Tests for POST /api/v1/calculate/from-config."""

    def test_valid_config(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.0",
            "drawer": {"width": 10, "height": 10},
            "options": {"half_size_mode": "half_size_only"},
            "num_drawers": 2,
        }

        response = client.post("/api/v1/calculate/from-config", json={"config": config})

        assert response.status_code == 200
        data = response.json()
        assert data["half_size_bins"] == {"12x12": 1}
        assert data["totals"]["half_size_bins"] == {"12x12": 2}

    def test_millimetre_drawer_config(self, client: TestClient) -> None:
        config = {
            "schema_version": "1.0",
            "drawer": {"width": 420, "height": 420, "unit": "mm"},
        }

        response = client.post("/api/v1/calculate/from-config", json={"config": config})

        assert response.status_code == 200
        assert response.json()["spacers"] == {}

    def test_invalid_config(self, client: TestClient) -> None:
        config = {"schema_version": "1.0", "drawer": {"width": -5, "height": 10}}

        response = client.post("/api/v1/calculate/from-config", json={"config": config})

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "drawer.width"


class TestPrinterEndpoints:
    """Tests for /api/v1/printers."""

    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/v1/printers")

        assert response.status_code == 200
        data = response.json()
        assert data["default"] == "Bambu Lab A1"
        names = [printer["name"] for printer in data["printers"]]
        assert "Prusa i3 MK3S+" in names
        assert len(names) == 12

    def test_get(self, client: TestClient) -> None:
        response = client.get("/api/v1/printers/Prusa i3 MK3S+")

        assert response.status_code == 200
        data = response.json()
        assert (data["x"], data["y"], data["z"]) == (250, 210, 210)
        assert data["build_volume"] == "250mm × 210mm × 210mm"

    def test_get_unknown(self, client: TestClient) -> None:
        response = client.get("/api/v1/printers/Imaginary")

        assert response.status_code == 404
        assert response.json()["details"]["name"] == "Imaginary"
