"""Tests for the triangulation HTTP API."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from py_sweephull.api import main
from py_sweephull.api.main import app


class TestTriangulationAPI:
    """Test the API endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root(self):
        response = self.client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert "version" in data

    def test_health(self):
        response = self.client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_triangulate_square(self):
        response = self.client.post("/triangulate", json={"coords": [0, 0, 1, 0, 1, 1, 0, 1]})

        assert response.status_code == 200
        data = response.json()
        assert data["point_count"] == 4
        assert data["triangle_count"] == 2
        assert len(data["triangles"]) == 6
        assert len(data["halfedges"]) == 6
        assert sorted(data["hull"]) == [0, 1, 2, 3]

    def test_triangulate_collinear(self):
        response = self.client.post("/triangulate", json={"coords": [0, 0, 1, 1, 2, 2]})

        assert response.status_code == 200
        data = response.json()
        assert data["triangle_count"] == 0
        assert data["triangles"] == []
        assert data["hull"] == [0, 1, 2]

    def test_triangulate_empty(self):
        response = self.client.post("/triangulate", json={"coords": []})

        assert response.status_code == 200
        assert response.json() == {
            "point_count": 0,
            "triangle_count": 0,
            "hull": [],
            "triangles": [],
            "halfedges": [],
        }

    def test_odd_coordinate_count_is_rejected(self):
        response = self.client.post("/triangulate", json={"coords": [0, 0, 1]})

        assert response.status_code == 400
        assert "even number" in response.json()["detail"]

    def test_non_numeric_coordinates_are_rejected(self):
        response = self.client.post("/triangulate", json={"coords": ["a", "b"]})

        assert response.status_code == 422

    def test_oversize_request_is_rejected(self):
        with patch.object(main.settings, "max_points", 2):
            response = self.client.post("/triangulate", json={"coords": [0, 0, 1, 0, 0, 1]})

        assert response.status_code == 413


@pytest.mark.parametrize("coords,expected_triangles", [
    ([], 0),
    ([0, 0, 4, 0, 0, 4], 1),
    ([0, 0, 4, 0, 0, 4, 4, 4, 2, 1], 4),
])
def test_triangle_counts(coords, expected_triangles):
    client = TestClient(app)
    response = client.post("/triangulate", json={"coords": coords})

    assert response.status_code == 200
    assert response.json()["triangle_count"] == expected_triangles
