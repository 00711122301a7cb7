from __future__ import annotations

from starlette.testclient import TestClient

from app.main import app


def test_gallery_renders_buttons() -> None:
    client = TestClient(app)

    response = client.get("/")

    assert response.status_code == 200
    assert "bootstrap.min.css" in response.text
    assert 'class="btn btn-primary btn-sm"' in response.text
    assert 'aria-disabled="true"' in response.text
    assert 'type="submit"' in response.text
    assert 'data-bs-toggle="dropdown"' in response.text
