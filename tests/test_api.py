# tests/test_api.py

import os

from fastapi.testclient import TestClient

from api import main
from api.main import app

client = TestClient(app)


def test_render(feed, spans, expected_html):
    resp = client.post("/render", json={"feed": feed, "spans": spans})

    assert resp.status_code == 200
    body = resp.json()
    assert body["html"] == expected_html
    assert len(body["spans"]) == 4


def test_render_without_spans():
    resp = client.post("/render", json={"feed": "just text"})
    assert resp.status_code == 200
    assert resp.json()["html"] == "just text"


def test_render_out_of_range():
    resp = client.post(
        "/render",
        json={"feed": "Hello", "spans": [{"start": 5, "end": 3, "type": "Entity"}]},
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "SpanOutOfRange"


def test_render_unknown_type():
    resp = client.post(
        "/render",
        json={"feed": "Hello", "spans": [{"start": 0, "end": 5, "type": "Unknown"}]},
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "UnsupportedAnnotationType"
    assert "Unknown" in resp.json()["detail"]


def test_types():
    resp = client.get("/types")
    assert resp.status_code == 200
    assert resp.json()["types"] == ["Entity", "Link", "Twitter username"]


def test_render_with_named_style(monkeypatch, tmp_path, feed, spans):
    (tmp_path / "tight.yaml").write_text(
        'markup:\n  link_close: "</a>"\n', encoding="utf-8"
    )
    monkeypatch.setattr(main, "CONFIG_DIR", os.path.realpath(tmp_path))

    resp = client.post("/render", json={"feed": feed, "spans": spans, "style_path": "tight.yaml"})

    assert resp.status_code == 200
    assert '<a href="http://bit.ly/xyz">http://bit.ly/xyz</a>' in resp.json()["html"]


def test_render_missing_style_file():
    resp = client.post("/render", json={"feed": "Hello", "style_path": "no/such.yaml"})
    assert resp.status_code == 404


def test_render_style_outside_configs_rejected():
    for style_path in ["/etc/hostname", "../pyproject.toml"]:
        resp = client.post("/render", json={"feed": "Hello", "style_path": style_path})
        assert resp.status_code == 400
        assert "hostname" not in resp.text


def test_render_malformed_style_yaml(monkeypatch, tmp_path):
    (tmp_path / "broken.yaml").write_text("markup: [unclosed\n", encoding="utf-8")
    monkeypatch.setattr(main, "CONFIG_DIR", os.path.realpath(tmp_path))

    resp = client.post("/render", json={"feed": "Hello", "style_path": "broken.yaml"})

    assert resp.status_code == 400


def test_render_invalid_style_hides_server_path(monkeypatch, tmp_path):
    (tmp_path / "list.yaml").write_text("- a\n- b\n", encoding="utf-8")
    monkeypatch.setattr(main, "CONFIG_DIR", os.path.realpath(tmp_path))

    resp = client.post("/render", json={"feed": "Hello", "style_path": "list.yaml"})

    assert resp.status_code == 422
    assert resp.json()["error"] == "StyleConfigError"
    assert str(tmp_path) not in resp.text
