"""Tests for the FastAPI service mode."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from esbridge.config import EsBridgeConfig, ScriptConfig
from esbridge.service import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_resolve_endpoint(client: TestClient) -> None:
    response = client.post("/resolve", json={"specifier": "../foo", "base_dir": "/a/b"})
    assert response.status_code == 200
    assert response.json() == {"path": "/a/foo"}


def test_types_endpoint(client: TestClient) -> None:
    assert client.get("/types/int").json() == {"name": "int", "type": "number"}
    assert client.get("/types/Sprite").json() == {"name": "Sprite", "type": "Sprite"}


def test_declarations_endpoint(client: TestClient) -> None:
    response = client.post(
        "/declarations",
        json={
            "classes": [
                {
                    "name": "Sprite",
                    "inherits": "Node2D",
                    "properties": [{"name": "texture", "type": "Texture"}],
                },
                {"name": "@GDScript"},
            ]
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["class_count"] == 1
    assert data["text"].startswith("declare module godot {")
    assert "class Sprite extends Node2D {" in data["text"]
    assert "texture: Texture;" in data["text"]


def test_declarations_endpoint_namespace_override(client: TestClient) -> None:
    response = client.post("/declarations", json={"classes": [], "namespace": "engine"})
    assert response.json()["text"] == "declare module engine {}\n"


def test_declarations_endpoint_rejects_unnamed_classes(client: TestClient) -> None:
    response = client.post("/declarations", json={"classes": [{"inherits": "Node"}]})
    assert response.status_code == 400
    assert "name" in response.json()["detail"]


def test_script_template_endpoint_uses_config(tmp_path: Path) -> None:
    (tmp_path / "script_class.jsx.j2").write_text(
        "class {{ class_name }} extends {{ object_namespace }}.{{ base_class_name }}",
        encoding="utf-8",
    )
    config = EsBridgeConfig(
        root=tmp_path,
        scripts=ScriptConfig(templates_dir=tmp_path, object_namespace="engine"),
    )
    client = TestClient(create_app(lambda: config))

    response = client.post(
        "/script-template", json={"class_name": "Player", "base_class_name": "Node"}
    )

    assert response.status_code == 200
    assert response.json() == {"source": "class Player extends engine.Node\n"}
