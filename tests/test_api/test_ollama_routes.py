"""Tests for the Ollama-compatible API routes."""

from __future__ import annotations

import json


class TestOllamaChat:
    def test_non_streaming(self, client):
        resp = client.post(
            "/api/chat",
            json={"model": "", "messages": [{"role": "user", "content": "hello"}], "stream": False},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["model"] == "gpt-mock-1"
        assert data["done"] is True
        assert data["message"] == {
            "role": "assistant",
            "content": "Hi! This is a mocked assistant response.",
        }
        assert data["created_at"].endswith("Z")

    def test_stream_flag_returns_ndjson(self, client):
        resp = client.post(
            "/api/chat",
            json={"model": "gpt-mock-1", "messages": [{"role": "user", "content": "hello"}], "stream": True},
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/x-ndjson")
        lines = [json.loads(line) for line in resp.text.splitlines()]
        assert lines[0]["done"] is False
        assert lines[0]["message"]["content"] == "Hi! This is a mocked assistant response."
        assert lines[1] == {"model": "gpt-mock-1", "done": True}

    def test_empty_messages(self, client):
        resp = client.post("/api/chat", json={"model": "x", "messages": []})
        assert resp.status_code == 400


class TestOllamaMetadata:
    def test_tags(self, client):
        resp = client.get("/api/tags")
        assert resp.status_code == 200
        assert {"name": "gpt-mock-1", "model": "gpt-mock-1"} in resp.json()["models"]

    def test_version(self, client):
        resp = client.get("/api/version")
        assert resp.status_code == 200
        assert resp.json() == {"version": "0.1.0-chatmock"}

    def test_show_echoes_name(self, client):
        resp = client.post("/api/show", json={"name": "llama3"})
        assert resp.status_code == 200
        assert resp.json()["model_info"] == {"name": "llama3"}
