"""Unit tests for the dashboard application (app.py).

Tests the diagram preview callback and the performance endpoint.
"""
from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

# Disable Gradio analytics before importing app
os.environ.setdefault("GRADIO_ANALYTICS_ENABLED", "False")

# Patch gradio.mount_gradio_app to avoid UI initialization
with patch("gradio.mount_gradio_app", side_effect=lambda app, *a, **k: app):
    import app as app_module


CAPTURE_SGF = "(;GM[1]FF[4]SZ[9];B[aa];W[ba];W[ab])"


class TestRenderPreview:
    """Tests for the render_preview() callback."""

    def test_full_game(self):
        text, caption = app_module.render_preview(CAPTURE_SGF)
        assert text.splitlines()[0].split()[0] == "A"
        assert caption == "1 at 3"

    def test_range(self):
        text, caption = app_module.render_preview(CAPTURE_SGF, "1-1")
        assert caption == ""
        assert " 1" in text.splitlines()[1]

    def test_move_number_from_number_widget(self):
        text, caption = app_module.render_preview(CAPTURE_SGF, "", 2.0, True)
        assert "#" in text
        assert caption == ""

    def test_error_is_reported(self):
        text, caption = app_module.render_preview("garbage")
        assert text.startswith("Error:")
        assert caption == ""


class TestMonitoringPerformanceEndpoint:
    """Tests for monitoring performance endpoint."""

    def test_returns_benchmark_summary(self):
        bench = MagicMock()
        bench.run_standard.return_value = {
            "summary": {"average_build_time_ms": 1.0},
            "results": [],
            "passes_requirement": True,
        }

        with patch("app.benchmark.DiagramBenchmark", return_value=bench):
            client = TestClient(app_module.fastapi_app)
            resp = client.get("/monitoring/performance", params={"iterations": 2})

            assert resp.status_code == 200
            assert resp.json() == {"summary": {"average_build_time_ms": 1.0}, "passes_requirement": True}
            bench.run_standard.assert_called_once_with(iterations=2, warmup_runs=1)
