"""HTTP tests for the size routes."""

import io

from fastapi.testclient import TestClient
from PIL import Image

from src.config import sizes
from src.controller.main_controller import app


def _jpeg_bytes(width: int, height: int) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color=(10, 120, 200)).save(buf, format="JPEG")
    return buf.getvalue()


class TestSizeRoutes:
    def setup_method(self):
        self.client = TestClient(app)

    def test_recommended(self):
        resp = self.client.get("/api/size/recommended")
        assert resp.status_code == 200

        data = resp.json()
        assert data["default"] == {"width": 1024, "height": 1024}
        assert len(data["sizes"]) == 7
        assert data["sizes"][1] == {"width": 768, "height": 1344, "ratio": 0.571}

    def test_best_size(self):
        resp = self.client.get("/api/size/best", params={"width": 900, "height": 1600})
        assert resp.status_code == 200

        data = resp.json()
        assert data["recommended"] == {"width": 768, "height": 1344}
        assert data["size"] == "768x1344"
        assert data["description"] == "portrait (tall)"
        assert data["original"] == {"width": 900, "height": 1600}

    def test_best_size_rejects_zero_height(self):
        resp = self.client.get("/api/size/best", params={"width": 900, "height": 0})
        assert resp.status_code == 422

    def test_validate_valid(self):
        resp = self.client.post("/api/size/validate", json={"width": 1024, "height": 1024})
        assert resp.status_code == 200
        assert resp.json() == {"valid": True, "error": None}

    def test_validate_invalid_is_not_an_http_error(self):
        resp = self.client.post("/api/size/validate", json={"width": 2048, "height": 2048})
        assert resp.status_code == 200

        data = resp.json()
        assert data["valid"] is False
        assert data["error"].startswith("pixel budget exceeded")

    def test_validate_fractional_width_returns_result(self):
        resp = self.client.post("/api/size/validate", json={"width": 1000.5, "height": 1024})
        assert resp.status_code == 200

        data = resp.json()
        assert data["valid"] is False
        assert data["error"].startswith("width not divisible by 16")

    def test_measure_upload(self):
        files = {"file": ("photo.jpg", _jpeg_bytes(1600, 1200), "image/jpeg")}
        resp = self.client.post("/api/size/measure", files=files)
        assert resp.status_code == 200

        data = resp.json()
        assert data["original"] == {"width": 1600, "height": 1200}
        assert data["recommended"] == {"width": 1152, "height": 864}
        assert data["size"] == "1152x864"
        assert data["description"] == "landscape (near-square)"

    def test_measure_rejects_non_image(self):
        files = {"file": ("notes.txt", b"plain text, not pixels", "text/plain")}
        resp = self.client.post("/api/size/measure", files=files)
        assert resp.status_code == 422

        data = resp.json()
        assert data["status"] == "error"
        assert data["source"] == "image_loader"
        assert data["error_type"] == "unsupported_format"


class TestUploadLimit:
    def setup_method(self):
        self.client = TestClient(app)

    def test_oversized_upload_rejected(self, monkeypatch):
        monkeypatch.setattr(sizes, "MAX_UPLOAD_BYTES", 256)
        monkeypatch.setattr(sizes, "UPLOAD_CHUNK_BYTES", 64)

        files = {"file": ("big.jpg", _jpeg_bytes(400, 300), "image/jpeg")}
        resp = self.client.post("/api/size/measure", files=files)
        assert resp.status_code == 413

        data = resp.json()
        assert data["error_type"] == "upload_too_large"
        assert data["details"] == {"max_bytes": 256}

    def test_upload_at_limit_is_measured(self, monkeypatch):
        payload = _jpeg_bytes(64, 48)
        monkeypatch.setattr(sizes, "MAX_UPLOAD_BYTES", len(payload))
        monkeypatch.setattr(sizes, "UPLOAD_CHUNK_BYTES", 100)

        files = {"file": ("small.jpg", payload, "image/jpeg")}
        resp = self.client.post("/api/size/measure", files=files)
        assert resp.status_code == 200
        assert resp.json()["original"] == {"width": 64, "height": 48}
