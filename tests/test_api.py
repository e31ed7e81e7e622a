"""
Unit tests for the webhook API.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from core.pipeline import FaceDistortionPipeline
from main import create_app
from models.result import ProcessingResult
from services.face_detection_service import FaceDetectionService
from services.storage_service import StorageService
from tests.helpers import make_event
from utils.exceptions import EventValidationError, StorageError


@pytest.fixture
def fake_pipeline():
    pipeline = MagicMock(spec=FaceDistortionPipeline)
    result = ProcessingResult(source_bucket="origin-bucket-name", source_key="a.jpg", faces_detected=1, faces_distorted=1)
    result.mark_completed()
    pipeline.process_event = AsyncMock(return_value=[result])
    pipeline.get_status = AsyncMock(return_value={"initialized": True, "processed": 0, "failed": 0})
    return pipeline


@pytest.fixture
def client(fake_pipeline):
    with TestClient(create_app(pipeline=fake_pipeline)) as test_client:
        yield test_client


class TestEventsEndpoint:
    """Test POST /api/v1/events."""

    def test_process_event(self, client, fake_pipeline):
        response = client.post("/api/v1/events", json=make_event("a.jpg"))

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["processed"] == 1
        assert body["skipped"] == 0
        assert body["results"][0]["faces_distorted"] == 1
        assert "X-Request-ID" in response.headers
        fake_pipeline.process_event.assert_awaited_once()

    def test_request_id_is_echoed(self, client):
        response = client.post("/api/v1/events", json=make_event("a.jpg"), headers={"X-Request-ID": "abc"})
        assert response.headers["X-Request-ID"] == "abc"

    def test_skipped_records_counted(self, client):
        event = make_event("a.jpg")
        event["Records"] += make_event("b.jpg", event_name="ObjectRemoved:Delete")["Records"]

        response = client.post("/api/v1/events", json=event)

        assert response.json()["skipped"] == 1

    def test_event_validation_error(self, client, fake_pipeline):
        fake_pipeline.process_event.side_effect = EventValidationError("No records received for reading.")

        response = client.post("/api/v1/events", json={"Records": []})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == {"message": "No records received for reading.", "type": "EventValidationError"}

    def test_missing_object_is_404(self, client, fake_pipeline):
        fake_pipeline.process_event.side_effect = StorageError("missing", status_code=404)

        response = client.post("/api/v1/events", json=make_event("a.jpg"))

        assert response.status_code == 404
        assert response.json()["error"]["type"] == "StorageError"

    def test_record_without_bucket_or_key_is_400(self, aws_settings, s3_source_client, s3_destination_client, rekognition_client):
        pipeline = FaceDistortionPipeline(
            config=aws_settings,
            storage=StorageService(aws_settings, source_client=s3_source_client, destination_client=s3_destination_client),
            detector=FaceDetectionService(aws_settings, client=rekognition_client)
        )

        with TestClient(create_app(pipeline=pipeline)) as client:
            response = client.post("/api/v1/events", json={"Records": [{"s3": {}}]})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["type"] == "EventValidationError"
        assert body["error"]["message"].startswith("Malformed event notification")
        s3_source_client.get_object.assert_not_called()

    def test_non_object_body_is_400(self, client, fake_pipeline):
        response = client.post("/api/v1/events", json=["Records"])

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["type"] == "EventValidationError"
        fake_pipeline.process_event.assert_not_awaited()


class TestHealthEndpoints:
    """Test health routes."""

    def test_root(self, client):
        assert client.get("/").json()["endpoints"]["events"] == "/api/v1/events"

    def test_health(self, client):
        body = client.get("/api/v1/health").json()
        assert body["status"] == "healthy"

    def test_detailed_health(self, client):
        body = client.get("/api/v1/health/detailed").json()
        assert body["status"] == "healthy"
        assert body["checks"]["pipeline"]["details"]["initialized"] is True

    def test_readiness(self, client):
        assert client.get("/api/v1/health/readiness").json()["status"] == "ready"

    def test_not_ready(self, client, fake_pipeline):
        fake_pipeline.get_status.return_value = {"initialized": False}
        assert client.get("/api/v1/health/readiness").status_code == 503

    def test_liveness(self, client):
        assert client.get("/api/v1/health/liveness").json()["status"] == "alive"
