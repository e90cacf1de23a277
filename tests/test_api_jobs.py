"""Tests for job creation and lookup API endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from fastapi.testclient import TestClient

from job_creator.api.application import create_api_application
from job_creator.config import AppSettings
from job_creator.db import JobRecord
from job_creator.domain import DestinationSyncMode, HealthStatus, JobKind, ResourceRequirements, StreamIdentity
from job_creator.jobs import ResetConnectionJobRequest, SyncJobRequest


class _HealthyDatabaseService:
    """Test double that simulates a ready jobs database."""

    def db_connection_label(self) -> str:
        return "postgresql://test"

    def db_check_health(self) -> HealthStatus:
        return HealthStatus(status="ok", detail="ready")


class _JobCreatorStub:
    """Capture mapped requests and return a configured job id."""

    def __init__(self, job_id: int | None):
        """Initialize configured result.

        Args:
            job_id: Job id returned by both creation methods.

        Returns:
            None: Initializer does not return values.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        self._job_id = job_id
        self.sync_requests: list[SyncJobRequest] = []
        self.reset_requests: list[ResetConnectionJobRequest] = []

    def job_create_sync(self, request: SyncJobRequest) -> int | None:
        self.sync_requests.append(request)
        return self._job_id

    def job_create_reset_connection(self, request: ResetConnectionJobRequest) -> int | None:
        self.reset_requests.append(request)
        return self._job_id


class _JobRepositoryStub:
    """Return one stored job for a known id."""

    def __init__(self, job_record: JobRecord | None = None):
        self._job_record = job_record

    def db_job_get_by_id(self, job_id: int) -> JobRecord | None:
        """Return stored job when ids match.

        Args:
            job_id: Requested job id.

        Returns:
            JobRecord | None: Stored job or None.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        if self._job_record is not None and self._job_record.job_id == job_id:
            return self._job_record
        return None


def _build_client(job_creator: _JobCreatorStub, job_repository: _JobRepositoryStub | None = None) -> TestClient:
    """Create a test client with job dependencies.

    Args:
        job_creator: Job creator stub.
        job_repository: Optional job repository stub.

    Returns:
        TestClient: Client bound to a fresh application.

    Raises:
        ValueError: Raised by AppSettings when values are invalid.
    """

    application = create_api_application(
        AppSettings(environment_name="test"),
        _HealthyDatabaseService(),
        job_creator,
        job_repository or _JobRepositoryStub(),
    )
    return TestClient(application)


def _build_connection_body(connection_id: str) -> dict[str, object]:
    """Build a connection body with one overwrite and one append stream.

    Args:
        connection_id: Connection identifier text.

    Returns:
        dict[str, object]: Connection request body.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "connection_id": connection_id,
        "streams": [
            {
                "name": "orders",
                "namespace": "public",
                "sync_mode": "incremental",
                "destination_sync_mode": "overwrite",
                "cursor_field": ["updated_at"],
            },
            {
                "name": "customers",
                "namespace": "public",
                "sync_mode": "full_refresh",
                "destination_sync_mode": "append",
            },
        ],
        "resource_requirements": {"cpu_request": "2"},
    }


def _build_version_body(repository: str) -> dict[str, str]:
    return {"version_id": str(uuid4()), "docker_repository": repository, "docker_image_tag": "1.0.0"}


def _build_sync_body(connection_id: str) -> dict[str, object]:
    """Build a full sync job request body.

    Args:
        connection_id: Connection identifier text.

    Returns:
        dict[str, object]: Sync request body.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "connection": _build_connection_body(connection_id),
        "source_docker_image": "airbyte/source-postgres:1.0.0",
        "source_protocol_version": "0.2.0",
        "destination_docker_image": "airbyte/destination-snowflake:1.0.0",
        "destination_protocol_version": "0.2.0",
        "source_definition": {
            "source_definition_id": str(uuid4()),
            "name": "Postgres",
            "source_type": "database",
            "resource_requirements": {
                "default": {"memory_request": "1Gi"},
                "job_specific": [{"job_kind": "sync", "resource_requirements": {"memory_limit": "4Gi"}}],
            },
        },
        "destination_definition": {"destination_definition_id": str(uuid4()), "name": "Snowflake"},
        "source_definition_version": _build_version_body("airbyte/source-postgres"),
        "destination_definition_version": _build_version_body("airbyte/destination-snowflake"),
        "workspace_id": str(uuid4()),
    }


def test_api_jobs_sync_returns_created_with_job_id() -> None:
    """Map the body onto a sync request and return HTTP 201.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response or mapping is unexpected.
    """

    connection_id = str(uuid4())
    job_creator = _JobCreatorStub(job_id=12)

    response = _build_client(job_creator).post("/jobs/sync", json=_build_sync_body(connection_id))

    assert response.status_code == 201
    assert response.json() == {"job_id": 12, "config_type": "sync", "scope": connection_id}
    sync_request = job_creator.sync_requests[0]
    assert sync_request.connection.resource_requirements == ResourceRequirements(cpu_request="2")
    assert sync_request.source_definition.source_type == "database"
    connector_requirements = sync_request.source_definition.resource_requirements
    assert connector_requirements.connector_requirements_for_job_kind(JobKind.SYNC) == ResourceRequirements(
        memory_limit="4Gi"
    )
    assert sync_request.connection.catalog.streams[0].cursor_field == ("updated_at",)


def test_api_jobs_sync_returns_conflict_when_not_enqueued() -> None:
    """Return HTTP 409 when the job creator yields no job id.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    response = _build_client(_JobCreatorStub(job_id=None)).post("/jobs/sync", json=_build_sync_body(str(uuid4())))

    assert response.status_code == 409
    assert response.json()["code"] == "JOB_NOT_ENQUEUED"


def test_api_jobs_sync_rejects_unknown_sync_mode() -> None:
    """Return HTTP 422 for an invalid stream sync mode.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when invalid input is accepted.
    """

    body = _build_sync_body(str(uuid4()))
    body["connection"]["streams"][0]["destination_sync_mode"] = "truncate"
    job_creator = _JobCreatorStub(job_id=1)

    response = _build_client(job_creator).post("/jobs/sync", json=body)

    assert response.status_code == 422
    assert job_creator.sync_requests == []


def test_api_jobs_sync_rejects_blank_resource_values() -> None:
    """Return HTTP 422 for blank connection and connector requirement values.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when a blank value reaches the job creator.
    """

    connection_blank_body = _build_sync_body(str(uuid4()))
    connection_blank_body["connection"]["resource_requirements"] = {"cpu_request": ""}
    connector_blank_body = _build_sync_body(str(uuid4()))
    connector_blank_body["source_definition"]["resource_requirements"]["default"] = {"memory_limit": "  "}
    job_creator = _JobCreatorStub(job_id=1)
    client = _build_client(job_creator)

    assert client.post("/jobs/sync", json=connection_blank_body).status_code == 422
    assert client.post("/jobs/sync", json=connector_blank_body).status_code == 422
    assert job_creator.sync_requests == []


def test_api_jobs_sync_strips_resource_values() -> None:
    """Strip surrounding whitespace from requirement values.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when values are not normalized.
    """

    body = _build_sync_body(str(uuid4()))
    body["connection"]["resource_requirements"] = {"cpu_request": " 2 "}
    job_creator = _JobCreatorStub(job_id=4)

    response = _build_client(job_creator).post("/jobs/sync", json=body)

    assert response.status_code == 201
    assert job_creator.sync_requests[0].connection.resource_requirements == ResourceRequirements(cpu_request="2")


def _build_reset_body(connection_id: str) -> dict[str, object]:
    """Build a reset job request body targeting one stream.

    Args:
        connection_id: Connection identifier text.

    Returns:
        dict[str, object]: Reset request body.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "connection": _build_connection_body(connection_id),
        "destination_definition_version": _build_version_body("airbyte/destination-snowflake"),
        "destination_docker_image": "airbyte/destination-snowflake:1.0.0",
        "destination_protocol_version": "0.2.0",
        "streams_to_reset": [{"name": "orders", "namespace": "public"}],
        "workspace_id": str(uuid4()),
    }


def test_api_jobs_reset_returns_conflict_when_not_enqueued() -> None:
    """Return HTTP 409 when the reset job is not enqueued.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    job_creator = _JobCreatorStub(job_id=None)

    response = _build_client(job_creator).post("/jobs/reset", json=_build_reset_body(str(uuid4())))

    assert response.status_code == 409
    assert response.json()["code"] == "JOB_NOT_ENQUEUED"
    assert len(job_creator.reset_requests) == 1


def test_api_jobs_reset_maps_streams_to_reset() -> None:
    """Map reset targets and return HTTP 201.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response or mapping is unexpected.
    """

    connection_id = str(uuid4())
    job_creator = _JobCreatorStub(job_id=3)
    response = _build_client(job_creator).post("/jobs/reset", json=_build_reset_body(connection_id))

    assert response.status_code == 201
    assert response.json()["config_type"] == "reset_connection"
    reset_request = job_creator.reset_requests[0]
    assert reset_request.streams_to_reset == (StreamIdentity(name="orders", namespace="public"),)
    assert reset_request.connection.catalog.streams[1].destination_sync_mode == DestinationSyncMode.APPEND


def test_api_jobs_detail_returns_job_or_not_found() -> None:
    """Return stored job payload and 404 for unknown ids.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when responses are unexpected.
    """

    timestamp = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)
    job_record = JobRecord(
        job_id=9,
        scope="connection-1",
        config_type="sync",
        status="pending",
        config={"config_type": "sync"},
        created_at_utc=timestamp,
        updated_at_utc=timestamp,
    )
    client = _build_client(_JobCreatorStub(job_id=None), _JobRepositoryStub(job_record))

    found_response = client.get("/jobs/9")
    missing_response = client.get("/jobs/10")

    assert found_response.status_code == 200
    assert found_response.json()["status"] == "pending"
    assert found_response.json()["created_at_utc"] == "2026-10-18T09:30:00+00:00"
    assert missing_response.status_code == 404
    assert missing_response.json()["code"] == "JOB_NOT_FOUND"
