"""Job API router composition for job creation and lookup endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from job_creator.db import JobRecord, JobRepositoryPort
from job_creator.domain import JobKind
from job_creator.jobs import JobCreatorPort

from ..schemas import ResetJobRequestBody, SyncJobRequestBody


def api_create_jobs_router(
    job_creator: JobCreatorPort,
    job_repository: JobRepositoryPort,
) -> APIRouter:
    """Create jobs router with sync/reset creation and job detail endpoints.

    Args:
        job_creator: Job-layer creator used to assemble and enqueue jobs.
        job_repository: DB-layer job repository for detail lookups.

    Returns:
        APIRouter: Router exposing job APIs.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if job_creator is None:
        raise ValueError("job_creator must not be None")
    if job_repository is None:
        raise ValueError("job_repository must not be None")

    router = APIRouter(prefix="/jobs", tags=["jobs"])

    @router.post("/sync")
    def api_job_create_sync(body: SyncJobRequestBody) -> JSONResponse:
        """Create one sync job for the connection in the body.

        Returns:
            JSONResponse: 201 with job id, or 409 when the job was not enqueued.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        job_id = job_creator.job_create_sync(body.api_to_domain())
        return api_build_enqueue_response(
            job_id=job_id,
            config_type=JobKind.SYNC,
            scope=str(body.connection.connection_id),
        )

    @router.post("/reset")
    def api_job_create_reset(body: ResetJobRequestBody) -> JSONResponse:
        """Create one reset-connection job for the connection in the body.

        Returns:
            JSONResponse: 201 with job id, or 409 when the job was not enqueued.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        job_id = job_creator.job_create_reset_connection(body.api_to_domain())
        return api_build_enqueue_response(
            job_id=job_id,
            config_type=JobKind.RESET_CONNECTION,
            scope=str(body.connection.connection_id),
        )

    @router.get("/{job_id}")
    def api_job_detail(job_id: int) -> JSONResponse:
        """Return one persisted job.

        Args:
            job_id: Job identifier.

        Returns:
            JSONResponse: Job payload or 404 when absent.

        Raises:
            RuntimeError: Raised when repository read fails.
        """

        job_record = job_repository.db_job_get_by_id(job_id)
        if job_record is None:
            payload = {
                "status": "error",
                "code": "JOB_NOT_FOUND",
                "message": f"job_id={job_id} not found",
            }
            return JSONResponse(content=payload, status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(content=api_serialize_job_record(job_record), status_code=status.HTTP_200_OK)

    return router


def api_build_enqueue_response(job_id: int | None, config_type: JobKind, scope: str) -> JSONResponse:
    """Build the response for one job creation attempt.

    Args:
        job_id: Enqueued job id or None.
        config_type: Job kind that was requested.
        scope: Scope key the job was enqueued under.

    Returns:
        JSONResponse: 201 payload with job id, or 409 when nothing was enqueued.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if job_id is None:
        payload = {
            "status": "error",
            "code": "JOB_NOT_ENQUEUED",
            "message": "job was not enqueued; a job for this connection may already be active",
            "config_type": config_type.value,
            "scope": scope,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_409_CONFLICT)
    payload = {
        "job_id": job_id,
        "config_type": config_type.value,
        "scope": scope,
    }
    return JSONResponse(content=payload, status_code=status.HTTP_201_CREATED)


def api_serialize_job_record(job_record: JobRecord) -> dict[str, object]:
    """Serialize one job record for API responses.

    Args:
        job_record: Persisted job record.

    Returns:
        dict[str, object]: JSON-compatible job payload.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "job_id": job_record.job_id,
        "scope": job_record.scope,
        "config_type": job_record.config_type,
        "status": job_record.status,
        "config": job_record.config,
        "created_at_utc": job_record.created_at_utc.isoformat(),
        "updated_at_utc": job_record.updated_at_utc.isoformat(),
    }
