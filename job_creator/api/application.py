"""FastAPI application factory for the job creation service."""

from fastapi import FastAPI

from job_creator.config import AppSettings
from job_creator.db import DatabaseHealthPort, JobRepositoryPort
from job_creator.jobs import JobCreatorPort

from .routers import api_create_health_router, api_create_jobs_router


def create_api_application(
    settings: AppSettings,
    db_health_service: DatabaseHealthPort,
    job_creator: JobCreatorPort,
    job_repository: JobRepositoryPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        db_health_service: Database health service used by health endpoints.
        job_creator: Job creator used by job creation endpoints.
        job_repository: Job repository used by job detail endpoints.

    Returns:
        FastAPI: Framework application instance.

    Raises:
        ValueError: Raised when router dependencies are invalid.
    """
    application = FastAPI(title="Connection Job Creator")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return service identity for bootstrap verification."""

        return {
            "service": "connection-job-creator",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(db_health_service=db_health_service))
    application.include_router(api_create_jobs_router(job_creator=job_creator, job_repository=job_repository))

    return application
