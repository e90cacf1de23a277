"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from job_creator.api import create_api_application
from job_creator.config import AppSettings, ConfigResourceRequirementsProvider, config_configure_logging
from job_creator.db import SQLAlchemyDatabaseHealthService, SQLAlchemyJobPersistenceService, db_create_engine
from job_creator.jobs import DefaultJobCreator


def bootstrap_create_application(settings: AppSettings) -> FastAPI:
    """Assemble the runtime application from validated settings.

    Args:
        settings: Validated application settings.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        ValueError: Raised when configured resource defaults are incomplete.
    """

    config_configure_logging(settings.log_level)
    engine = db_create_engine(database_url=settings.database_url)
    job_repository = SQLAlchemyJobPersistenceService(engine=engine)
    return create_api_application(
        settings=settings,
        db_health_service=SQLAlchemyDatabaseHealthService(engine=engine),
        job_creator=DefaultJobCreator(
            job_persistence=job_repository,
            resource_requirements_provider=ConfigResourceRequirementsProvider.from_settings(settings),
        ),
        job_repository=job_repository,
    )


def bootstrap_create_job_creator(settings: AppSettings) -> DefaultJobCreator:
    """Build the job creator for non-HTTP trigger surfaces.

    Args:
        settings: Validated application settings.

    Returns:
        DefaultJobCreator: Fully wired job creator instance.

    Raises:
        ValueError: Raised when configured resource defaults are incomplete.
    """

    config_configure_logging(settings.log_level)
    engine = db_create_engine(database_url=settings.database_url)
    return DefaultJobCreator(
        job_persistence=SQLAlchemyJobPersistenceService(engine=engine),
        resource_requirements_provider=ConfigResourceRequirementsProvider.from_settings(settings),
    )
