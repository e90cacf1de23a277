"""Job creator that assembles job configurations and enqueues them."""

from __future__ import annotations

import logging

from job_creator.config import config_log_event
from job_creator.domain import (
    ConnectionRecord,
    ConnectorResourceRequirements,
    DestinationDefinitionRecord,
    JobConfig,
    JobKind,
    ResourceRequirements,
    ResourceRole,
    SourceDefinitionRecord,
)

from .interfaces import (
    JobCreatorPort,
    JobPersistencePort,
    ResetConnectionJobRequest,
    ResourceRequirementsProviderPort,
    SyncJobRequest,
)
from .job_config_builder import job_build_reset_config, job_build_sync_config
from .resource_requirements import job_resolve_resource_requirements

logger = logging.getLogger(__name__)


class DefaultJobCreator(JobCreatorPort):
    """Resolve requirements, assemble job configs and hand them to persistence.

    Whether a job is actually enqueued, for example when another job is
    already pending for the connection, is decided by the persistence port.
    Its result and its failures are passed through unchanged.
    """

    def __init__(
        self,
        job_persistence: JobPersistencePort,
        resource_requirements_provider: ResourceRequirementsProviderPort,
    ):
        """Initialize job creator dependencies.

        Args:
            job_persistence: Persistence port used to enqueue jobs.
            resource_requirements_provider: Provider of role and variant defaults.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when dependencies are missing.
        """

        if job_persistence is None:
            raise ValueError("job_persistence must not be None")
        if resource_requirements_provider is None:
            raise ValueError("resource_requirements_provider must not be None")
        self._job_persistence = job_persistence
        self._resource_requirements_provider = resource_requirements_provider

    def job_create_sync(self, request: SyncJobRequest) -> int | None:
        """Create and enqueue one sync job.

        Args:
            request: Sync job inputs.

        Returns:
            int | None: Enqueued job id, or None when persistence declined.

        Raises:
            RuntimeError: Propagated from the persistence port.
        """

        connection = request.connection
        job_config = job_build_sync_config(
            connection=connection,
            source_docker_image=request.source_docker_image,
            source_protocol_version=request.source_protocol_version,
            destination_docker_image=request.destination_docker_image,
            destination_protocol_version=request.destination_protocol_version,
            operations=request.operations,
            webhook_operation_configs=request.webhook_operation_configs,
            orchestrator_resource_requirements=self._job_orchestrator_requirements(connection),
            source_resource_requirements=self._job_source_requirements(connection, request.source_definition),
            destination_resource_requirements=self._job_destination_requirements(
                connection,
                request.destination_definition,
            ),
            is_source_custom_connector=request.source_definition.custom,
            is_destination_custom_connector=request.destination_definition.custom,
            workspace_id=request.workspace_id,
            source_definition_version_id=request.source_definition_version.version_id,
            destination_definition_version_id=request.destination_definition_version.version_id,
        )
        return self._job_enqueue(connection=connection, job_config=job_config)

    def job_create_reset_connection(self, request: ResetConnectionJobRequest) -> int | None:
        """Create and enqueue one reset-connection job.

        Args:
            request: Reset job inputs.

        Returns:
            int | None: Enqueued job id, or None when persistence declined.

        Raises:
            RuntimeError: Propagated from the persistence port.
        """

        connection = request.connection
        job_config = job_build_reset_config(
            connection=connection,
            destination_docker_image=request.destination_docker_image,
            destination_protocol_version=request.destination_protocol_version,
            operations=request.operations,
            orchestrator_resource_requirements=self._job_orchestrator_requirements(connection),
            streams_to_reset=request.streams_to_reset,
            is_destination_custom_connector=request.is_destination_custom_connector,
            workspace_id=request.workspace_id,
            destination_definition_version_id=request.destination_definition_version.version_id,
        )
        return self._job_enqueue(connection=connection, job_config=job_config)

    def _job_enqueue(self, connection: ConnectionRecord, job_config: JobConfig) -> int | None:
        scope = str(connection.connection_id)
        job_id = self._job_persistence.db_job_enqueue(scope=scope, job_config=job_config)
        config_log_event(
            logger,
            "job_enqueued" if job_id is not None else "job_not_enqueued",
            scope=scope,
            config_type=job_config.config_type.value,
            job_id=job_id,
        )
        return job_id

    def _job_orchestrator_requirements(self, connection: ConnectionRecord) -> ResourceRequirements:
        return self._job_resolve_role(
            role=ResourceRole.ORCHESTRATOR,
            variant_key=None,
            connection=connection,
            connector_default=None,
        )

    def _job_source_requirements(
        self,
        connection: ConnectionRecord,
        source_definition: SourceDefinitionRecord,
    ) -> ResourceRequirements:
        return self._job_resolve_role(
            role=ResourceRole.SOURCE,
            variant_key=source_definition.source_type,
            connection=connection,
            connector_default=source_definition.resource_requirements,
        )

    def _job_destination_requirements(
        self,
        connection: ConnectionRecord,
        destination_definition: DestinationDefinitionRecord,
    ) -> ResourceRequirements:
        return self._job_resolve_role(
            role=ResourceRole.DESTINATION,
            variant_key=None,
            connection=connection,
            connector_default=destination_definition.resource_requirements,
        )

    def _job_resolve_role(
        self,
        role: ResourceRole,
        variant_key: str | None,
        connection: ConnectionRecord,
        connector_default: ConnectorResourceRequirements | None,
    ) -> ResourceRequirements:
        role_type_default = self._resource_requirements_provider.config_resource_requirements_get(
            role=role,
            variant_key=variant_key,
        )
        return job_resolve_resource_requirements(
            role=role,
            variant_key=variant_key,
            connection_override=connection.resource_requirements,
            connector_default=connector_default,
            role_type_default=role_type_default,
            job_kind=JobKind.SYNC,
        )
