"""Typed interfaces for job-layer creation responsibilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol
from uuid import UUID

from job_creator.domain import (
    ActorDefinitionVersionRecord,
    ConnectionRecord,
    DestinationDefinitionRecord,
    JobConfig,
    ResourceRequirements,
    ResourceRole,
    SourceDefinitionRecord,
    StreamIdentity,
    SyncOperation,
)


@dataclass(frozen=True)
class SyncJobRequest:
    """Inputs for creating one sync job.

    Attributes:
        connection: Connection being synced.
        source_docker_image: Source connector image reference.
        source_protocol_version: Protocol version spoken by the source.
        destination_docker_image: Destination connector image reference.
        destination_protocol_version: Protocol version spoken by the destination.
        operations: Post-sync operations in execution order.
        webhook_operation_configs: Optional webhook operation configuration.
        source_definition: Source connector definition.
        destination_definition: Destination connector definition.
        source_definition_version: Source definition version in use.
        destination_definition_version: Destination definition version in use.
        workspace_id: Owning workspace identifier.
    """

    connection: ConnectionRecord
    source_docker_image: str
    source_protocol_version: str
    destination_docker_image: str
    destination_protocol_version: str
    operations: tuple[SyncOperation, ...]
    webhook_operation_configs: dict[str, Any] | None
    source_definition: SourceDefinitionRecord
    destination_definition: DestinationDefinitionRecord
    source_definition_version: ActorDefinitionVersionRecord
    destination_definition_version: ActorDefinitionVersionRecord
    workspace_id: UUID


@dataclass(frozen=True)
class ResetConnectionJobRequest:
    """Inputs for creating one reset-connection job.

    Attributes:
        connection: Connection being reset.
        destination_definition_version: Destination definition version in use.
        destination_docker_image: Destination connector image reference.
        destination_protocol_version: Protocol version spoken by the destination.
        is_destination_custom_connector: Whether the destination is a custom connector.
        operations: Post-sync operations in execution order.
        streams_to_reset: Reset target streams.
        workspace_id: Owning workspace identifier.
    """

    connection: ConnectionRecord
    destination_definition_version: ActorDefinitionVersionRecord
    destination_docker_image: str
    destination_protocol_version: str
    is_destination_custom_connector: bool
    operations: tuple[SyncOperation, ...]
    streams_to_reset: tuple[StreamIdentity, ...]
    workspace_id: UUID


class ResourceRequirementsProviderPort(Protocol):
    """Port definition for role and variant keyed default requirements."""

    def config_resource_requirements_get(
        self,
        role: ResourceRole,
        variant_key: str | None = None,
    ) -> ResourceRequirements:
        """Return fully specified default requirements.

        Args:
            role: Process role.
            variant_key: Optional connector variant.

        Returns:
            ResourceRequirements: Requirements with every field set.

        Raises:
            RuntimeError: Raised when defaults are unavailable.
        """


class JobPersistencePort(Protocol):
    """Port definition for durable job enqueueing."""

    def db_job_enqueue(self, scope: str, job_config: JobConfig) -> int | None:
        """Enqueue one job for a scope.

        Args:
            scope: Scope key, the connection identifier.
            job_config: Assembled job configuration.

        Returns:
            int | None: New job id, or None when the job was not enqueued.

        Raises:
            RuntimeError: Raised when persistence fails.
        """


class JobCreatorPort(Protocol):
    """Port definition for creating sync and reset-connection jobs."""

    def job_create_sync(self, request: SyncJobRequest) -> int | None:
        """Create and enqueue one sync job.

        Args:
            request: Sync job inputs.

        Returns:
            int | None: Enqueued job id or None.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

    def job_create_reset_connection(self, request: ResetConnectionJobRequest) -> int | None:
        """Create and enqueue one reset-connection job.

        Args:
            request: Reset job inputs.

        Returns:
            int | None: Enqueued job id or None.

        Raises:
            RuntimeError: Raised when persistence fails.
        """
