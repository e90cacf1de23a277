"""Job configuration assembly from already resolved inputs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from job_creator.domain import (
    ConnectionRecord,
    JobConfig,
    JobKind,
    JobResetConnectionConfig,
    JobSyncConfig,
    ResetSourceConfiguration,
    ResourceRequirements,
    StreamIdentity,
    SyncOperation,
)

from .reset_catalog import job_reset_rewrite_catalog


def job_build_sync_config(
    *,
    connection: ConnectionRecord,
    source_docker_image: str,
    source_protocol_version: str,
    destination_docker_image: str,
    destination_protocol_version: str,
    operations: Sequence[SyncOperation],
    webhook_operation_configs: dict[str, Any] | None,
    orchestrator_resource_requirements: ResourceRequirements,
    source_resource_requirements: ResourceRequirements,
    destination_resource_requirements: ResourceRequirements,
    is_source_custom_connector: bool,
    is_destination_custom_connector: bool,
    workspace_id: UUID,
    source_definition_version_id: UUID,
    destination_definition_version_id: UUID,
) -> JobConfig:
    """Build the sync variant of a job configuration.

    The connection catalog is passed through unmodified.

    Args:
        connection: Connection being synced.
        source_docker_image: Source connector image reference.
        source_protocol_version: Protocol version spoken by the source.
        destination_docker_image: Destination connector image reference.
        destination_protocol_version: Protocol version spoken by the destination.
        operations: Post-sync operations in execution order.
        webhook_operation_configs: Optional webhook operation configuration.
        orchestrator_resource_requirements: Resolved orchestrator requirements.
        source_resource_requirements: Resolved source requirements.
        destination_resource_requirements: Resolved destination requirements.
        is_source_custom_connector: Whether the source is a custom connector.
        is_destination_custom_connector: Whether the destination is a custom connector.
        workspace_id: Owning workspace identifier.
        source_definition_version_id: Source definition version identifier.
        destination_definition_version_id: Destination definition version identifier.

    Returns:
        JobConfig: Sync job configuration.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    sync_config = JobSyncConfig(
        namespace_definition=connection.namespace_definition,
        namespace_format=connection.namespace_format,
        prefix=connection.prefix,
        source_docker_image=source_docker_image,
        source_protocol_version=source_protocol_version,
        destination_docker_image=destination_docker_image,
        destination_protocol_version=destination_protocol_version,
        operation_sequence=tuple(operations),
        webhook_operation_configs=webhook_operation_configs,
        configured_catalog=connection.catalog,
        resource_requirements=orchestrator_resource_requirements,
        source_resource_requirements=source_resource_requirements,
        destination_resource_requirements=destination_resource_requirements,
        is_source_custom_connector=is_source_custom_connector,
        is_destination_custom_connector=is_destination_custom_connector,
        workspace_id=workspace_id,
        source_definition_version_id=source_definition_version_id,
        destination_definition_version_id=destination_definition_version_id,
    )
    return JobConfig(config_type=JobKind.SYNC, sync=sync_config)


def job_build_reset_config(
    *,
    connection: ConnectionRecord,
    destination_docker_image: str,
    destination_protocol_version: str,
    operations: Sequence[SyncOperation],
    orchestrator_resource_requirements: ResourceRequirements,
    streams_to_reset: Sequence[StreamIdentity],
    is_destination_custom_connector: bool,
    workspace_id: UUID,
    destination_definition_version_id: UUID,
) -> JobConfig:
    """Build the reset-connection variant of a job configuration.

    No source connector runs during a reset, so source image, protocol
    version and requirements are not carried and the source is never custom.

    Args:
        connection: Connection being reset.
        destination_docker_image: Destination connector image reference.
        destination_protocol_version: Protocol version spoken by the destination.
        operations: Post-sync operations in execution order.
        orchestrator_resource_requirements: Resolved orchestrator requirements.
        streams_to_reset: Reset target streams.
        is_destination_custom_connector: Whether the destination is a custom connector.
        workspace_id: Owning workspace identifier.
        destination_definition_version_id: Destination definition version identifier.

    Returns:
        JobConfig: Reset-connection job configuration.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    reset_targets = tuple(streams_to_reset)
    reset_config = JobResetConnectionConfig(
        namespace_definition=connection.namespace_definition,
        namespace_format=connection.namespace_format,
        prefix=connection.prefix,
        destination_docker_image=destination_docker_image,
        destination_protocol_version=destination_protocol_version,
        operation_sequence=tuple(operations),
        configured_catalog=job_reset_rewrite_catalog(connection.catalog, reset_targets),
        resource_requirements=orchestrator_resource_requirements,
        reset_source_configuration=ResetSourceConfiguration(streams_to_reset=reset_targets),
        is_source_custom_connector=False,
        is_destination_custom_connector=is_destination_custom_connector,
        workspace_id=workspace_id,
        destination_definition_version_id=destination_definition_version_id,
    )
    return JobConfig(config_type=JobKind.RESET_CONNECTION, reset_connection=reset_config)
