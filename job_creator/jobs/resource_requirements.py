"""Effective resource requirement resolution per job process role."""

from __future__ import annotations

import logging
from typing import Final

from job_creator.config import config_log_event
from job_creator.domain import (
    ConnectorResourceRequirements,
    JobKind,
    ResourceRequirements,
    ResourceRole,
    domain_resource_requirements_merge,
)

logger = logging.getLogger(__name__)

CONNECTOR_LAYER_ROLES: Final[frozenset[ResourceRole]] = frozenset({ResourceRole.SOURCE, ResourceRole.DESTINATION})


def job_resolve_resource_requirements(
    role: ResourceRole,
    variant_key: str | None,
    connection_override: ResourceRequirements | None,
    connector_default: ConnectorResourceRequirements | None,
    role_type_default: ResourceRequirements,
    job_kind: JobKind = JobKind.SYNC,
) -> ResourceRequirements:
    """Merge requirement layers into the effective set for one role.

    Precedence per field, highest first: connection override, connector
    requirements for `job_kind`, connector default, role-type default. Roles
    outside `CONNECTOR_LAYER_ROLES` never read the connector layers.

    Args:
        role: Process role being resolved.
        variant_key: Connector variant the role default was looked up with.
        connection_override: Optional connection-level requirements.
        connector_default: Optional connector definition requirements.
        role_type_default: Complete default for `(role, variant_key)`.
        job_kind: Job kind selecting connector job-specific requirements.

    Returns:
        ResourceRequirements: Effective requirements for the role.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    connector_job_layer = None
    connector_default_layer = None
    if role in CONNECTOR_LAYER_ROLES and connector_default is not None:
        connector_job_layer = connector_default.connector_requirements_for_job_kind(job_kind)
        connector_default_layer = connector_default.default

    resolved_requirements = domain_resource_requirements_merge(
        connection_override,
        connector_job_layer,
        connector_default_layer,
        role_type_default,
    )
    config_log_event(
        logger,
        "resource_requirements_resolved",
        level=logging.DEBUG,
        role=role.value,
        variant_key=variant_key,
        job_kind=job_kind.value,
        has_connection_override=connection_override is not None,
        has_connector_job_layer=connector_job_layer is not None,
        has_connector_default_layer=connector_default_layer is not None,
    )
    return resolved_requirements
