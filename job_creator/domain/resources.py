"""Resource requirement contracts and the per-field layer merge.

Requirement fields are individually optional. An unset field means the value
is inherited from the next layer in precedence order, never an explicit zero.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum


class ResourceRole(str, Enum):
    """Execution process kinds that receive a resource requirement set."""

    ORCHESTRATOR = "orchestrator"
    SOURCE = "source"
    DESTINATION = "destination"


class JobKind(str, Enum):
    """Job configuration variants produced by the job creator."""

    SYNC = "sync"
    RESET_CONNECTION = "reset_connection"


@dataclass(frozen=True)
class ResourceRequirements:
    """Compute resource hints for one process role.

    Attributes:
        cpu_request: Optional CPU request quantity.
        cpu_limit: Optional CPU limit quantity.
        memory_request: Optional memory request quantity.
        memory_limit: Optional memory limit quantity.
    """

    cpu_request: str | None = None
    cpu_limit: str | None = None
    memory_request: str | None = None
    memory_limit: str | None = None

    def resource_requirements_is_complete(self) -> bool:
        """Return whether every requirement field is set.

        Returns:
            bool: True when no field is left to inherit.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return all(getattr(self, field_name) is not None for field_name in RESOURCE_REQUIREMENT_FIELDS)


RESOURCE_REQUIREMENT_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(ResourceRequirements))


@dataclass(frozen=True)
class JobTypeResourceRequirements:
    """Connector requirements that apply to one job kind only.

    Attributes:
        job_kind: Job kind the requirements apply to.
        resource_requirements: Requirement values for that job kind.
    """

    job_kind: JobKind
    resource_requirements: ResourceRequirements


@dataclass(frozen=True)
class ConnectorResourceRequirements:
    """Requirements declared by a connector definition.

    Attributes:
        default: Requirements applied to every job kind.
        job_specific: Requirements that outrank `default` for a given job kind.
    """

    default: ResourceRequirements | None = None
    job_specific: tuple[JobTypeResourceRequirements, ...] = ()

    def connector_requirements_for_job_kind(self, job_kind: JobKind) -> ResourceRequirements | None:
        """Return the job-kind specific requirements, if declared.

        Args:
            job_kind: Job kind being created.

        Returns:
            ResourceRequirements | None: First matching job-specific entry or None.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        for job_type_requirements in self.job_specific:
            if job_type_requirements.job_kind == job_kind:
                return job_type_requirements.resource_requirements
        return None


def domain_resource_requirements_merge(*layers: ResourceRequirements | None) -> ResourceRequirements:
    """Merge requirement layers field by field in precedence order.

    The first layer with a field set wins for that field. `None` layers are
    skipped entirely.

    Args:
        layers: Requirement layers ordered from highest to lowest precedence.

    Returns:
        ResourceRequirements: Merged requirement set.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    present_layers = [layer for layer in layers if layer is not None]
    merged_values: dict[str, str | None] = {}
    for field_name in RESOURCE_REQUIREMENT_FIELDS:
        merged_values[field_name] = next(
            (getattr(layer, field_name) for layer in present_layers if getattr(layer, field_name) is not None),
            None,
        )
    return ResourceRequirements(**merged_values)
