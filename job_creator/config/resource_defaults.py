"""Settings-backed default resource requirements per role and connector variant."""

from __future__ import annotations

from job_creator.domain import ResourceRequirements, ResourceRole, domain_resource_requirements_merge

from .settings import AppSettings


class ConfigResourceRequirementsProvider:
    """Resolve role defaults from `role.variant`, `role` and base settings entries.

    Every lookup is the same keyed merge, so adding a role or variant only
    needs a new settings entry.
    """

    def __init__(
        self,
        base_requirements: ResourceRequirements,
        overrides: dict[str, ResourceRequirements] | None = None,
    ):
        """Initialize provider lookup layers.

        Args:
            base_requirements: Complete fallback requirements for every role.
            overrides: Partial requirements keyed by `role` or `role.variant`.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when base requirements leave a field unset.
        """

        if base_requirements is None:
            raise ValueError("base_requirements must not be None")
        if not base_requirements.resource_requirements_is_complete():
            raise ValueError("base_requirements must set every resource requirement field")
        self._base_requirements = base_requirements
        self._overrides = dict(overrides or {})

    @classmethod
    def from_settings(cls, settings: AppSettings) -> ConfigResourceRequirementsProvider:
        """Build a provider from validated application settings.

        Args:
            settings: Validated application settings.

        Returns:
            ConfigResourceRequirementsProvider: Provider over the configured defaults.

        Raises:
            ValueError: Raised when the configured base requirements are incomplete.
        """

        base_requirements = ResourceRequirements(
            cpu_request=settings.job_main_container_cpu_request,
            cpu_limit=settings.job_main_container_cpu_limit,
            memory_request=settings.job_main_container_memory_request,
            memory_limit=settings.job_main_container_memory_limit,
        )
        overrides = {
            override_key: ResourceRequirements(**override_fields)
            for override_key, override_fields in settings.job_resource_overrides.items()
        }
        return cls(base_requirements=base_requirements, overrides=overrides)

    def config_resource_requirements_get(
        self,
        role: ResourceRole,
        variant_key: str | None = None,
    ) -> ResourceRequirements:
        """Return fully specified default requirements for one role and variant.

        Args:
            role: Process role.
            variant_key: Optional connector variant such as a source type.

        Returns:
            ResourceRequirements: Complete default requirements.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        role_key = role.value
        variant_layer = None
        if variant_key is not None and variant_key.strip():
            variant_layer = self._overrides.get(f"{role_key}.{variant_key.strip().lower()}")
        return domain_resource_requirements_merge(
            variant_layer,
            self._overrides.get(role_key),
            self._base_requirements,
        )
