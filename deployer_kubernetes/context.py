import logging
from typing import Any, Mapping, Optional

from .properties import DeployerProperties, DeploymentOverrides, EffectiveConfiguration
from .resolve import resolve

logger = logging.getLogger(__name__)


class DeployerContext:
    """Handle on the platform defaults of a deployer instance, passed to every deployment request.

    The defaults are copied when the context is created and handed out only
    as copies, so no caller can change what later requests resolve against.
    The context never writes to its copy and may be shared between threads.
    """

    _defaults: DeployerProperties

    def __init__(self, defaults: Optional[DeployerProperties] = None):
        if defaults is None:
            defaults = DeployerProperties()
        self._defaults = defaults.model_copy(deep=True)
        logger.debug(f"Deployer context created for namespace {self._defaults.namespace or '<unset>'}")

    @property
    def defaults(self) -> DeployerProperties:
        """A copy of the platform defaults; changing it does not affect later resolutions."""
        return self._defaults.model_copy(deep=True)

    def resolve(self, overrides: Optional[DeploymentOverrides] = None) -> EffectiveConfiguration:
        return resolve(self._defaults, overrides)

    def resolve_properties(self, properties: Mapping[str, Any]) -> EffectiveConfiguration:
        """Resolve the effective configuration of a deployment from its declared properties."""
        return self.resolve(DeploymentOverrides.from_properties(properties))
