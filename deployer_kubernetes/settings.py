import logging
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .context import DeployerContext
from .properties import DeployerProperties

logger = logging.getLogger(__name__)


class DeployerSettings(BaseSettings):
    """Startup settings read from ``DEPLOYER_KUBERNETES_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="DEPLOYER_KUBERNETES_")

    config: Optional[Path] = Field(default=None)
    namespace: Optional[str] = Field(default=None)


def load_platform_defaults(settings: Optional[DeployerSettings] = None) -> DeployerProperties:
    """Load the platform defaults once at startup.

    Reads the YAML file named by ``DEPLOYER_KUBERNETES_CONFIG`` when set, then
    applies ``DEPLOYER_KUBERNETES_NAMESPACE`` on top.
    """
    settings = settings or DeployerSettings()

    if settings.config is not None:
        defaults = DeployerProperties.load_path(settings.config)
        logger.info(f"Loaded deployer properties from {settings.config}")
    else:
        defaults = DeployerProperties()
        logger.info("No deployer properties file configured, using built-in defaults")

    if settings.namespace is not None:
        defaults.namespace = settings.namespace

    logger.debug(f"Deploying into namespace {defaults.namespace or '<unset>'}")
    return defaults


def create_context(settings: Optional[DeployerSettings] = None) -> DeployerContext:
    return DeployerContext(load_platform_defaults(settings))
