"""Resolution of deployment overrides against platform defaults.

For every field the override wins when present, otherwise the default is
kept. Scalars and nested records are resolved leaf by leaf, so a deployment
can change ``limits.cpu`` alone and keep the platform ``limits.memory``. List
fields are never merged: a non-empty override list replaces the default list
as a whole, and an empty one inherits it.
"""

import logging
from copy import deepcopy
from typing import Any, Optional

from pydantic import BaseModel

from .properties import DeployerProperties, DeploymentOverrides, EffectiveConfiguration

logger = logging.getLogger(__name__)


def _resolve_value(default: Any, override: Any, path: str, overridden: list[str]) -> Any:
    if override is None:
        return deepcopy(default)
    if isinstance(override, list):
        if not override:
            return deepcopy(default)
        overridden.append(path)
        return deepcopy(override)
    if isinstance(override, BaseModel) and isinstance(default, BaseModel):
        return type(default).model_construct(**_resolve_fields(default, override, path + ".", overridden))

    overridden.append(path)
    return deepcopy(override)


def _resolve_fields(default: BaseModel, override: BaseModel, prefix: str, overridden: list[str]) -> dict[str, Any]:
    return {
        name: _resolve_value(
            getattr(default, name),
            getattr(override, name, None),
            prefix + (field.alias or name),
            overridden,
        )
        for name, field in type(default).model_fields.items()
    }


def resolve(defaults: DeployerProperties, overrides: Optional[DeploymentOverrides] = None) -> EffectiveConfiguration:
    """Apply the overrides of one deployment to the platform defaults.

    Neither argument is modified and the result shares no mutable state
    with them.
    """
    if overrides is None:
        return defaults.model_copy(deep=True)

    overridden: list[str] = []
    effective = EffectiveConfiguration.model_construct(**_resolve_fields(defaults, overrides, "", overridden))
    if overridden:
        logger.debug(f"Deployment overrides applied to: {', '.join(overridden)}")
    return effective
