"""References from container environment variables to secrets and config maps.

A key reference maps one environment variable onto one key of a named secret
or config map. The two variants share their shape but are kept as separate
records; ``KeyRef`` is their union and ``source`` tells them apart.
"""

from typing import Literal, Optional

from .json import JsonBaseModel


class SecretKeyRef(JsonBaseModel):
    env_var_name: Optional[str] = None
    data_key: Optional[str] = None
    secret_name: Optional[str] = None

    @property
    def source(self) -> Literal["secret"]:
        return "secret"

    @property
    def source_name(self) -> Optional[str]:
        return self.secret_name


class ConfigMapKeyRef(JsonBaseModel):
    env_var_name: Optional[str] = None
    data_key: Optional[str] = None
    config_map_name: Optional[str] = None

    @property
    def source(self) -> Literal["configMap"]:
        return "configMap"

    @property
    def source_name(self) -> Optional[str]:
        return self.config_map_name


KeyRef = SecretKeyRef | ConfigMapKeyRef
