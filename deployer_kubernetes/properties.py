"""The deployer configuration schema.

``DeployerProperties`` holds the platform-wide defaults of a deployer
instance. ``DeploymentOverrides`` has the same fields, all optional, and is
built from the properties of a single deployment request. The two are combined
by :func:`deployer_kubernetes.resolve.resolve`.

Nothing here validates ranges or formats: quantities, annotations and node
selectors are opaque strings, and unknown enum spellings are kept as strings.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Self

import yaml
from pydantic import Field, field_validator

from .binder import PROPERTIES_PREFIX, bind_properties, deployment_node_selector_key
from .containers import InitContainer
from .enums import EntryPointStyle, EntryPointStyleValue, ImagePullPolicy, ImagePullPolicyValue
from .exceptions import PropertiesFileNotFoundError, PropertiesFormatError
from .json import JsonBaseModel
from .probes import ProbeSettings
from .refs import ConfigMapKeyRef, KeyRef, SecretKeyRef
from .resources import ResourceLimits, ResourceRequests, StatefulSet, StatefulSetOverrides
from .scheduling import PodSecurityContext, Toleration
from .serialize import (
    SerializeV1NodeAffinity,
    SerializeV1PodAffinity,
    SerializeV1PodAntiAffinity,
    SerializeV1Volume,
    SerializeV1VolumeMount,
)

logger = logging.getLogger(__name__)

KUBERNETES_NAMESPACE = "KUBERNETES_NAMESPACE"

_COMMA_SEPARATED_FIELDS = ("config_map_refs", "secret_refs", "environment_variables")


def _split_comma_separated(v: Any) -> Any:
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return v


class _PropertiesModel(JsonBaseModel):
    @classmethod
    def _from_bound(cls, data: dict[str, Any]) -> Self:
        for key in data:
            if key not in cls.model_fields and not any(f.alias == key for f in cls.model_fields.values()):
                logger.debug(f"Ignoring unknown property {PROPERTIES_PREFIX}.{key}")
        return cls.model_validate(data)

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any], prefix: str = PROPERTIES_PREFIX) -> Self:
        """Build from flat dotted properties, e.g. ``{"deployer.kubernetes.limits.cpu": "500m"}``."""
        return cls._from_bound(bind_properties(properties, prefix))

    @classmethod
    def from_str(cls, text: str, path: str = "<string>") -> Self:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise PropertiesFormatError(path, e) from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PropertiesFormatError(path)
        return cls._from_bound(data)

    @classmethod
    def load_path(cls, path: str | Path) -> Self:
        path = Path(path)
        try:
            text = path.read_text()
        except FileNotFoundError as e:
            raise PropertiesFileNotFoundError(str(path)) from e
        logger.debug(f"Loading deployer properties from {path}")
        return cls.from_str(text, str(path))


class DeployerProperties(_PropertiesModel):
    """Platform-wide deployer settings, applied to every deployment unless overridden."""

    namespace: Optional[str] = Field(default_factory=lambda: os.environ.get(KUBERNETES_NAMESPACE))
    maximum_concurrent_tasks: int = Field(default=20)

    liveness_probe_delay: int = Field(default=10)
    liveness_probe_period: int = Field(default=60)
    liveness_probe_timeout: int = Field(default=2)
    liveness_probe_path: Optional[str] = None
    liveness_probe_port: Optional[int] = None

    readiness_probe_delay: int = Field(default=10)
    readiness_probe_period: int = Field(default=10)
    readiness_probe_timeout: int = Field(default=2)
    readiness_probe_path: Optional[str] = None
    readiness_probe_port: Optional[int] = None

    probe_credentials_secret: Optional[str] = None

    limits: ResourceLimits = Field(default_factory=ResourceLimits)
    requests: ResourceRequests = Field(default_factory=ResourceRequests)

    tolerations: list[Toleration] = Field(default_factory=list)
    secret_key_refs: list[SecretKeyRef] = Field(default_factory=list)
    config_map_key_refs: list[ConfigMapKeyRef] = Field(default_factory=list)
    config_map_refs: list[str] = Field(default_factory=list)
    secret_refs: list[str] = Field(default_factory=list)

    stateful_set: StatefulSet = Field(default_factory=StatefulSet)
    environment_variables: list[str] = Field(default_factory=list)
    entry_point_style: EntryPointStyleValue = Field(default=EntryPointStyle.exec)

    create_load_balancer: bool = Field(default=False)
    service_annotations: Optional[str] = None
    pod_annotations: Optional[str] = None
    job_annotations: Optional[str] = None

    minutes_to_wait_for_load_balancer: int = Field(default=5)
    max_terminated_error_restarts: int = Field(default=2)
    max_crash_loop_back_off_restarts: int = Field(default=4)

    image_pull_policy: ImagePullPolicyValue = Field(default=ImagePullPolicy.IfNotPresent)
    image_pull_secret: Optional[str] = None

    volume_mounts: list[SerializeV1VolumeMount] = Field(default_factory=list)
    volumes: list[SerializeV1Volume] = Field(default_factory=list)

    host_network: bool = Field(default=False)
    create_job: bool = Field(default=False)
    node_selector: Optional[str] = None
    deployment_service_account_name: Optional[str] = None
    pod_security_context: Optional[PodSecurityContext] = None

    node_affinity: Optional[SerializeV1NodeAffinity] = None
    pod_affinity: Optional[SerializeV1PodAffinity] = None
    pod_anti_affinity: Optional[SerializeV1PodAntiAffinity] = None

    stateful_set_init_container_image_name: Optional[str] = None
    init_container: Optional[InitContainer] = None

    @field_validator(*_COMMA_SEPARATED_FIELDS, mode="before")
    @classmethod
    def decode_comma_separated(cls, v: str | list[str]) -> list[str]:
        return _split_comma_separated(v)

    @property
    def liveness_probe(self) -> ProbeSettings:
        return ProbeSettings(
            delay_seconds=self.liveness_probe_delay,
            period_seconds=self.liveness_probe_period,
            timeout_seconds=self.liveness_probe_timeout,
            path=self.liveness_probe_path,
            port=self.liveness_probe_port,
        )

    @property
    def readiness_probe(self) -> ProbeSettings:
        return ProbeSettings(
            delay_seconds=self.readiness_probe_delay,
            period_seconds=self.readiness_probe_period,
            timeout_seconds=self.readiness_probe_timeout,
            path=self.readiness_probe_path,
            port=self.readiness_probe_port,
        )

    def key_refs(self) -> list[KeyRef]:
        """Secret key references followed by config map key references, in declaration order."""
        return [*self.secret_key_refs, *self.config_map_key_refs]


# The configuration a workload is built from: defaults with the overrides of one deployment applied
EffectiveConfiguration = DeployerProperties


class DeploymentOverrides(_PropertiesModel):
    """Per-deployment settings. A field left as ``None`` inherits the platform default."""

    namespace: Optional[str] = None
    maximum_concurrent_tasks: Optional[int] = None

    liveness_probe_delay: Optional[int] = None
    liveness_probe_period: Optional[int] = None
    liveness_probe_timeout: Optional[int] = None
    liveness_probe_path: Optional[str] = None
    liveness_probe_port: Optional[int] = None

    readiness_probe_delay: Optional[int] = None
    readiness_probe_period: Optional[int] = None
    readiness_probe_timeout: Optional[int] = None
    readiness_probe_path: Optional[str] = None
    readiness_probe_port: Optional[int] = None

    probe_credentials_secret: Optional[str] = None

    limits: Optional[ResourceLimits] = None
    requests: Optional[ResourceRequests] = None

    tolerations: Optional[list[Toleration]] = None
    secret_key_refs: Optional[list[SecretKeyRef]] = None
    config_map_key_refs: Optional[list[ConfigMapKeyRef]] = None
    config_map_refs: Optional[list[str]] = None
    secret_refs: Optional[list[str]] = None

    stateful_set: Optional[StatefulSetOverrides] = None
    environment_variables: Optional[list[str]] = None
    entry_point_style: Optional[EntryPointStyleValue] = None

    create_load_balancer: Optional[bool] = None
    service_annotations: Optional[str] = None
    pod_annotations: Optional[str] = None
    job_annotations: Optional[str] = None

    minutes_to_wait_for_load_balancer: Optional[int] = None
    max_terminated_error_restarts: Optional[int] = None
    max_crash_loop_back_off_restarts: Optional[int] = None

    image_pull_policy: Optional[ImagePullPolicyValue] = None
    image_pull_secret: Optional[str] = None

    volume_mounts: Optional[list[SerializeV1VolumeMount]] = None
    volumes: Optional[list[SerializeV1Volume]] = None

    host_network: Optional[bool] = None
    create_job: Optional[bool] = None
    node_selector: Optional[str] = None
    deployment_service_account_name: Optional[str] = None
    pod_security_context: Optional[PodSecurityContext] = None

    node_affinity: Optional[SerializeV1NodeAffinity] = None
    pod_affinity: Optional[SerializeV1PodAffinity] = None
    pod_anti_affinity: Optional[SerializeV1PodAntiAffinity] = None

    stateful_set_init_container_image_name: Optional[str] = None
    init_container: Optional[InitContainer] = None

    @field_validator(*_COMMA_SEPARATED_FIELDS, mode="before")
    @classmethod
    def decode_comma_separated(cls, v: str | list[str] | None) -> list[str] | None:
        return _split_comma_separated(v)

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any], prefix: str = PROPERTIES_PREFIX) -> Self:
        """Build from the properties of one deployment request.

        ``<prefix>.deployment.nodeSelector`` takes precedence over
        ``<prefix>.nodeSelector``.
        """
        properties = dict(properties)
        node_selector = properties.pop(deployment_node_selector_key(prefix), None)
        data = bind_properties(properties, prefix)
        if node_selector is not None:
            data["nodeSelector"] = node_selector
        return cls._from_bound(data)
