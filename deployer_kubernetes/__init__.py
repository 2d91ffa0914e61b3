from .binder import DEPLOYMENT_NODE_SELECTOR, PROPERTIES_PREFIX, bind_properties, deployment_node_selector_key
from .containers import InitContainer
from .context import DeployerContext
from .enums import EntryPointStyle, ImagePullPolicy
from .exceptions import (
    DeployerKubernetesError,
    PropertiesFileNotFoundError,
    PropertiesFormatError,
    PropertyBindingError,
)
from .probes import ProbeSettings
from .properties import KUBERNETES_NAMESPACE, DeployerProperties, DeploymentOverrides, EffectiveConfiguration
from .refs import ConfigMapKeyRef, KeyRef, SecretKeyRef
from .resolve import resolve
from .resources import (
    ResourceLimits,
    ResourceRequests,
    StatefulSet,
    StatefulSetOverrides,
    VolumeClaimTemplate,
    VolumeClaimTemplateOverrides,
)
from .scheduling import PodSecurityContext, Toleration
from .settings import DeployerSettings, create_context, load_platform_defaults

__all__ = [
    "PROPERTIES_PREFIX",
    "DEPLOYMENT_NODE_SELECTOR",
    "KUBERNETES_NAMESPACE",
    "bind_properties",
    "deployment_node_selector_key",
    "DeployerProperties",
    "DeploymentOverrides",
    "EffectiveConfiguration",
    "resolve",
    "DeployerContext",
    "DeployerSettings",
    "load_platform_defaults",
    "create_context",
    "EntryPointStyle",
    "ImagePullPolicy",
    "ProbeSettings",
    "ResourceLimits",
    "ResourceRequests",
    "StatefulSet",
    "StatefulSetOverrides",
    "VolumeClaimTemplate",
    "VolumeClaimTemplateOverrides",
    "Toleration",
    "PodSecurityContext",
    "SecretKeyRef",
    "ConfigMapKeyRef",
    "KeyRef",
    "InitContainer",
    "DeployerKubernetesError",
    "PropertiesFileNotFoundError",
    "PropertiesFormatError",
    "PropertyBindingError",
]
