from typing import Optional

from pydantic import Field

from .json import JsonBaseModel


class ResourceLimits(JsonBaseModel):
    """Container resource limits. Quantities are kept as given, e.g. ``500m`` or ``512Mi``."""

    cpu: Optional[str] = None
    memory: Optional[str] = None
    gpu_vendor: Optional[str] = None
    gpu_count: Optional[str] = None


class ResourceRequests(JsonBaseModel):
    """Container resource requests."""

    cpu: Optional[str] = None
    memory: Optional[str] = None


class VolumeClaimTemplate(JsonBaseModel):
    storage: str = Field(default="10m")
    storage_class_name: Optional[str] = None


class StatefulSet(JsonBaseModel):
    volume_claim_template: VolumeClaimTemplate = Field(default_factory=VolumeClaimTemplate)


class VolumeClaimTemplateOverrides(JsonBaseModel):
    storage: Optional[str] = None
    storage_class_name: Optional[str] = None


class StatefulSetOverrides(JsonBaseModel):
    volume_claim_template: Optional[VolumeClaimTemplateOverrides] = None
