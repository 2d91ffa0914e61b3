from typing import Optional

from .json import JsonBaseModel


class Toleration(JsonBaseModel):
    """A scheduling toleration rule, copied as-is onto the pod spec."""

    key: Optional[str] = None
    operator: Optional[str] = None
    value: Optional[str] = None
    effect: Optional[str] = None
    toleration_seconds: Optional[int] = None


class PodSecurityContext(JsonBaseModel):
    run_as_user: Optional[int] = None
    fs_group: Optional[int] = None
