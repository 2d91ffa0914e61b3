import re
from typing import Annotated, Any, Dict

from kubernetes_asyncio.client import models
from kubernetes_asyncio.client.models import (
    V1NodeAffinity,
    V1PodAffinity,
    V1PodAntiAffinity,
    V1Volume,
    V1VolumeMount,
)
from pydantic import BeforeValidator, WrapSerializer

_LIST_TYPE = re.compile(r"^list\[(.+)\]$")
_DICT_TYPE = re.compile(r"^dict\(([^,]+), (.+)\)$")


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value]
    return value


def k8s_obj_to_dict(value: Any, handler, info) -> Dict[str, Any]:
    return _drop_none(value.to_dict(serialize=True))


def k8s_obj_from_data(data: Any, type_name: str) -> Any:
    """Build a kubernetes model from its camelCase (or snake_case) mapping.

    ``type_name`` uses the openapi notation of the generated models, e.g.
    ``V1Volume``, ``list[V1KeyToPath]`` or ``dict(str, str)``. Primitive types
    are returned untouched.
    """
    if data is None:
        return None
    if match := _LIST_TYPE.match(type_name):
        return [k8s_obj_from_data(item, match.group(1)) for item in data]
    if match := _DICT_TYPE.match(type_name):
        return {key: k8s_obj_from_data(item, match.group(2)) for key, item in data.items()}

    klass = getattr(models, type_name, None)
    if klass is None or isinstance(data, klass) or not isinstance(data, dict):
        return data

    kwargs = {}
    for attr, attr_type in klass.openapi_types.items():
        key = klass.attribute_map[attr]
        if key in data:
            kwargs[attr] = k8s_obj_from_data(data[key], attr_type)
        elif attr in data:
            kwargs[attr] = k8s_obj_from_data(data[attr], attr_type)
    return klass(**kwargs)


def _validate_k8s_obj(klass: type):
    def validate(value: Any) -> Any:
        return k8s_obj_from_data(value, klass.__name__)

    return validate


SerializeV1Volume = Annotated[V1Volume, BeforeValidator(_validate_k8s_obj(V1Volume)), WrapSerializer(k8s_obj_to_dict)]
SerializeV1VolumeMount = Annotated[
    V1VolumeMount, BeforeValidator(_validate_k8s_obj(V1VolumeMount)), WrapSerializer(k8s_obj_to_dict)
]
SerializeV1NodeAffinity = Annotated[
    V1NodeAffinity, BeforeValidator(_validate_k8s_obj(V1NodeAffinity)), WrapSerializer(k8s_obj_to_dict)
]
SerializeV1PodAffinity = Annotated[
    V1PodAffinity, BeforeValidator(_validate_k8s_obj(V1PodAffinity)), WrapSerializer(k8s_obj_to_dict)
]
SerializeV1PodAntiAffinity = Annotated[
    V1PodAntiAffinity, BeforeValidator(_validate_k8s_obj(V1PodAntiAffinity)), WrapSerializer(k8s_obj_to_dict)
]
