"""Binding of flat, dotted deployer properties onto nested mappings.

Operators and deployment requests declare settings as flat key/value pairs
such as ``deployer.kubernetes.limits.cpu=500m`` or
``deployer.kubernetes.tolerations[0].key=gpu``. This module turns those into
the nested mappings the configuration models validate. Segments may be written
in camelCase or kebab-case; ``name[i]`` addresses a list element.
"""

import logging
import re
from typing import Any, Mapping

from .exceptions import PropertyBindingError

logger = logging.getLogger(__name__)

PROPERTIES_PREFIX = "deployer.kubernetes"
DEPLOYMENT_NODE_SELECTOR = f"{PROPERTIES_PREFIX}.deployment.nodeSelector"

_SEGMENT = re.compile(r"^(?P<name>[A-Za-z][A-Za-z0-9_-]*)(?P<indexes>(?:\[\d+\])*)$")
_INDEX = re.compile(r"\[(\d+)\]")


def deployment_node_selector_key(prefix: str = PROPERTIES_PREFIX) -> str:
    return f"{prefix}.deployment.nodeSelector"


def kebab_to_camel(name: str) -> str:
    head, *rest = name.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def parse_path(key: str, path: str) -> list[str | int]:
    """Split ``limits.cpu`` or ``tolerations[0].key`` into ``["limits", "cpu"]`` / ``["tolerations", 0, "key"]``."""
    if not path:
        raise PropertyBindingError(key, "empty property path")

    segments: list[str | int] = []
    for part in path.split("."):
        match = _SEGMENT.match(part)
        if match is None:
            raise PropertyBindingError(key, f'malformed segment "{part}"')
        segments.append(kebab_to_camel(match.group("name")))
        segments.extend(int(index) for index in _INDEX.findall(match.group("indexes")))
    return segments


def _assign(tree: dict, segments: list[str | int], value: Any, key: str):
    node = tree
    for segment in segments[:-1]:
        child = node.get(segment)
        if child is None:
            child = node[segment] = {}
        elif not isinstance(child, dict):
            raise PropertyBindingError(key, f'"{segment}" is already bound to a plain value')
        node = child

    last = segments[-1]
    if isinstance(node.get(last), dict):
        raise PropertyBindingError(key, f'"{last}" is already bound to nested properties')
    node[last] = value


def _collapse_lists(node: Any) -> Any:
    if not isinstance(node, dict):
        return node
    collapsed = {key: _collapse_lists(value) for key, value in node.items()}
    if collapsed and all(isinstance(key, int) for key in collapsed):
        return [collapsed[index] for index in sorted(collapsed)]
    return collapsed


def bind_properties(properties: Mapping[str, Any], prefix: str = PROPERTIES_PREFIX) -> dict[str, Any]:
    """Bind the properties under ``prefix`` into a nested mapping.

    Keys outside the prefix are skipped. List indexes are ordered but need
    not be contiguous.
    """
    tree: dict = {}
    for key, value in properties.items():
        if not key.startswith(prefix + "."):
            continue
        _assign(tree, parse_path(key, key[len(prefix) + 1 :]), value, key)

    bound = _collapse_lists(tree)
    logger.debug(f"Bound {len(bound)} top-level properties under {prefix}")
    return bound
