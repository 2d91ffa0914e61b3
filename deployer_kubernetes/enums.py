"""Enumerated deployer settings."""

from enum import Enum
from typing import Annotated

from pydantic import BeforeValidator


class EntryPointStyle(str, Enum):
    """How application arguments are passed into the container entrypoint."""

    exec = "exec"
    """Arguments are passed as command line arguments"""

    shell = "shell"
    """Arguments are passed as environment variables"""

    boot = "boot"
    """Arguments are passed as a single JSON environment variable"""

    def __str__(self):
        return self.value


class ImagePullPolicy(str, Enum):
    """When the kubelet pulls the container image."""

    IfNotPresent = "IfNotPresent"
    """Pull only if the image is not already present on the node"""

    Always = "Always"
    """Always pull the image"""

    Never = "Never"
    """Never pull, the image must already be present on the node"""

    def __str__(self):
        return self.value


def _known_or_opaque(enum_type: type[Enum]):
    def validate(value):
        if isinstance(value, str) and not isinstance(value, Enum) and value in enum_type._value2member_map_:
            return enum_type(value)
        return value

    return validate


# Unknown spellings are kept as plain strings for the workload builder to reject
EntryPointStyleValue = Annotated[EntryPointStyle | str, BeforeValidator(_known_or_opaque(EntryPointStyle))]
ImagePullPolicyValue = Annotated[ImagePullPolicy | str, BeforeValidator(_known_or_opaque(ImagePullPolicy))]
