"""Custom exceptions for the deployer-kubernetes package.

The configuration schema itself never raises: values are accepted as opaque
data and checked, if at all, by whatever builds the workload from them. The
exceptions below belong to the loaders that populate the schema from
properties, YAML files and the environment.
"""


class DeployerKubernetesError(Exception):
    """Base exception for all deployer-kubernetes errors."""

    pass


class PropertiesFileNotFoundError(DeployerKubernetesError, FileNotFoundError):
    """Raised when a deployer properties file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Deployer properties file "{path}" does not exist')


class PropertiesFormatError(DeployerKubernetesError):
    """Raised when a deployer properties file cannot be parsed."""

    def __init__(self, path: str, cause: Exception = None):
        self.path = path
        self.cause = cause
        if cause:
            message = f'Failed to parse deployer properties "{path}": {cause}'
        else:
            message = f'Deployer properties "{path}" must contain a mapping'
        super().__init__(message)


class PropertyBindingError(DeployerKubernetesError):
    """Raised when a dotted property key cannot be bound to the schema."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f'Cannot bind property "{key}": {reason}')
