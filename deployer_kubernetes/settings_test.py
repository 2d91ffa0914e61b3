import logging
from pathlib import Path

import pytest

from deployer_kubernetes import (
    DeployerProperties,
    DeployerSettings,
    PropertiesFileNotFoundError,
    create_context,
    load_platform_defaults,
)


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("DEPLOYER_KUBERNETES_CONFIG", str(tmp_path / "deployer.yaml"))
    monkeypatch.setenv("DEPLOYER_KUBERNETES_NAMESPACE", "apps")

    settings = DeployerSettings()

    assert settings.config == tmp_path / "deployer.yaml"
    assert settings.namespace == "apps"


def test_settings_not_set():
    settings = DeployerSettings()
    assert settings.config is None
    assert settings.namespace is None


def test_load_platform_defaults_builtin(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO):
        defaults = load_platform_defaults(DeployerSettings())

    assert defaults == DeployerProperties()
    assert "using built-in defaults" in caplog.text


def test_load_platform_defaults_from_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    path = tmp_path / "deployer.yaml"
    path.write_text("namespace: from-file\nmaximumConcurrentTasks: 4\n", encoding="utf-8")
    monkeypatch.setenv("DEPLOYER_KUBERNETES_CONFIG", str(path))

    defaults = load_platform_defaults()

    assert defaults.namespace == "from-file"
    assert defaults.maximum_concurrent_tasks == 4


def test_load_platform_defaults_namespace_wins(tmp_path: Path):
    path = tmp_path / "deployer.yaml"
    path.write_text("namespace: from-file\n", encoding="utf-8")

    defaults = load_platform_defaults(DeployerSettings(config=path, namespace="from-env"))

    assert defaults.namespace == "from-env"


def test_load_platform_defaults_missing_file(tmp_path: Path):
    with pytest.raises(PropertiesFileNotFoundError):
        load_platform_defaults(DeployerSettings(config=tmp_path / "missing.yaml"))


def test_create_context(tmp_path: Path):
    path = tmp_path / "deployer.yaml"
    path.write_text("limits:\n  cpu: 500m\n", encoding="utf-8")

    context = create_context(DeployerSettings(config=path))

    assert context.defaults.limits.cpu == "500m"
    assert context.resolve().limits.cpu == "500m"
