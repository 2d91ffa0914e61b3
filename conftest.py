import pytest

from deployer_kubernetes.properties import KUBERNETES_NAMESPACE


@pytest.fixture(autouse=True)
def clean_deployer_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(KUBERNETES_NAMESPACE, raising=False)
    monkeypatch.delenv("DEPLOYER_KUBERNETES_CONFIG", raising=False)
    monkeypatch.delenv("DEPLOYER_KUBERNETES_NAMESPACE", raising=False)
