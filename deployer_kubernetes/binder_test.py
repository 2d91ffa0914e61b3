import pytest

from deployer_kubernetes.binder import bind_properties, kebab_to_camel, parse_path
from deployer_kubernetes.exceptions import PropertyBindingError


def test_kebab_to_camel():
    assert kebab_to_camel("liveness-probe-delay") == "livenessProbeDelay"
    assert kebab_to_camel("namespace") == "namespace"
    assert kebab_to_camel("imagePullPolicy") == "imagePullPolicy"


def test_parse_path_with_indexes():
    assert parse_path("k", "limits.cpu") == ["limits", "cpu"]
    assert parse_path("k", "tolerations[0].key") == ["tolerations", 0, "key"]
    assert parse_path("k", "stateful-set.volume-claim-template.storage") == [
        "statefulSet",
        "volumeClaimTemplate",
        "storage",
    ]


@pytest.mark.parametrize("path", ["", "tolerations[x].key", "limits..cpu", "[0]"])
def test_parse_path_malformed_raises(path):
    with pytest.raises(PropertyBindingError):
        parse_path(f"deployer.kubernetes.{path}", path)


def test_bind_properties_nested():
    bound = bind_properties(
        {
            "deployer.kubernetes.limits.cpu": "500m",
            "deployer.kubernetes.limits.memory": "512Mi",
            "deployer.kubernetes.namespace": "apps",
            "deployer.kubernetes.liveness-probe-delay": "30",
        }
    )
    assert bound == {
        "limits": {"cpu": "500m", "memory": "512Mi"},
        "namespace": "apps",
        "livenessProbeDelay": "30",
    }


def test_bind_properties_skips_foreign_keys():
    bound = bind_properties(
        {
            "deployer.kubernetes.namespace": "apps",
            "deployer.local.namespace": "ignored",
            "deployer.kubernetesx.namespace": "ignored",
            "server.port": "8080",
        }
    )
    assert bound == {"namespace": "apps"}


def test_bind_properties_lists_are_ordered_by_index():
    bound = bind_properties(
        {
            "deployer.kubernetes.tolerations[2].key": "c",
            "deployer.kubernetes.tolerations[0].key": "a",
            "deployer.kubernetes.tolerations[0].effect": "NoSchedule",
            "deployer.kubernetes.tolerations[1].key": "b",
        }
    )
    assert bound == {"tolerations": [{"key": "a", "effect": "NoSchedule"}, {"key": "b"}, {"key": "c"}]}


def test_bind_properties_scalar_list():
    bound = bind_properties(
        {
            "deployer.kubernetes.secretRefs[1]": "second",
            "deployer.kubernetes.secretRefs[0]": "first",
        }
    )
    assert bound == {"secretRefs": ["first", "second"]}


def test_bind_properties_custom_prefix():
    assert bind_properties({"my.deployer.namespace": "apps"}, prefix="my.deployer") == {"namespace": "apps"}


def test_bind_properties_conflicting_keys_raise():
    with pytest.raises(PropertyBindingError, match='"limits" is already bound to a plain value'):
        bind_properties({"deployer.kubernetes.limits": "1", "deployer.kubernetes.limits.cpu": "500m"})

    with pytest.raises(PropertyBindingError, match='"limits" is already bound to nested properties'):
        bind_properties({"deployer.kubernetes.limits.cpu": "500m", "deployer.kubernetes.limits": "1"})
