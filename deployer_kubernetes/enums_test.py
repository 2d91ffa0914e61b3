from deployer_kubernetes.enums import EntryPointStyle, ImagePullPolicy


def test_str_representation():
    assert str(EntryPointStyle.exec) == "exec"
    assert str(EntryPointStyle.boot) == "boot"
    assert str(ImagePullPolicy.IfNotPresent) == "IfNotPresent"


def test_values_compare_to_strings():
    assert EntryPointStyle("shell") is EntryPointStyle.shell
    assert ImagePullPolicy.Never == "Never"
    assert [policy.value for policy in ImagePullPolicy] == ["IfNotPresent", "Always", "Never"]
