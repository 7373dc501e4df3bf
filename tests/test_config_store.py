import pytest

from volumes.domain.config_store import YamlConfigResolver


def test_get_walks_nested_keys(config_resolver: YamlConfigResolver):
    assert config_resolver.get("volume-plans:plan1:docker") == {"size": "10Gi"}
    assert config_resolver.get("volume-plans:plan1") == {
        "docker": {"size": "10Gi"},
        "kubernetes": {"storage-class": "ssd", "capacity": "20Gi"},
    }


def test_get_missing_key_raises_key_error(config_resolver: YamlConfigResolver):
    with pytest.raises(KeyError):
        config_resolver.get("volume-plans:plan1:swarm")


def test_get_through_scalar_raises_key_error(config_resolver: YamlConfigResolver):
    with pytest.raises(KeyError):
        config_resolver.get("volume-plans:scalar-plan:docker:size")


def test_from_file(tmp_path):
    path = tmp_path / "volumes.yaml"
    path.write_text(
        "volume-plans:\n"
        "  plan1:\n"
        "    docker:\n"
        "      size: 10Gi\n"
        "  2019:\n"
        "    docker:\n"
        "      size: 1Gi\n",
        encoding="utf-8",
    )

    resolver = YamlConfigResolver.from_file(path)

    assert resolver.get("volume-plans:plan1:docker") == {"size": "10Gi"}
    # Integer YAML keys are reachable through their string form
    assert resolver.get("volume-plans:2019:docker") == {"size": "1Gi"}


def test_from_missing_file_is_empty(tmp_path):
    resolver = YamlConfigResolver.from_file(tmp_path / "absent.yaml")
    with pytest.raises(KeyError):
        resolver.get("volume-plans:plan1:docker")


def test_from_file_rejects_non_mapping(tmp_path):
    path = tmp_path / "volumes.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        YamlConfigResolver.from_file(path)


def test_from_file_keeps_dates_as_strings(tmp_path):
    path = tmp_path / "volumes.yaml"
    path.write_text(
        "volume-plans:\n"
        "  plan1:\n"
        "    docker:\n"
        "      since: 2020-01-01\n"
        "      snapshot-at: 2020-01-01 10:30:00\n",
        encoding="utf-8",
    )

    resolver = YamlConfigResolver.from_file(path)

    assert resolver.get("volume-plans:plan1:docker") == {
        "since": "2020-01-01",
        "snapshot-at": "2020-01-01T10:30:00",
    }
