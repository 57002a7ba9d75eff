import pytest

from registrar import Registry, RegistryConfig, SettingsRegistry, build_registry, load_config
from registrar.config import DEFAULT_CONFIG, load_registry_config, merge_config


def test_defaults_without_file():
    config = load_config(None)

    assert config["registry"] == DEFAULT_CONFIG["registry"]
    assert config["registry_config"] == RegistryConfig()


def test_defaults_are_not_mutated(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("registry:\n  close_policy: collect\n", encoding="utf-8")

    load_config(str(path))

    assert DEFAULT_CONFIG["registry"]["close_policy"] == "fail_fast"


def test_user_values_merge_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "registry:\n"
        "  key_max_length: 32\n"
        "  close_policy: collect\n",
        encoding="utf-8",
    )

    config = load_config(str(path))

    registry_config = config["registry_config"]
    assert registry_config.key_max_length == 32
    assert registry_config.close_policy == "collect"
    assert registry_config.type_id_max_length == 2048
    assert config["types"] == {"modules": []}


def test_nested_sections_merge_recursively():
    base = {"a": {"b": {"c": 1, "d": 2}, "list": [1, 2]}, "keep": True}

    merged = merge_config(base, {"a": {"b": {"d": 3}, "list": [9]}})

    assert merged == {"a": {"b": {"c": 1, "d": 3}, "list": [9]}, "keep": True}


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path))["registry_config"] == RegistryConfig()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_non_mapping_yaml_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_invalid_close_policy_rejected():
    with pytest.raises(ValueError):
        RegistryConfig(close_policy="best_effort")
    with pytest.raises(ValueError):
        load_registry_config({"close_policy": "whatever"})


def test_non_positive_lengths_rejected():
    with pytest.raises(ValueError):
        RegistryConfig(key_max_length=0)


# -------------------------------------------------
# build_registry
# -------------------------------------------------

def test_build_registry_from_config(tmp_path, monkeypatch):
    (tmp_path / "registrar_plugin_sessions.py").write_text(
        "from registrar import BaseChild, BaseSettingsChild\n"
        "\n"
        "class Session(BaseChild):\n"
        "    pass\n"
        "\n"
        "class Pool(BaseSettingsChild):\n"
        "    pass\n"
        "\n"
        "def register(table):\n"
        "    table.register('session', Session)\n"
        "    table.register('pool', Pool)\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    path = tmp_path / "config.yaml"
    path.write_text(
        "registry:\n"
        "  key_max_length: 16\n"
        "types:\n"
        "  modules:\n"
        "    - registrar_plugin_sessions\n"
        "observability:\n"
        "  observers:\n"
        "    - type: metrics\n"
        "logging:\n"
        "  level: WARNING\n",
        encoding="utf-8",
    )
    config = load_config(str(path))

    registry = build_registry(config)
    settings_registry = build_registry(config, settings=True)

    assert type(registry) is Registry
    assert isinstance(settings_registry, SettingsRegistry)
    assert registry.config.key_max_length == 16
    assert registry.get_observer_count() == 1
    assert registry.create("s1", "session").get_key() == "s1"
    assert settings_registry.create("p1", "pool", settings={"size": 2}).get_settings() == {"size": 2}
