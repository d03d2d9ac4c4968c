from pathlib import Path

import pytest
import yaml

from hangul_pushdown.services.settings_store import SETTINGS_ENV_VAR, SettingsStore


@pytest.fixture
def store(tmp_path: Path) -> SettingsStore:
    """Settings store pointed at a temp file so tests never touch the real settings.yaml."""
    return SettingsStore(tmp_path / "settings.yaml")


def test_missing_file_defaults(store):
    assert store.load() == {}
    assert store.get_extended() is False


def test_save_and_load_roundtrip(store):
    payload = {"theme": "hanji", "pushdown": {"extended": True}}
    store.save(payload)
    loaded = store.load()
    assert loaded == payload
    assert store.get_extended() is True


def test_set_extended_preserves_other_keys(store):
    store.save({"theme": "taegeuk", "wpm": 80})
    store.set_extended(True)

    raw = yaml.safe_load(store.path.read_text(encoding="utf-8"))
    assert raw["theme"] == "taegeuk"
    assert raw["wpm"] == 80
    assert raw["pushdown"] == {"extended": True}

    store.set_extended(False)
    assert store.get_extended() is False
    assert not store.path.with_suffix(".yaml.tmp").exists()


@pytest.mark.parametrize("value,expected", [
    ("yes", True),
    ("on", True),
    ("0", False),
    (1, True),
    (0, False),
    (None, False),
    ([True], False),
])
def test_extended_value_coercion(store, value, expected):
    store.save({"pushdown": {"extended": value}})
    assert store.get_extended() is expected


def test_corrupt_yaml_degrades_to_defaults(store, caplog):
    store.path.write_text("pushdown: [unclosed\n", encoding="utf-8")
    assert store.load() == {}
    assert store.get_extended() is False
    assert any("Failed to read settings" in r.message for r in caplog.records)


def test_non_mapping_yaml_is_ignored(store):
    store.path.write_text("- just\n- a list\n", encoding="utf-8")
    assert store.load() == {}
    store.path.write_text("pushdown: nope\n", encoding="utf-8")
    assert store.get_extended() is False


def test_env_var_overrides_default_path(monkeypatch, tmp_path: Path):
    target = tmp_path / "from_env.yaml"
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(target))
    assert SettingsStore().path == target


def test_default_path_is_project_root(monkeypatch):
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
    root = Path(__file__).resolve().parents[1]
    assert SettingsStore().path == root / "settings.yaml"


def test_failed_save_leaves_no_temp_file(store, caplog):
    store.save({"pushdown": {"extended": True}})
    store.save({"bad": object()})

    assert any("Failed to write settings" in r.message for r in caplog.records)
    assert sorted(p.name for p in store.path.parent.iterdir()) == ["settings.yaml"]
    assert store.get_extended() is True
