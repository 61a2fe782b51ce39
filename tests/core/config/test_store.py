import pytest

from envfallback.core.config.store import (
    EnvironOverrideStore,
    MappingOverrideStore,
    OverrideStore,
    default_store,
)


class TestEnvironOverrideStore:
    def test_reads_process_environment_at_call_time(self, monkeypatch):
        store = EnvironOverrideStore()
        monkeypatch.delenv("ENVFALLBACK_TEST_KEY", raising=False)
        assert store.get("ENVFALLBACK_TEST_KEY") is None

        monkeypatch.setenv("ENVFALLBACK_TEST_KEY", "value")
        assert store.get("ENVFALLBACK_TEST_KEY") == "value"

    def test_injected_mapping_sees_later_changes(self):
        environ = {"A": "1"}
        store = EnvironOverrideStore(environ)
        environ["A"] = "2"
        assert store.get("A") == "2"

    def test_default_store_uses_environment(self):
        store = default_store()
        assert isinstance(store, EnvironOverrideStore)
        assert repr(store) == "EnvironOverrideStore(os.environ)"


class TestMappingOverrideStore:
    def test_snapshot_is_private(self):
        values = {"A": "1"}
        store = MappingOverrideStore(values, B="2")
        values["A"] = "changed"
        assert store.get("A") == "1"
        assert store.get("B") == "2"
        assert store.get("C") is None
        assert len(store) == 2
        assert "B" in store

    def test_empty_string_is_a_value(self):
        assert MappingOverrideStore({"A": ""}).get("A") == ""

    def test_rejects_non_string_values(self):
        with pytest.raises(TypeError, match="'PORT' must be a string"):
            MappingOverrideStore({"PORT": 1})


@pytest.mark.parametrize(
    "store", [EnvironOverrideStore(), MappingOverrideStore(), {"A": "1"}]
)
def test_stores_satisfy_protocol(store):
    assert isinstance(store, OverrideStore)
