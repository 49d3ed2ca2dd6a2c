import pytest

from galeria.data import InMemorySessionStore, StreamlitSessionStore
from galeria.utils.exceptions import CacheWriteRejected, StorageQuotaExceeded


class TestInMemorySessionStore:

    def test_set_get_and_overwrite(self):
        store = InMemorySessionStore()
        store.set("a", "1")
        store.set("a", "2")

        assert store.get("a") == "2"
        assert "a" in store
        assert len(store) == 1

    def test_missing_key_returns_none(self):
        assert InMemorySessionStore().get("nada") is None

    def test_delete_and_clear(self):
        store = InMemorySessionStore(initial={"a": "1", "b": "2"})
        store.delete("a")
        store.delete("inexistente")
        assert "a" not in store

        store.clear()
        assert len(store) == 0

    def test_rejects_non_string_values(self):
        with pytest.raises(TypeError):
            InMemorySessionStore().set("a", 1)

    def test_quota_exceeded_keeps_previous_state(self):
        store = InMemorySessionStore(quota_bytes=10)
        store.set("k", "12345")  # 6 bytes

        with pytest.raises(StorageQuotaExceeded) as exc_info:
            store.set("x", "123456")

        assert isinstance(exc_info.value, CacheWriteRejected)
        assert exc_info.value.quota_bytes == 10
        assert exc_info.value.key == "x"
        assert "x" not in store
        assert store.get("k") == "12345"

    def test_overwrite_is_measured_net_of_old_value(self):
        store = InMemorySessionStore(quota_bytes=10)
        store.set("k", "123456789")  # exatamente 10 bytes
        store.set("k", "987654321")

        assert store.get("k") == "987654321"
        assert store.used_bytes() == 10

    def test_quota_counts_utf8_bytes(self):
        store = InMemorySessionStore(quota_bytes=4)
        with pytest.raises(StorageQuotaExceeded):
            store.set("k", "çã")  # 1 + 4 bytes

    def test_negative_quota_is_invalid(self):
        with pytest.raises(ValueError):
            InMemorySessionStore(quota_bytes=-1)


def test_streamlit_store_unavailable_outside_runtime():
    assert StreamlitSessionStore.is_available() is False
