# Unit tests for mdv/core/store.py

import pytest

from mdv.core.store import ObjectStore
from mdv.exceptions import NotFound


@pytest.fixture
def store(temp_dir):
    return ObjectStore(temp_dir)


class TestPut:
    # Tests for ObjectStore.put()

    def test_same_bytes_same_id(self, store):
        # Identical content always maps to the same id
        assert store.put(b"hello") == store.put(b"hello")

    def test_different_bytes_different_id(self, store):
        assert store.put(b"hello") != store.put(b"hello!")

    def test_id_is_sha256_hex(self, store):
        obj_id = store.put(b"abc")
        assert obj_id == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_put_is_idempotent_on_disk(self, store):
        obj_id = store.put(b"data")
        obj_file = store.objects_dir / obj_id[:2] / obj_id[2:]
        first = obj_file.stat().st_mtime_ns
        store.put(b"data")
        assert obj_file.stat().st_mtime_ns == first

    def test_no_temp_files_left(self, store):
        obj_id = store.put(b"data")
        shard = store.objects_dir / obj_id[:2]
        assert [p.name for p in shard.iterdir()] == [obj_id[2:]]

    def test_hash_does_not_store(self, store):
        obj_id = store.hash(b"unstored")
        assert not store.contains(obj_id)


class TestGet:
    # Tests for ObjectStore.get()

    def test_returns_stored_bytes(self, store):
        obj_id = store.put(b"\x00binary\xff")
        assert store.get(obj_id) == b"\x00binary\xff"

    def test_missing_object_raises(self, store):
        with pytest.raises(NotFound):
            store.get("0" * 64)

    def test_malformed_id_raises(self, store):
        with pytest.raises(NotFound):
            store.get("abc")

    def test_corrupt_object_raises(self, store):
        obj_id = store.put(b"data")
        (store.objects_dir / obj_id[:2] / obj_id[2:]).write_bytes(b"not zlib")
        with pytest.raises(NotFound):
            store.get(obj_id)


class TestFind:
    # Tests for ObjectStore.find()

    def test_finds_by_prefix(self, store):
        obj_id = store.put(b"data")
        assert store.find(obj_id[:6]) == [obj_id]

    def test_rejects_non_hex(self, store):
        store.put(b"data")
        assert store.find("zzzz") == []
