# Unit tests for mdv/core/tree.py and mdv/core/objects.py

import pytest

from mdv.core.objects import Blob, Revision, Tree, load_revision, load_tree
from mdv.core.store import ObjectStore
from mdv.core.tree import TreeBuilder, diff_files
from mdv.exceptions import NotFound, ObjectError


@pytest.fixture
def builder(temp_dir):
    return TreeBuilder(ObjectStore(temp_dir))


class TestBuild:
    # Tests for TreeBuilder.build()

    def test_insertion_order_does_not_matter(self, builder):
        forward = {"a.txt": b"1", "src/main.py": b"2", "src/lib/util.py": b"3"}
        backward = dict(reversed(list(forward.items())))
        assert builder.build(forward) == builder.build(backward)

    def test_different_content_different_tree(self, builder):
        assert builder.build({"a.txt": b"1"}) != builder.build({"a.txt": b"2"})

    def test_subdirectories_are_shared(self, builder):
        first = builder.build({"lib/x.py": b"x", "a.txt": b"1"})
        second = builder.build({"lib/x.py": b"x", "a.txt": b"2"})
        lib_first = load_tree(builder.store, first).entries["lib"]
        lib_second = load_tree(builder.store, second).entries["lib"]
        assert lib_first == lib_second
        assert lib_first[0] == "tree"

    def test_empty_tree(self, builder):
        tree_id = builder.build({})
        assert builder.expand(tree_id) == {}

    def test_file_directory_collision(self, builder):
        with pytest.raises(ObjectError):
            builder.build({"a": b"1", "a/b": b"2"})


class TestExpand:
    # Tests for TreeBuilder.expand()

    def test_round_trip_paths(self, builder):
        files = {"a.txt": b"1", "src/main.py": b"2", "src/lib/util.py": b"3"}
        expanded = builder.expand(builder.build(files))
        assert sorted(expanded) == sorted(files)
        assert expanded["src/lib/util.py"] == Blob(b"3").id

    def test_missing_tree_raises(self, builder):
        with pytest.raises(NotFound):
            builder.expand("1" * 64)

    def test_missing_blob_raises(self, builder):
        tree_id = Tree({"gone.txt": ("blob", "2" * 64)}).store(builder.store)
        with pytest.raises(NotFound):
            builder.expand(tree_id)


class TestRevisionObject:
    # Tests for Revision serialization

    def test_round_trip_fields(self, builder):
        tree_id = builder.build({"a.txt": b"1"})
        revision = Revision(tree_id, "msg", "Alice", timestamp=1700000000.5)
        revision_id = revision.store(builder.store)
        loaded = load_revision(builder.store, revision_id)
        assert loaded.id == revision_id
        assert loaded.tree_id == tree_id
        assert loaded.author == "Alice"
        assert loaded.main_parent is None
        assert loaded.is_root

    def test_tree_is_not_a_revision(self, builder):
        tree_id = builder.build({"a.txt": b"1"})
        with pytest.raises(NotFound):
            load_revision(builder.store, tree_id)

    def test_merge_parent_requires_main_parent(self):
        with pytest.raises(ObjectError):
            Revision("t" * 64, "msg", "Alice", merge_parent="p" * 64)


class TestDiffFiles:
    # Tests for diff_files()

    def test_classifies_changes(self):
        changes = diff_files({"a": "1", "b": "2", "c": "3"}, {"a": "1", "b": "9", "d": "4"})
        assert changes.added == ["d"]
        assert changes.removed == ["c"]
        assert changes.modified == ["b"]

    def test_no_changes_is_falsy(self):
        assert not diff_files({"a": "1"}, {"a": "1"})
