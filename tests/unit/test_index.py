# Unit tests for mdv/core/index.py

import json
import os

import pytest

from mdv.core.index import Index
from mdv.exceptions import NotTracked, StorageFailure


@pytest.fixture
def index(temp_dir):
    return Index(temp_dir)


class TestLoad:
    # Tests for Index.load()

    def test_missing_file_is_empty(self, index):
        assert index.load() == []

    def test_reads_saved_paths(self, temp_dir, index):
        index.add('a.txt')
        index.add('src/b.txt')
        index.save()
        assert Index(temp_dir).load() == ['a.txt', 'src/b.txt']

    def test_duplicates_collapse(self, temp_dir, index):
        with open(os.path.join(temp_dir, 'index'), 'w') as f:
            json.dump(['a', 'b', 'a'], f)
        assert index.load() == ['a', 'b']

    def test_corrupt_file_raises(self, temp_dir, index):
        with open(os.path.join(temp_dir, 'index'), 'w') as f:
            f.write('{not json')
        with pytest.raises(StorageFailure):
            index.load()


class TestAddRemove:
    # Tests for Index.add() / Index.remove() / Index.clear()

    def test_add_is_idempotent(self, index):
        assert index.add('a.txt') is True
        assert index.add('a.txt') is False
        assert index.list() == ['a.txt']

    def test_remove_unstaged_raises(self, index):
        with pytest.raises(NotTracked):
            index.remove('a.txt')

    def test_remove_staged(self, index):
        index.add('a.txt')
        index.remove('a.txt')
        assert 'a.txt' not in index
        assert len(index) == 0

    def test_clear(self, index):
        index.add('a.txt')
        index.add('b.txt')
        index.clear()
        assert index.list() == []

    def test_save_leaves_no_temp_files(self, temp_dir, index):
        index.add('a.txt')
        index.save()
        assert os.listdir(temp_dir) == ['index']
