# Shared pytest fixtures for MDV tests

import os
import shutil
import tempfile

import pytest

from mdv.core.repository import MDV

from .helpers import write


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture(autouse=True)
def no_author_env(monkeypatch):
    # Keep the author deterministic regardless of the caller's environment
    monkeypatch.delenv("MDV_AUTHOR", raising=False)


@pytest.fixture
def repo(temp_dir):
    # An initialized, empty repository
    mdv = MDV(temp_dir)
    mdv.init()
    return mdv


@pytest.fixture
def repo_with_commit(repo):
    # A repository with a.txt ("x") committed on main
    write(repo.repo_path, 'a.txt', 'x')
    repo.add(['a.txt'])
    commit_id = repo.commit("Initial commit", author="Test User")
    return repo, commit_id


@pytest.fixture
def repo_with_branches(repo_with_commit):
    # main and feature both at the initial commit, HEAD back on main
    repo, commit_id = repo_with_commit
    repo.create_branch('feature')
    repo.checkout('main')
    return repo, commit_id
