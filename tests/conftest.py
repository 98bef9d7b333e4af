"""Shared pytest fixtures for Objdumper tests."""

import os
import shutil
import stat
import subprocess
import tempfile
import zlib
from pathlib import Path

import pytest
from objdumper.core.config import Config
from objdumper.cli.output import set_color


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp location and clear env overrides."""
    config_path = tmp_path / 'objdumperconfig'
    monkeypatch.setattr(Config, 'CONFIG_PATH', config_path)
    for key in list(os.environ):
        if key.startswith('OBJDUMPER_'):
            monkeypatch.delenv(key)
    yield config_path
    set_color(True)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def object_store(temp_dir):
    """A fake two-level object store with three compressed files."""
    root = temp_dir / 'objects'
    hashes = [
        'ab' + 'c' * 38,
        'ab' + 'd' * 38,
        'ef' + '0' * 38,
    ]
    for h in hashes:
        path = root / h[:2] / h[2:]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(zlib.compress(f"blob 3\0{h[:3]}".encode()))
    (root / 'info').mkdir()
    (root / 'pack').mkdir()
    return root


@pytest.fixture
def echo_git(temp_dir):
    """An executable standing in for git that echoes its arguments."""
    script = temp_dir / 'fake-git'
    script.write_text('#!/bin/sh\necho "$@"\n')
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


def git(repo, *args):
    """Run git in repo and return stripped stdout."""
    result = subprocess.run(
        ['git', '-C', str(repo)] + list(args),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=True,
    )
    return result.stdout.decode().strip()


@pytest.fixture
def git_repo(temp_dir):
    """
    A real git repository with one staged file and its tree written.
    
    Returns a dict with the work tree path, the blob hash and the tree hash.
    """
    work_tree = temp_dir / 'repo'
    work_tree.mkdir()
    git(work_tree, 'init', '-q')
    
    (work_tree / 'hello.txt').write_text("Hello, World!\n")
    git(work_tree, 'add', 'hello.txt')
    blob_hash = git(work_tree, 'hash-object', 'hello.txt')
    tree_hash = git(work_tree, 'write-tree')
    
    return {
        'work_tree': work_tree,
        'objects': work_tree / '.git' / 'objects',
        'blob': blob_hash,
        'tree': tree_hash,
    }
