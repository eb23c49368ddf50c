"""Shared fixtures for create-filecoin-app tests."""

import os
import subprocess

import pytest


def _git(path, *args):
    subprocess.run(["git", *args], cwd=path, check=True, capture_output=True)


def init_template_repo(path, branches=("storacha-nfts",)):
    """Create a git repo at path with a 'main' branch plus the given branches.

    Each extra branch carries a marker file named after it.
    """
    os.makedirs(path, exist_ok=True)
    _git(path, "init")
    _git(path, "config", "user.email", "test@test.com")
    _git(path, "config", "user.name", "Test")
    with open(os.path.join(path, "package.json"), "w") as f:
        f.write('{"name": "fil-frame"}\n')
    os.makedirs(os.path.join(path, ".github", "workflows"))
    with open(os.path.join(path, ".github", "workflows", "ci.yml"), "w") as f:
        f.write("name: ci\n")
    _git(path, "add", ".")
    _git(path, "commit", "-m", "Initial template")
    _git(path, "branch", "-M", "main")
    for branch in branches:
        _git(path, "checkout", "-b", branch)
        with open(os.path.join(path, f"{branch}.txt"), "w") as f:
            f.write(branch)
        _git(path, "add", ".")
        _git(path, "commit", "-m", f"Add {branch}")
        _git(path, "checkout", "main")
    return path


@pytest.fixture
def template_repo(tmp_path):
    """A local stand-in for the template repository."""
    return init_template_repo(str(tmp_path / "fil-frame"))
