"""Shared fixtures for pipeline tests."""

import os
import shutil
import sys

import pytest

# Make fake_collaborators importable from test modules in this directory.
sys.path.insert(0, os.path.dirname(__file__))

from fake_collaborators import (  # noqa: E402
    FakeCoordinator,
    FakeInstaller,
    FakeRepoInitializer,
    FakeTemplateCloner,
)
from create_filecoin_app.pipeline import PipelineDeps  # noqa: E402


class Collaborators:
    """The fakes wired into one pipeline under test."""

    def __init__(self):
        self.cloner = FakeTemplateCloner()
        self.initializer = FakeRepoInitializer()
        self.installer = FakeInstaller()
        self.removed = []

    def deps(self):
        def remove_tree(path):
            self.removed.append(path)
            shutil.rmtree(path)

        return PipelineDeps(
            template_cloner=self.cloner,
            repo_initializer=self.initializer,
            installer_factory=self.installer.for_package_manager,
            remove_tree=remove_tree,
        )

    @property
    def calls(self):
        return sorted(
            self.cloner.calls + self.initializer.calls + self.installer.calls,
            key=lambda call: call.sequence,
        )


@pytest.fixture
def collaborators():
    return Collaborators()


@pytest.fixture
def resume_coordinator():
    return FakeCoordinator(abort=False)


@pytest.fixture
def abort_coordinator():
    return FakeCoordinator(abort=True)
