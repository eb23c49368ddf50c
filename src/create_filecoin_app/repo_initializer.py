"""RepoInitializer: gives a freshly populated project its own git history."""

import os
import shutil

import click
from git import Repo

INITIAL_COMMIT_MESSAGE = "init"


class RepoInitializer:
    """Replaces any inherited history with a new repository holding one commit."""

    def reinitialize(self, project_path: str) -> Repo:
        inherited = os.path.join(project_path, ".git")
        if os.path.exists(inherited):
            shutil.rmtree(inherited)

        repo = Repo.init(project_path)
        repo.git.add(A=True)
        commit = repo.index.commit(INITIAL_COMMIT_MESSAGE)
        click.echo(f"Initialized git repository ({commit.hexsha[:8]} {INITIAL_COMMIT_MESSAGE})")
        return repo
