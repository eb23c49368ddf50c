"""TemplateCloner: populates a project directory from a template branch."""

import os
import shutil

from create_filecoin_app.step_runner import run_command
from create_filecoin_app.variants import Variant

REPOSITORY_URL = "https://github.com/FIL-Builders/fil-frame.git"


class TemplateCloner:
    """Clones one branch of the template repository into a project directory."""

    def __init__(self, repository_url=REPOSITORY_URL, command_runner=run_command):
        self.repository_url = repository_url
        self._run = command_runner

    def clone_command(self, variant: Variant, project_path: str):
        return ["git", "clone", "--branch", variant.branch, self.repository_url, project_path]

    def populate(self, variant: Variant, project_path: str):
        """Clone the variant's branch into project_path and drop its history.

        project_path may already exist as an empty directory.
        """
        self._run(self.clone_command(variant, project_path))
        shutil.rmtree(os.path.join(project_path, ".git"), ignore_errors=True)
