"""Project pipeline: create directory, populate, reinitialize, install."""

import os
import shutil
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

import click

from create_filecoin_app.interruption import Decision, InterruptionCoordinator
from create_filecoin_app.package_installer import DEFAULT_PACKAGE_MANAGER, PackageInstaller
from create_filecoin_app.project_name import sanitize_project_name
from create_filecoin_app.repo_initializer import RepoInitializer
from create_filecoin_app.step_runner import Step, StepOutcome, StepRunner, StepStatus
from create_filecoin_app.template_cloner import TemplateCloner
from create_filecoin_app.templates.template_renderer import render_template
from create_filecoin_app.variants import Variant


class PipelineState(Enum):
    IDLE = "idle"
    CREATING_DIRECTORY = "creating_directory"
    POPULATING_TEMPLATE = "populating_template"
    REINITIALIZING = "reinitializing"
    INSTALLING_DEPENDENCIES = "installing_dependencies"
    DONE = "done"
    ABORTING = "aborting"
    FAILED = "failed"
    STOPPED = "stopped"

    @property
    def exit_code(self) -> int:
        return 1 if self is PipelineState.FAILED else 0


@dataclass(frozen=True)
class PipelineContext:
    """Everything one pipeline run needs, fixed before the first step."""

    project_name: str
    project_path: str
    variant: Variant = Variant.DEFAULT
    package_manager: str = DEFAULT_PACKAGE_MANAGER

    @classmethod
    def create(
        cls, requested_name: str, variant: Variant = Variant.DEFAULT,
        package_manager: str = DEFAULT_PACKAGE_MANAGER, cwd: Optional[str] = None,
    ) -> "PipelineContext":
        """Sanitize the requested name and resolve the project path.

        Raises:
            ValueError: If nothing usable is left of the name.
        """
        project_name = sanitize_project_name(requested_name)
        if not project_name:
            raise ValueError(f"'{requested_name}' is not a usable project name")
        project_path = os.path.abspath(os.path.join(cwd or os.getcwd(), project_name))
        return cls(project_name, project_path, variant, package_manager)


@dataclass
class PipelineDeps:
    """Injectable collaborators for the pipeline."""

    step_runner: StepRunner = field(default_factory=StepRunner)
    template_cloner: TemplateCloner = field(default_factory=TemplateCloner)
    repo_initializer: RepoInitializer = field(default_factory=RepoInitializer)
    installer_factory: Callable[[str], PackageInstaller] = PackageInstaller
    make_directory: Callable[[str], None] = os.mkdir
    remove_tree: Callable[[str], None] = None

    def __post_init__(self):
        if self.remove_tree is None:
            self.remove_tree = _remove_tree


def _remove_tree(path):
    shutil.rmtree(path, ignore_errors=True)


class ProjectPipeline:
    """Runs the fixed sequence of steps that creates a project.

    Steps run strictly one after another. A failing step ends the run with
    FAILED and leaves the directory for inspection. An interrupted step
    (or Ctrl+C between steps) is handed to the coordinator: ABORT removes
    the project directory, RESUME stops the run without touching it.
    """

    def __init__(self, coordinator: InterruptionCoordinator, *, deps: Optional[PipelineDeps] = None):
        self._coordinator = coordinator
        self._deps = deps or PipelineDeps()
        self.state = PipelineState.IDLE

    def steps(self, context: PipelineContext) -> List[Tuple[PipelineState, Step]]:
        path = context.project_path
        installer = self._deps.installer_factory(context.package_manager)
        return [
            (PipelineState.CREATING_DIRECTORY, Step(
                f"Creating project directory: {context.project_name}",
                "Failed to create project directory",
                lambda: self._deps.make_directory(path),
            )),
            (PipelineState.POPULATING_TEMPLATE, Step(
                f"Cloning {context.variant.label} template ({context.variant.branch})",
                "Failed to clone repository",
                lambda: self._deps.template_cloner.populate(context.variant, path),
            )),
            (PipelineState.REINITIALIZING, Step(
                "Initializing git repository",
                "Failed to initialize repository",
                lambda: self._deps.repo_initializer.reinitialize(path),
            )),
            (PipelineState.INSTALLING_DEPENDENCIES, Step(
                f"Installing packages with {context.package_manager}",
                "Failed to install packages",
                lambda: installer.install(path),
            )),
        ]

    def run(self, context: PipelineContext) -> PipelineState:
        self.state = PipelineState.IDLE
        try:
            outcome = self._run_steps(context)
        except KeyboardInterrupt:
            outcome = StepOutcome.interrupted()

        if outcome.status is StepStatus.DOMAIN_FAILURE:
            return self._fail(outcome.message)
        if outcome.status is StepStatus.INTERRUPTED:
            return self._handle_interruption(context)

        self.state = PipelineState.DONE
        click.echo(render_template(
            "success.j2", package="create_filecoin_app", project_name=context.project_name,
        ))
        return self.state

    def _run_steps(self, context: PipelineContext) -> StepOutcome:
        for state, step in self.steps(context):
            self.state = state
            click.echo(step.name)
            outcome = self._deps.step_runner.run(step)
            if outcome.status is not StepStatus.SUCCESS:
                return outcome
        return StepOutcome.success()

    def _fail(self, message: str) -> PipelineState:
        self.state = PipelineState.FAILED
        click.echo(message, err=True)
        return self.state

    def _handle_interruption(self, context: PipelineContext) -> PipelineState:
        interrupted_state = self.state
        if self._coordinator.confirm_exit() is Decision.ABORT:
            self.state = PipelineState.ABORTING
            self._remove_project(context)
            return self.state

        self.state = PipelineState.STOPPED
        if os.path.exists(context.project_path):
            click.echo(
                f"Stopped while {interrupted_state.value.replace('_', ' ')}; "
                f"{context.project_name} was left in place. "
                "Remove it and run the command again to start over.",
                err=True,
            )
        return self.state

    def _remove_project(self, context: PipelineContext):
        if not os.path.exists(context.project_path):
            return
        self._deps.remove_tree(context.project_path)
        click.echo(f"Removed {context.project_path}", err=True)
