"""Click entry point for create-filecoin-app."""

import sys

import click

from create_filecoin_app.create_opts import CreateOpts
from create_filecoin_app.interruption import Decision, InterruptionCoordinator
from create_filecoin_app.menu import MenuConfig, select_option
from create_filecoin_app.package_installer import DEFAULT_PACKAGE_MANAGER
from create_filecoin_app.pipeline import PipelineContext, PipelineDeps, ProjectPipeline
from create_filecoin_app.project_name import sanitize_project_name
from create_filecoin_app.template_cloner import REPOSITORY_URL, TemplateCloner
from create_filecoin_app.templates.template_renderer import render_template
from create_filecoin_app.variants import MENU_VARIANTS


def create_project(opts: CreateOpts, context: PipelineContext, coordinator) -> int:
    """Run the pipeline once and return the process exit code."""
    deps = PipelineDeps(template_cloner=TemplateCloner(opts.repository))
    pipeline = ProjectPipeline(coordinator, deps=deps)
    return pipeline.run(context).exit_code


def _prompt_project_name() -> str:
    while True:
        name = click.prompt("What is your project name?")
        if sanitize_project_name(name):
            return name
        click.echo("Project name is required", err=True)


def ask_questions(menu_config=None):
    """Ask for the project name and variant. Returns (name, variant)."""
    project_name = _prompt_project_name()
    variant = select_option(
        "Which feature would you like to use?",
        [(v.label, v) for v in MENU_VARIANTS],
        config=menu_config or MenuConfig(),
    )
    return project_name, variant


def run_interactive(opts: CreateOpts, coordinator) -> int:
    click.echo(render_template("welcome.j2", package="create_filecoin_app"))
    try:
        project_name, variant = ask_questions()
    except (KeyboardInterrupt, click.Abort) as exc:
        # click reports closed input as Abort too; a Ctrl+C has always
        # passed through the coordinator and left a decision pending.
        if isinstance(exc, click.Abort) and not coordinator.is_pending():
            click.echo("\nInput closed. Exiting.", err=True)
            return 0
        # Nothing has been created yet, so there is nothing to resume into.
        coordinator.confirm_exit()
        return 0
    context = PipelineContext.create(project_name, variant, opts.package_manager)
    return create_project(opts, context, coordinator)


def run_direct(opts: CreateOpts, coordinator) -> int:
    try:
        context = PipelineContext.create(opts.project_name, opts.variant, opts.package_manager)
    except ValueError as exc:
        click.echo(f"Failed to create project directory: {exc}", err=True)
        return 1
    return create_project(opts, context, coordinator)


@click.command("create-filecoin-app")
@click.version_option(package_name="create-filecoin-app")
@click.argument("project_name", required=False)
@click.option("--storacha", is_flag=True,
              help="Initialize the repository using Storacha as the storage provider")
@click.option("--lighthouse", is_flag=True,
              help="Initialize the repository using Lighthouse as the storage provider")
@click.option("--akave", is_flag=True,
              help="Initialize the repository using Akave as the storage provider")
@click.option("--package-manager", default=DEFAULT_PACKAGE_MANAGER, show_default=True,
              envvar="CREATE_FILECOIN_APP_PACKAGE_MANAGER",
              help="Command used to install the project's dependencies")
@click.option("--repository", default=REPOSITORY_URL, hidden=True,
              envvar="CREATE_FILECOIN_APP_REPOSITORY",
              help="Template repository to clone from")
def main(**kwargs):
    """CLI to create a new Filecoin app.

    Without PROJECT_NAME the project name and storage provider are asked
    for interactively.
    """
    opts = CreateOpts(**kwargs)
    coordinator = InterruptionCoordinator()
    with coordinator.installed():
        if opts.interactive:
            exit_code = run_interactive(opts, coordinator)
        else:
            exit_code = run_direct(opts, coordinator)
    sys.exit(exit_code)
