"""PackageInstaller: installs the dependencies a new project declares."""

from create_filecoin_app.step_runner import run_command

DEFAULT_PACKAGE_MANAGER = "yarn"


class PackageInstaller:
    """Runs ``<package manager> install`` inside a project directory."""

    def __init__(self, package_manager=DEFAULT_PACKAGE_MANAGER, command_runner=run_command):
        self.package_manager = package_manager
        self._run = command_runner

    def install(self, project_path: str):
        self._run([self.package_manager, "install"], cwd=project_path)
