"""Options dataclass for the create command."""

from dataclasses import dataclass

from create_filecoin_app.package_installer import DEFAULT_PACKAGE_MANAGER
from create_filecoin_app.template_cloner import REPOSITORY_URL
from create_filecoin_app.variants import Variant, variant_from_flags


@dataclass
class CreateOpts:
    """All options for the create command."""

    project_name: str | None = None
    storacha: bool = False
    lighthouse: bool = False
    akave: bool = False
    package_manager: str = DEFAULT_PACKAGE_MANAGER
    repository: str = REPOSITORY_URL

    @property
    def interactive(self):
        return not self.project_name

    @property
    def variant(self) -> Variant:
        return variant_from_flags(self.storacha, self.lighthouse, self.akave)
