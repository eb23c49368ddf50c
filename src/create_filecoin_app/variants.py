"""Template variants: the storage integration a new project starts from."""

from enum import Enum


class Variant(Enum):
    DEFAULT = "main"
    STORACHA = "storacha"
    LIGHTHOUSE = "lighthouse"
    AKAVE = "akave"

    @property
    def branch(self) -> str:
        return _BRANCHES[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_BRANCHES = {
    Variant.DEFAULT: "main",
    Variant.STORACHA: "storacha-nfts",
    Variant.LIGHTHOUSE: "lighthouse-nfts",
    Variant.AKAVE: "akave-integration",
}

_LABELS = {
    Variant.DEFAULT: "Deal Client",
    Variant.STORACHA: "Storacha",
    Variant.LIGHTHOUSE: "Lighthouse",
    Variant.AKAVE: "Akave",
}

# Order of the interactive menu.
MENU_VARIANTS = [Variant.STORACHA, Variant.LIGHTHOUSE, Variant.AKAVE, Variant.DEFAULT]


def variant_from_flags(storacha=False, lighthouse=False, akave=False) -> Variant:
    """Return the variant selected by command-line flags.

    When several flags are given the first one in the order
    storacha, lighthouse, akave wins.
    """
    if storacha:
        return Variant.STORACHA
    if lighthouse:
        return Variant.LIGHTHOUSE
    if akave:
        return Variant.AKAVE
    return Variant.DEFAULT
