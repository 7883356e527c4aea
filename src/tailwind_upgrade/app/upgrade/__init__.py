from .pipeline import UpgradePipeline
from .steps import (
    DEFAULT_STEPS,
    UpgradeContext,
    UpgradeStep,
    find_stylesheets,
    migrate_stylesheet,
)

__all__ = [
    "UpgradePipeline",
    "UpgradeContext",
    "UpgradeStep",
    "DEFAULT_STEPS",
    "find_stylesheets",
    "migrate_stylesheet",
]
