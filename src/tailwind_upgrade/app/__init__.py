from .scaffold import ComponentScaffolder, ScaffoldResult, TemplateProvider
from .upgrade import UpgradePipeline

__all__ = ["UpgradePipeline", "ComponentScaffolder", "ScaffoldResult", "TemplateProvider"]
