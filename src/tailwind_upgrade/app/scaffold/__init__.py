from .naming import (
    clean_component_names,
    component_filename,
    component_identifier,
    parse_component_names,
)
from .scaffolder import ComponentScaffolder, ScaffoldResult
from .templates import COMPONENT_KINDS, GENERIC_KIND, ComponentKind, TemplateProvider

__all__ = [
    "ComponentScaffolder",
    "ScaffoldResult",
    "TemplateProvider",
    "ComponentKind",
    "COMPONENT_KINDS",
    "GENERIC_KIND",
    "clean_component_names",
    "component_filename",
    "component_identifier",
    "parse_component_names",
]
