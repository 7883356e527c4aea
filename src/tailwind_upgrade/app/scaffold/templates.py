from dataclasses import dataclass
from pathlib import Path
from string import Template
from typing import Dict, Optional, Sequence, Tuple

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "assets" / "templates"
TEMPLATE_SUFFIX = ".tsx.tmpl"


@dataclass(frozen=True)
class ComponentKind:
    name: str
    keywords: Tuple[str, ...]
    template: str

    def matches(self, lowered_name: str) -> bool:
        return any(keyword in lowered_name for keyword in self.keywords)


# Order matters: the first kind whose keyword occurs in the name wins,
# so "input-dialog" renders the input template.
COMPONENT_KINDS: Tuple[ComponentKind, ...] = (
    ComponentKind("button", ("button",), "button"),
    ComponentKind("card", ("card",), "card"),
    ComponentKind("input", ("input",), "input"),
    ComponentKind("dialog", ("dialog", "modal"), "dialog"),
    ComponentKind("badge", ("badge",), "badge"),
    ComponentKind("alert", ("alert",), "alert"),
    ComponentKind("avatar", ("avatar",), "generic"),
    ComponentKind("checkbox", ("checkbox",), "generic"),
    ComponentKind("select", ("select",), "generic"),
    ComponentKind("textarea", ("textarea",), "generic"),
    ComponentKind("switch", ("switch",), "generic"),
    ComponentKind("slider", ("slider",), "generic"),
    ComponentKind("progress", ("progress",), "generic"),
    ComponentKind("separator", ("separator",), "generic"),
    ComponentKind("skeleton", ("skeleton",), "generic"),
    ComponentKind("toast", ("toast",), "generic"),
    ComponentKind("tooltip", ("tooltip",), "generic"),
)

GENERIC_KIND = ComponentKind("generic", (), "generic")


class TemplateProvider:
    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        kinds: Sequence[ComponentKind] = COMPONENT_KINDS,
    ):
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.kinds = tuple(kinds)
        self._cache: Dict[str, Template] = {}

    def resolve(self, name: str) -> ComponentKind:
        lowered = name.lower()
        for kind in self.kinds:
            if kind.matches(lowered):
                return kind
        return GENERIC_KIND

    def _load(self, template_name: str) -> Template:
        if template_name not in self._cache:
            path = self.templates_dir / f"{template_name}{TEMPLATE_SUFFIX}"
            self._cache[template_name] = Template(path.read_text(encoding="utf-8"))
        return self._cache[template_name]

    def render(self, name: str, identifier: str) -> str:
        kind = self.resolve(name)
        return self._load(kind.template).substitute(name=identifier)
