import re
from typing import Iterable, List

COMPONENT_SUFFIX = "-component.tsx"

_WHITESPACE = re.compile(r"\s+")
_WORD_SEPARATORS = re.compile(r"[\s\-_]+")


def clean_component_names(names: Iterable[str]) -> List[str]:
    return [name.strip() for name in names if name and name.strip()]


def parse_component_names(raw: str) -> List[str]:
    """Splits a comma-separated prompt answer into trimmed, non-empty names."""
    return clean_component_names(raw.split(","))


def component_filename(name: str) -> str:
    # "Primary Button" -> "primary-button-component.tsx"
    return _WHITESPACE.sub("-", name.strip().lower()) + COMPONENT_SUFFIX


def component_identifier(name: str) -> str:
    # "my_card-widget" -> "MyCardWidget"
    words = [word for word in _WORD_SEPARATORS.split(name.strip()) if word]
    return "".join(word[0].upper() + word[1:].lower() for word in words)
