import re
from pathlib import Path

from atomic_shadcn.utils.exceptions import InvalidComponentIdError

COMPONENT_ID_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')


def read_file_content(file_path: Path) -> str:
    """Read file content with encoding fallback."""
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except UnicodeDecodeError:
        with open(file_path, 'r', encoding='latin1', newline='') as f:
            return f.read()


def write_file_content(file_path: Path, content: str) -> None:
    # content read with newline='' still carries its original line endings
    with open(file_path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)


def validate_component_id(component_id: str) -> str:
    """Normalize and validate a component id such as ``dropdown-menu``."""
    if component_id is None or not component_id.strip():
        raise InvalidComponentIdError("Component name is required")
    normalized = component_id.strip()
    if not COMPONENT_ID_PATTERN.match(normalized):
        raise InvalidComponentIdError(
            f"Invalid component name {component_id!r}: use lowercase letters, digits and hyphens"
        )
    return normalized


def to_pascal_case(component_id: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in component_id.split("-"))
