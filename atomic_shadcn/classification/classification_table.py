"""
Static component classification.

The tables are wrapped in read-only proxies at import time; recategorizing a
component requires a full uninstall/reinstall, never a runtime mutation.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from atomic_shadcn.config.atomic_constants import (
    ATOMIC_MAP,
    COMPONENT_DEPENDENCIES,
    SPECIAL_EXPORTS,
    AtomicFolders,
)
from atomic_shadcn.models.domain_models import Category

DEFAULT_CATEGORY = Category(AtomicFolders.DEFAULT_CATEGORY)

CLASSIFICATION_TABLE: Mapping[str, Category] = MappingProxyType(
    {component_id: Category(folder) for component_id, folder in ATOMIC_MAP.items()}
)
MULTI_EXPORT_REGISTRY: Mapping[str, Tuple[str, ...]] = MappingProxyType(dict(SPECIAL_EXPORTS))
DEPENDENCY_REGISTRY: Mapping[str, Tuple[str, ...]] = MappingProxyType(dict(COMPONENT_DEPENDENCIES))


def category_of(component_id: str) -> Category:
    """Return the category for ``component_id``, or the default for unknown ids."""
    return CLASSIFICATION_TABLE.get(component_id, DEFAULT_CATEGORY)


def is_known(component_id: str) -> bool:
    return component_id in CLASSIFICATION_TABLE


def multi_export_symbols(component_id: str) -> Optional[Tuple[str, ...]]:
    return MULTI_EXPORT_REGISTRY.get(component_id)


def required_packages(component_id: str) -> Tuple[str, ...]:
    return DEPENDENCY_REGISTRY.get(component_id, ())


def components_in(category: Category) -> List[str]:
    return [component_id for component_id, value in CLASSIFICATION_TABLE.items() if value is category]
