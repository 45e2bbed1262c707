"""
Path-literal rewrite rules for component imports.

Each rule is a compiled pattern plus a pure replacement function; a pass is an
ordered list of rules applied to the full text of a file. Patterns only match
the "before" shape of a path, so applying a pass twice changes nothing.

Recognized lead-ins: ``from "..."``, ``import "..."``, ``import("...")`` and
``require("...")``. The quote character of the literal is preserved.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from atomic_shadcn.classification.classification_table import category_of
from atomic_shadcn.config.atomic_constants import AtomicFolders

LEAD = r'(?P<lead>\bfrom\s+|\bimport\s*\(\s*|\bimport\s+|\brequire\s*\(\s*)'
QUOTE = r'(?P<q>["\'])'
END_QUOTE = r'(?P=q)'
COMPONENT = r'(?P<id>[^"\'/\s]+)'
CATEGORY = r'(?P<category>' + '|'.join(AtomicFolders.CATEGORIES) + r')'
POOL = re.escape(AtomicFolders.POOL)
ANCESTOR = r'(?:\.\./)+(?:components/)?'


@dataclass(frozen=True)
class RewriteRule:
    name: str
    pattern: "re.Pattern"
    replacer: Callable[["re.Match"], str]

    def apply(self, content: str) -> Tuple[str, int]:
        return self.pattern.subn(self.replacer, content)


def apply_rules(content: str, rules: Iterable[RewriteRule]) -> Tuple[str, int]:
    total = 0
    for rule in rules:
        content, count = rule.apply(content)
        total += count
    return content, total


def _alias_path(alias: str, segment: str, component_id: Optional[str] = None) -> str:
    path = f"{alias}/components/{segment}"
    return f"{path}/{component_id}" if component_id else path


def _in_scope(component_id: str, scope: Optional[frozenset]) -> bool:
    return scope is None or component_id in scope


def build_forward_rules(alias: str = "@", component_ids: Optional[Iterable[str]] = None) -> List[RewriteRule]:
    """
    Rules rewriting pool references to ``<alias>/components/<category>/<id>``.

    With ``component_ids`` only references to those ids are touched.
    """
    scope = frozenset(component_ids) if component_ids is not None else None
    escaped_alias = re.escape(alias)

    def to_category(match: "re.Match") -> str:
        component_id = match.group("id")
        if not _in_scope(component_id, scope):
            return match.group(0)
        target = _alias_path(alias, category_of(component_id).folder, component_id)
        return f'{match.group("lead")}{match.group("q")}{target}{match.group("q")}'

    return [
        # "@/components/ui/button"
        RewriteRule(
            "alias-pool",
            re.compile(LEAD + QUOTE + escaped_alias + r'/components/' + POOL + '/' + COMPONENT + END_QUOTE),
            to_category,
        ),
        # "../components/ui/button", "../../ui/button"
        RewriteRule(
            "ancestor-pool",
            re.compile(LEAD + QUOTE + ANCESTOR + POOL + '/' + COMPONENT + END_QUOTE),
            to_category,
        ),
        # "./ui/button"
        RewriteRule(
            "sibling-pool",
            re.compile(LEAD + QUOTE + r'\./' + POOL + '/' + COMPONENT + END_QUOTE),
            to_category,
        ),
    ]


def build_reverse_rules(alias: str = "@", component_ids: Optional[Iterable[str]] = None) -> List[RewriteRule]:
    """
    Rules rewriting category references back to ``<alias>/components/ui/<id>``.

    A bare category folder reference maps to the pool folder, but only for an
    unscoped pass: other components may still live in that category.
    """
    scope = frozenset(component_ids) if component_ids is not None else None
    escaped_alias = re.escape(alias)

    def to_pool(match: "re.Match") -> str:
        component_id = match.group("id")
        if not _in_scope(component_id, scope):
            return match.group(0)
        target = _alias_path(alias, AtomicFolders.POOL, component_id)
        return f'{match.group("lead")}{match.group("q")}{target}{match.group("q")}'

    def folder_to_pool(match: "re.Match") -> str:
        target = _alias_path(alias, AtomicFolders.POOL)
        return f'{match.group("lead")}{match.group("q")}{target}{match.group("q")}'

    rules = [
        # "@/components/atoms/button"
        RewriteRule(
            "alias-category",
            re.compile(LEAD + QUOTE + escaped_alias + r'/components/' + CATEGORY + '/' + COMPONENT + END_QUOTE),
            to_pool,
        ),
        # "../components/atoms/button", "../../atoms/button"
        RewriteRule(
            "ancestor-category",
            re.compile(LEAD + QUOTE + ANCESTOR + CATEGORY + '/' + COMPONENT + END_QUOTE),
            to_pool,
        ),
        # "./atoms/button"
        RewriteRule(
            "sibling-category",
            re.compile(LEAD + QUOTE + r'\./' + CATEGORY + '/' + COMPONENT + END_QUOTE),
            to_pool,
        ),
    ]
    if scope is None:
        # "@/components/atoms"
        rules.append(
            RewriteRule(
                "alias-category-folder",
                re.compile(LEAD + QUOTE + escaped_alias + r'/components/' + CATEGORY + END_QUOTE),
                folder_to_pool,
            )
        )
    return rules
