"""
Text rules that scrub a deleted component out of a source file.

Three things are removed:

* import declarations sourced from the component module itself, in any path
  shape and from any atomic folder or the pool;
* the component's symbols inside named-import lists of barrel imports
  (``@/components``, ``@/components/atoms``...), dropping the declaration
  only when nothing else is imported;
* JSX usages of every local name those imports bound, paired or
  self-closing.
"""

import re
from typing import Iterable, List, Optional, Set, Tuple

from loguru import logger

from atomic_shadcn.config.atomic_constants import AtomicFolders
from atomic_shadcn.models.domain_models import RemovalTarget
from atomic_shadcn.utils.common import to_pascal_case

SEGMENTS = '|'.join((AtomicFolders.POOL,) + AtomicFolders.CATEGORIES)
IDENTIFIER = r'[A-Za-z_$][\w$]*'

IMPORT_DECLARATION = re.compile(
    r'^(?P<indent>[ \t]*)import\s*(?P<clause>[^;"\'`]*?)\s*from\s*'
    r'(?P<q>["\'])(?P<path>[^"\'\n]+)(?P=q)(?P<semi>[ \t]*;)?[ \t]*(?P<newline>\r?\n)?',
    re.MULTILINE,
)
SIDE_EFFECT_IMPORT = re.compile(
    r'^[ \t]*import\s*(?P<q>["\'])(?P<path>[^"\'\n]+)(?P=q)[ \t]*;?[ \t]*(?:\r?\n)?',
    re.MULTILINE,
)
COMMENT = re.compile(r'//[^\n]*|/\*.*?\*/', re.DOTALL)
NAMED_BLOCK = re.compile(r'\{(?P<names>[^}]*)\}')
NAMESPACE = re.compile(r'\*\s*as\s+(?P<local>' + IDENTIFIER + r')')
DEFAULT = re.compile(r'^\s*(?P<local>' + IDENTIFIER + r')\s*(?:,|$)')
SPECIFIER = re.compile(
    r'^\s*(?P<type>type\s+)?(?P<imported>' + IDENTIFIER + r')(?:\s+as\s+(?P<local>' + IDENTIFIER + r'))?\s*$'
)

EXPORTED_DECLARATION = re.compile(
    r'\bexport\s+(?:default\s+)?(?:declare\s+)?(?:async\s+)?'
    r'(?:function\s*\*?|const|let|var|class|interface|type|enum)\s+(?P<name>' + IDENTIFIER + r')'
)
EXPORTED_LIST = re.compile(r'\bexport\s*(?:type\s*)?\{(?P<names>[^}]*)\}')

# JSX attribute text: quoted strings and up to three levels of braces may contain ">"
ATTRIBUTES = (
    r'(?:[^<>"\'{}]|"[^"]*"|\'[^\']*\''
    r'|\{(?:[^{}]|\{(?:[^{}]|\{[^{}]*\})*\})*\})*'
)


def collect_exported_symbols(content: str) -> List[str]:
    """Names a component module exports, in order of appearance."""
    names: List[str] = []
    for match in EXPORTED_DECLARATION.finditer(content):
        names.append(match.group("name"))
    for match in EXPORTED_LIST.finditer(content):
        for entry in match.group("names").split(","):
            entry = entry.strip()
            if not entry:
                continue
            exported = entry.split(" as ")[-1].strip()
            if exported.startswith("type "):
                exported = exported[len("type "):].strip()
            names.append(exported)
    return _unique(name for name in names if name != "default")


def module_path_pattern(component_id: str, alias: str = "@") -> "re.Pattern":
    """Matches import paths that resolve to the component module."""
    escaped_id = re.escape(component_id)
    return re.compile(
        r'^(?:' + re.escape(alias) + r'/components/|(?:\.\./)+(?:components/)?|\./)'
        r'(?:' + SEGMENTS + r')/' + escaped_id + r'(?:/index)?(?:\.[jt]sx?)?$'
    )


def barrel_path_pattern(alias: str = "@") -> "re.Pattern":
    """Matches import paths of the barrel files that re-export components."""
    return re.compile(
        r'^(?:' + re.escape(alias) + r'/components(?:/(?:' + SEGMENTS + r'))?'
        r'|(?:\.\./)+(?:components(?:/(?:' + SEGMENTS + r'))?|(?:' + SEGMENTS + r'))'
        r'|\./(?:components|' + SEGMENTS + r'))(?:/index)?$'
    )


class ImportClause:
    """Parsed form of the text between ``import`` and ``from``."""

    def __init__(self, text: str):
        self.text = text
        self.type_only = False
        body = text.strip()
        if body.startswith("type ") or body.startswith("type{"):
            self.type_only = True
            body = body[len("type"):].strip()

        named = NAMED_BLOCK.search(body)
        self.named_raw: Optional[str] = named.group("names") if named else None
        remainder = (body[:named.start()] + body[named.end():]) if named else body

        namespace = NAMESPACE.search(remainder)
        self.namespace: Optional[str] = namespace.group("local") if namespace else None
        if namespace:
            remainder = remainder[:namespace.start()] + remainder[namespace.end():]

        default = DEFAULT.match(remainder)
        self.default: Optional[str] = default.group("local") if default else None

        # False when some specifier could not be parsed; such a clause is never re-rendered
        self.complete = True
        self.specifiers: List[Tuple[str, str, bool]] = []
        if self.named_raw is not None:
            for entry in COMMENT.sub("", self.named_raw).split(","):
                if not entry.strip():
                    continue
                spec = SPECIFIER.match(entry)
                if not spec:
                    self.complete = False
                    continue
                imported = spec.group("imported")
                self.specifiers.append((imported, spec.group("local") or imported, bool(spec.group("type"))))

    def local_names(self) -> List[str]:
        names = [self.default, self.namespace]
        names += [local for _, local, _ in self.specifiers]
        return [name for name in names if name]

    def render(self, specifiers: List[Tuple[str, str, bool]], keep_bindings: bool = True) -> str:
        parts = []
        if keep_bindings and self.default:
            parts.append(self.default)
        if keep_bindings and self.namespace:
            parts.append(f"* as {self.namespace}")
        if specifiers:
            entries = [
                ("type " if is_type else "") + (imported if imported == local else f"{imported} as {local}")
                for imported, local, is_type in specifiers
            ]
            if self.named_raw is not None and "\n" in self.named_raw:
                indent = _entry_indent(self.named_raw)
                parts.append("{\n" + "".join(f"{indent}{entry},\n" for entry in entries) + "}")
            else:
                parts.append("{ " + ", ".join(entries) + " }")
        prefix = "type " if self.type_only else ""
        return prefix + ", ".join(parts)


def remove_component_imports(
    content: str, target: RemovalTarget, alias: str = "@", source: str = "<text>"
) -> Tuple[str, Set[str]]:
    """
    Drop or shrink import declarations that bring in the removed component.

    Returns the new text and the local names the removed imports had bound.
    """
    module_pattern = module_path_pattern(target.component_id, alias)
    barrel_pattern = barrel_path_pattern(alias)
    symbols = set(target.symbols)
    removed_locals: Set[str] = set()

    def rewrite_declaration(match: "re.Match") -> str:
        path = match.group("path")
        is_module = module_pattern.match(path) is not None
        if not is_module and not barrel_pattern.match(path):
            return match.group(0)

        clause = ImportClause(match.group("clause"))
        if not clause.complete:
            if is_module:
                removed_locals.update(clause.local_names())
                return ""
            logger.warning(f"   ⚠️  Could not parse the import from {path} in {source}, left unchanged")
            return match.group(0)

        removed = [spec for spec in clause.specifiers if spec[0] in symbols]
        kept = [spec for spec in clause.specifiers if spec[0] not in symbols]
        removed_locals.update(local for _, local, _ in removed)

        if is_module:
            # default and namespace imports bind the deleted module itself
            removed_locals.update(name for name in (clause.default, clause.namespace) if name)
            if not kept:
                return ""
            rendered = clause.render(kept, keep_bindings=False)
        else:
            if not removed:
                return match.group(0)
            if not kept and not clause.default and not clause.namespace:
                return ""
            rendered = clause.render(kept)

        q = match.group("q")
        semi = ";" if match.group("semi") else ""
        newline = match.group("newline") or ""
        return f'{match.group("indent")}import {rendered} from {q}{path}{q}{semi}{newline}'

    content = IMPORT_DECLARATION.sub(rewrite_declaration, content)
    content = SIDE_EFFECT_IMPORT.sub(
        lambda m: "" if module_pattern.match(m.group("path")) else m.group(0),
        content,
    )
    return content, removed_locals


def strip_jsx_usages(content: str, names: Iterable[str]) -> str:
    """Remove ``<Name .../>`` and ``<Name ...>...</Name>`` for every given name."""
    for name in sorted(set(names), key=len, reverse=True):
        tag = re.escape(name) + r'(?:\.[\w$]+)*'
        self_closing = re.compile(
            r'(?P<lead>^[ \t]*)?<' + tag + r'(?=[\s/>])' + ATTRIBUTES + r'/>(?P<trail>[ \t]*\r?\n)?',
            re.MULTILINE,
        )
        content = self_closing.sub(_drop_element, content)

        # Innermost pairs first: the body may not open another element with the same tag.
        paired = re.compile(
            r'(?P<lead>^[ \t]*)?<(?P<tag>' + tag + r')(?=[\s>])' + ATTRIBUTES + r'>'
            r'(?:(?!<' + tag + r'[\s>]).)*?'
            r'</(?P=tag)\s*>(?P<trail>[ \t]*\r?\n)?',
            re.MULTILINE | re.DOTALL,
        )
        while True:
            content, count = paired.subn(_drop_element, content)
            if not count:
                break
    return content


def remove_component_references(
    content: str, target: RemovalTarget, alias: str = "@", source: str = "<text>"
) -> str:
    content, local_names = remove_component_imports(content, target, alias, source)
    if local_names:
        content = strip_jsx_usages(content, local_names)
    return content


def removal_target_for(component_id: str, module_content: Optional[str], registered: Optional[tuple]) -> RemovalTarget:
    symbols = list(registered or ())
    if module_content:
        symbols += collect_exported_symbols(module_content)
    if not symbols:
        symbols.append(to_pascal_case(component_id))
    return RemovalTarget(component_id=component_id, symbols=tuple(_unique(symbols)))


def _drop_element(match: "re.Match") -> str:
    lead, trail = match.group("lead"), match.group("trail")
    if lead is not None and trail:
        return ""
    if lead is not None:
        return lead
    return trail or ""


def _entry_indent(named_raw: str) -> str:
    for line in named_raw.splitlines():
        if line.strip():
            return line[: len(line) - len(line.lstrip())] or "  "
    return "  "


def _unique(items: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
