import re
from pathlib import Path
from typing import Optional

from loguru import logger

from atomic_shadcn.classification.classification_table import multi_export_symbols
from atomic_shadcn.config.atomic_constants import AtomicFolders
from atomic_shadcn.models.domain_models import Category, ProjectLayout
from atomic_shadcn.utils.common import read_file_content, write_file_content


class IndexMaintainer:
    """Creates and edits the barrel ``index.ts`` files of the atomic folders."""

    def __init__(self, layout: ProjectLayout):
        self.layout = layout

    def ensure_index(self, category: Category) -> Path:
        index_path = self.layout.index_path(category)
        if index_path.exists():
            return index_path

        index_path.parent.mkdir(parents=True, exist_ok=True)
        write_file_content(index_path, f"{category.index_header}\n\n")
        logger.info(f"✅ Created {category.folder}/{self.layout.index_filename}")
        return index_path

    def ensure_root_index(self) -> Path:
        index_path = self.layout.root_index_path
        if index_path.exists():
            return index_path

        lines = [AtomicFolders.ROOT_INDEX_HEADER]
        lines += [f"export * from './{folder}';" for folder in AtomicFolders.CATEGORIES]
        index_path.parent.mkdir(parents=True, exist_ok=True)
        write_file_content(index_path, "\n".join(lines) + "\n")
        logger.info(f"✅ Created main components/{self.layout.index_filename}")
        return index_path

    def add_export(self, category: Category, component_id: str) -> bool:
        """
        Append the re-export declaration of ``component_id`` to the category index.

        Returns True when the index already declares the module or the
        declaration was written, False when the index could not be updated.
        """
        index_name = f"{category.folder}/{self.layout.index_filename}"
        try:
            index_path = self.ensure_index(category)
            content = read_file_content(index_path)
        except OSError as e:
            logger.error(f"❌ Could not read {index_name}: {e}")
            return False

        if self.declares_module(content, component_id):
            logger.info(f"ℹ️  Exports for {component_id} already exist in {index_name}")
            return True

        symbols = multi_export_symbols(component_id)
        statement = build_export_statement(component_id, symbols)
        if content and not content.endswith("\n"):
            statement = "\n" + statement

        try:
            with open(index_path, "a", encoding="utf-8") as f:
                f.write(statement + "\n")
        except OSError as e:
            logger.error(f"❌ Could not update {index_name}: {e}")
            return False

        if symbols:
            logger.info(f"📝 Updated {index_name} with special exports for {component_id}")
        else:
            logger.info(f"📝 Updated {index_name} exports for {component_id}")
        return True

    def remove_export(self, index_path: Path, component_id: str) -> bool:
        """Strip every declaration sourced from ``.../<component_id>``. Returns True if the file changed."""
        if not index_path.exists():
            return False

        display = self.layout.relative(index_path)
        try:
            content = read_file_content(index_path)
            updated = strip_export_declarations(content, component_id)
            if updated == content:
                return False
            write_file_content(index_path, updated)
        except OSError as e:
            logger.warning(f"⚠️ Could not update {display}: {e}")
            return False

        logger.info(f"✅ Removed {component_id} exports from {display}")
        return True

    def remove_export_everywhere(self, component_id: str, include_root: bool = True) -> int:
        paths = [self.layout.index_path(category) for category in Category]
        if include_root:
            paths.append(self.layout.root_index_path)
        return sum(1 for path in paths if self.remove_export(path, component_id))

    def remove_category_exports(self) -> int:
        """Drop the root aggregator's re-exports of the category folders."""
        removed = 0
        for category in Category:
            if self.remove_export(self.layout.root_index_path, category.folder):
                removed += 1
        return removed

    @staticmethod
    def declares_module(content: str, component_id: str) -> bool:
        return re.search(rf'from\s*["\']\./{re.escape(component_id)}["\']', content) is not None


def build_export_statement(component_id: str, symbols: Optional[tuple] = None) -> str:
    if symbols:
        body = ",\n  ".join(symbols)
        return f'export {{\n  {body},\n}} from "./{component_id}";'
    return f"export * from './{component_id}';"


def strip_export_declarations(content: str, component_id: str) -> str:
    # Source path must end in "/<id>" followed by the closing quote, so
    # "alert-dialog" survives removing "dialog".
    pattern = re.compile(
        r'^[ \t]*export\s*(?:type\s+)?(?:\*(?:\s+as\s+\w+)?|\{[^}]*\})\s*from\s*'
        rf'["\'][^"\']*/{re.escape(component_id)}["\'][ \t]*;?[ \t]*(?:\r?\n|$)',
        re.MULTILINE,
    )
    return pattern.sub("", content)
