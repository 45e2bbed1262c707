import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from loguru import logger

from atomic_shadcn.models.domain_models import ProjectLayout, RemovalTarget, RewriteDirection, RewriteStats
from atomic_shadcn.rewriters.import_rules import apply_rules, build_forward_rules, build_reverse_rules
from atomic_shadcn.rewriters.removal_rules import remove_component_references
from atomic_shadcn.utils.common import read_file_content, write_file_content


class CodebaseImportRewriter:
    """
    Tree-wide rewrite of component import paths.

    Every pass rediscovers the source files, reads each one once, runs the
    pass's transformation over the full text, and writes the file back only
    when the text changed. A file that cannot be read or written is logged,
    counted as failed, and skipped.
    """

    def __init__(
        self,
        layout: ProjectLayout,
        search_dirs: Sequence[str] = ("src", "app", "pages", "lib", "utils", "hooks", "."),
        source_extensions: Sequence[str] = (".ts", ".tsx", ".js", ".jsx"),
        skip_dirs: Sequence[str] = ("node_modules", ".next", ".git", "dist", "build"),
        scan_components_dir: bool = False,
    ):
        self.layout = layout
        self.search_dirs = list(search_dirs)
        self.source_extensions = tuple(source_extensions)
        self.skip_dirs = set(skip_dirs)
        self.scan_components_dir = scan_components_dir

    @classmethod
    def from_config(cls, layout: ProjectLayout, configs) -> "CodebaseImportRewriter":
        return cls(
            layout,
            search_dirs=configs.ATOMIC_SEARCH_DIRS,
            source_extensions=configs.ATOMIC_SOURCE_EXTENSIONS,
            skip_dirs=configs.ATOMIC_SKIP_DIRS,
            scan_components_dir=configs.ATOMIC_SCAN_COMPONENTS_DIR,
        )

    def rewrite_forward(self, component_ids: Optional[Iterable[str]] = None) -> RewriteStats:
        """Point pool imports (``@/components/ui/<id>``) at the atomic folders."""
        rules = build_forward_rules(self.layout.import_alias, component_ids)
        stats = self._rewrite(lambda content, source: apply_rules(content, rules)[0], RewriteDirection.FORWARD)
        self._log_summary(stats, "ℹ️  No ui imports found to update")
        if not stats.files_updated:
            logger.info(
                '💡 Tip: Make sure you\'re using imports like: import { Button } from "@/components/ui/button"'
            )
        return stats

    def rewrite_reverse(self, component_ids: Optional[Iterable[str]] = None) -> RewriteStats:
        """Point atomic folder imports back at the ``ui`` pool."""
        rules = build_reverse_rules(self.layout.import_alias, component_ids)
        stats = self._rewrite(lambda content, source: apply_rules(content, rules)[0], RewriteDirection.REVERSE)
        self._log_summary(stats, "ℹ️  No atomic imports found to update")
        return stats

    def remove_references(self, target: RemovalTarget) -> RewriteStats:
        """Delete imports and JSX usages of a removed component."""
        alias = self.layout.import_alias
        stats = self._rewrite(
            lambda content, source: remove_component_references(content, target, alias, source),
            RewriteDirection.REMOVAL,
        )
        self._log_summary(stats, f"ℹ️  No imports of {target.component_id} found")
        return stats

    def existing_search_roots(self) -> List[Path]:
        roots = []
        for directory in self.search_dirs:
            path = (self.layout.project_root / directory).resolve()
            if path.is_dir() and path not in roots:
                roots.append(path)
        return roots

    def find_source_files(self) -> List[Path]:
        """Depth-first listing of source files under every search root, each file once."""
        seen = set()
        files: List[Path] = []
        for root in self.existing_search_roots():
            for path in self._walk(root):
                if path not in seen:
                    seen.add(path)
                    files.append(path)
        return files

    def _walk(self, directory: Path) -> List[Path]:
        found: List[Path] = []
        try:
            entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
        except OSError as e:
            logger.warning(f"⚠️  Cannot read directory {self.layout.relative(directory)}: {e}")
            return found

        for entry in entries:
            path = Path(entry.path)
            try:
                if entry.is_dir(follow_symlinks=False):
                    if self._should_descend(entry.name, path):
                        found.extend(self._walk(path))
                elif entry.is_file() and entry.name.endswith(self.source_extensions):
                    found.append(path)
            except OSError as e:
                logger.warning(f"⚠️  Skipping {self.layout.relative(path)}: {e}")
        return found

    def _should_descend(self, name: str, path: Path) -> bool:
        if name in self.skip_dirs:
            return False
        if not self.scan_components_dir and path == self.layout.components_path.resolve():
            return False
        return True

    def _rewrite(self, transform: Callable[[str, str], str], direction: RewriteDirection) -> RewriteStats:
        stats = RewriteStats()
        roots = self.existing_search_roots()
        if not roots:
            logger.info("   ℹ️  No common folders found")
            return stats

        logger.info(f"   📂 Searching in: {', '.join(self.layout.relative(root) for root in roots)}")
        files = self.find_source_files()
        logger.info(f"   🔍 Scanning {len(files)} files for imports...")

        for file_path in files:
            display = self.layout.relative(file_path)
            try:
                content = read_file_content(file_path)
            except OSError as e:
                stats.files_failed += 1
                logger.error(f"   ❌ Error reading {display}: {e}")
                continue

            stats.files_scanned += 1
            updated = transform(content, display)
            if updated == content:
                continue

            try:
                write_file_content(file_path, updated)
            except OSError as e:
                stats.files_failed += 1
                logger.error(f"   ❌ Error updating {display}: {e}")
                continue

            stats.files_updated += 1
            stats.updated_paths.append(display)
            logger.info(f"   ✅ Updated imports in {display}")

        logger.debug(f"{direction.value} pass finished: {stats.to_dict()}")
        return stats

    @staticmethod
    def _log_summary(stats: RewriteStats, nothing_found: str) -> None:
        logger.info(f"   📊 Scanned {stats.files_scanned} files")
        if stats.files_failed:
            logger.warning(f"   ⚠️  Skipped {stats.files_failed} file(s) that could not be read or written")
        if stats.files_updated:
            logger.info(f"   ✅ Updated {stats.files_updated} file(s)")
        else:
            logger.info(f"   {nothing_found}")
