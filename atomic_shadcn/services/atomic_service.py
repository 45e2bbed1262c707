import json
from pathlib import Path
from typing import List, Optional

from loguru import logger

from atomic_shadcn.classification.classification_table import (
    DEFAULT_CATEGORY,
    MULTI_EXPORT_REGISTRY,
    category_of,
    components_in,
    is_known,
    multi_export_symbols,
    required_packages,
)
from atomic_shadcn.config.atomic_constants import ManifestScripts
from atomic_shadcn.config.config import configs as default_configs
from atomic_shadcn.external.package_manager import PackageManager
from atomic_shadcn.external.package_manifest import PackageManifest
from atomic_shadcn.index.index_maintainer import IndexMaintainer
from atomic_shadcn.models.domain_models import Category, OperationResult, ProjectLayout
from atomic_shadcn.relocator.file_relocator import FileRelocator
from atomic_shadcn.rewriters.codebase_rewriter import CodebaseImportRewriter
from atomic_shadcn.rewriters.removal_rules import removal_target_for
from atomic_shadcn.utils.common import read_file_content, validate_component_id
from atomic_shadcn.utils.exceptions import AtomicShadcnError, ExternalToolError, ManifestError
from atomic_shadcn.utils.transcript import capture_transcript

CATEGORY_TITLES = {
    Category.ATOMS: "⚛️  ATOMS (Basic Elements):",
    Category.MOLECULES: "🧬 MOLECULES (Combined Components):",
    Category.ORGANISMS: "🦠 ORGANISMS (Complex Structures):",
}


class AtomicService:
    """
    Sequences the relocator, index maintainer and import rewriter for each
    operation.

    Operations keep no state between calls: every one re-derives its work from
    the files on disk, so re-running an operation is the recovery path after a
    partial failure. Each public operation returns an :class:`OperationResult`
    whose transcript is the log of that operation.
    """

    def __init__(
        self,
        project_root: Path,
        settings=None,
        package_manager: Optional[PackageManager] = None,
    ):
        self.settings = settings or default_configs
        self.layout = ProjectLayout.from_config(Path(project_root), self.settings)
        self.indexes = IndexMaintainer(self.layout)
        self.relocator = FileRelocator(self.layout)
        self.rewriter = CodebaseImportRewriter.from_config(self.layout, self.settings)
        self.manifest = PackageManifest(self.layout.manifest_path)
        self.package_manager = package_manager or PackageManager.from_config(self.layout.project_root, self.settings)

    # init

    def setup(self) -> OperationResult:
        result = OperationResult("init")
        with capture_transcript() as transcript:
            logger.info("🚀 Setting up atomic structure...")
            try:
                self._ensure_structure(result)
            except OSError as e:
                logger.error(f"❌ Could not create atomic structure: {e}")
                result.success = False
            self._install_scripts()
            if result.success:
                logger.info("🎉 Atomic structure setup complete!")
        result.transcript = transcript
        return result

    def _ensure_structure(self, result: OperationResult) -> None:
        for category in Category:
            folder = self.layout.category_path(category)
            if not folder.exists():
                folder.mkdir(parents=True, exist_ok=True)
                logger.info(f"✅ Created {category.folder} folder")
                result.add_count("folders_created")
            self.indexes.ensure_index(category)

        if not self.layout.pool_path.exists():
            self.layout.pool_path.mkdir(parents=True, exist_ok=True)
            logger.info("✅ Created ui folder")
            result.add_count("folders_created")

        self.indexes.ensure_root_index()

    def _install_scripts(self) -> None:
        if not self.manifest.exists():
            return
        try:
            added = self.manifest.add_scripts(ManifestScripts.INSTALLED)
        except (ManifestError, OSError) as e:
            logger.warning(f"⚠️  Could not update package.json scripts automatically: {e}")
            logger.info("📝 Please add these scripts manually:")
            for name, command in ManifestScripts.INSTALLED.items():
                logger.info(f'  "{name}": "{command}"')
            return
        if added:
            logger.info(f"✅ Added npm scripts to package.json: {', '.join(added)}")

    # add

    def install_component(self, component_id: str, run_install: bool = True) -> OperationResult:
        component_id = validate_component_id(component_id)
        result = OperationResult("add")
        with capture_transcript() as transcript:
            logger.info(f"📦 Installing {component_id}...")

            try:
                self.package_manager.scaffold(component_id)
            except ExternalToolError as e:
                result.success = False
                logger.error(f"❌ Error installing {component_id}: {e}")
                if e.output:
                    logger.error(e.output)
                logger.info(f"💡 Try running it manually: {self.settings.ATOMIC_SCAFFOLD_COMMAND.format(component=component_id)}")

            if not self.relocator.in_pool(component_id) and self.relocator.locate(component_id) is None:
                logger.warning(f"⚠️  Scaffolding did not create ui/{component_id}{self.layout.component_extension}")

            self._merge_requirements(component_id, result, run_install)
            organized = self._organize(component_id, result)
            result.success = result.success and organized
        result.transcript = transcript
        return result

    def _merge_requirements(self, component_id: str, result: OperationResult, run_install: bool) -> None:
        packages = required_packages(component_id)
        if not packages:
            logger.info(f"📦 No extra dependencies declared for {component_id}")
            return
        if not self.manifest.exists():
            logger.warning("⚠️  package.json not found, skipping dependency update")
            return

        version = self.settings.ATOMIC_DEPENDENCY_VERSION
        try:
            added = self.manifest.add_dependencies({name: version for name in packages})
        except (ManifestError, OSError) as e:
            logger.error(f"❌ Could not update package.json dependencies: {e}")
            return

        if not added:
            logger.info(f"ℹ️  Dependencies for {component_id} already present")
            return
        logger.info(f"📝 Added dependencies to package.json: {', '.join(added)}")
        result.add_count("dependencies_added", len(added))

        if not run_install:
            return
        try:
            self.package_manager.install()
            logger.info("✅ Dependencies installed")
        except ExternalToolError as e:
            logger.error(f"❌ Error installing dependencies: {e}")
            logger.info(f"💡 Run manually: {self.settings.ATOMIC_INSTALL_COMMAND}")

    # organize

    def organize(self, component_id: Optional[str] = None) -> OperationResult:
        if component_id is not None:
            component_id = validate_component_id(component_id)
        result = OperationResult("organize")
        with capture_transcript() as transcript:
            result.success = self._organize(component_id, result)
        result.transcript = transcript
        return result

    def _organize(self, component_id: Optional[str], result: OperationResult) -> bool:
        pool = self.layout.pool_path
        logger.info(f"🔍 Checking ui folder at: {self.layout.relative(pool)}")

        pending = self.relocator.pool_components()
        if pool.exists():
            logger.info(f"📁 Found {len(pending)} component file(s) in ui folder: {', '.join(pending)}")
        else:
            logger.info("ℹ️  No ui folder found")

        if component_id:
            pending = [pid for pid in pending if pid == component_id]
            logger.info(f"🎯 Organizing specific component: {component_id}")

        success = True
        if not pending:
            logger.info("ℹ️  No components to organize")
        for pid in pending:
            category = category_of(pid)
            if not is_known(pid):
                logger.info(f"ℹ️  {pid} is not in the classification table, defaulting to {category.folder}/")
            if not self.relocator.move_to_category(pid, category):
                success = False
                continue
            result.add_count("components_moved")
            if not self.indexes.add_export(category, pid):
                success = False

        self.relocator.cleanup_empty_pool()

        # Ids now classified and gone from the pool; includes those moved by
        # an earlier run that stopped before rewriting imports.
        affected = self._classified_ids()
        if component_id:
            affected = [pid for pid in affected if pid == component_id]
        if not affected:
            return success

        logger.info("\n🔄 Updating imports in project files...")
        result.merge_stats(self.rewriter.rewrite_forward(affected))
        return success

    def _classified_ids(self) -> List[str]:
        pooled = set(self.relocator.pool_components())
        classified = []
        for category in Category:
            classified += [pid for pid in self.relocator.category_components(category) if pid not in pooled]
        return sorted(classified)

    # remove

    def remove(self, component_id: Optional[str] = None) -> OperationResult:
        if component_id is not None:
            component_id = validate_component_id(component_id)
        result = OperationResult("remove")
        with capture_transcript() as transcript:
            if component_id:
                result.success = self._remove_component(component_id, result)
            else:
                result.success = self._remove_cli_scripts(result)
        result.transcript = transcript
        return result

    def _remove_component(self, component_id: str, result: OperationResult) -> bool:
        logger.info(f"🗑️ Removing component: {component_id}")

        module_content = self._read_component(component_id)
        deleted = self.relocator.delete_component(component_id)
        if not deleted:
            logger.error(f"   ❌ Component {component_id} not found")
            return False
        result.add_count("files_deleted", len(deleted))

        result.add_count("index_files_updated", self.indexes.remove_export_everywhere(component_id))

        target = removal_target_for(component_id, module_content, multi_export_symbols(component_id))
        logger.info(f"\n🔄 Removing imports of {component_id} from project files...")
        result.merge_stats(self.rewriter.remove_references(target))

        self._uninstall_dependencies(component_id)
        return True

    def _read_component(self, component_id: str) -> Optional[str]:
        category = self.relocator.locate(component_id)
        path = self.layout.component_file(component_id, category)
        if not path.is_file():
            return None
        try:
            return read_file_content(path)
        except OSError as e:
            logger.warning(f"   ⚠️ Could not read {path.name} to collect its exports: {e}")
            return None

    def _uninstall_dependencies(self, component_id: str) -> None:
        packages = required_packages(component_id)
        if not packages:
            logger.info(f"\n📦 No specific dependencies to uninstall for {component_id}")
            return

        logger.info(f"\n📦 Uninstalling dependencies for {component_id}...")
        logger.info(f"   Packages: {', '.join(packages)}")
        try:
            self.package_manager.uninstall(packages)
        except ExternalToolError as e:
            logger.error(f"❌ Error uninstalling dependencies: {e}")
            logger.info(f"💡 Manual removal: npm uninstall {' '.join(packages)}")
            return
        logger.info("✅ Dependencies removed from package.json")
        logger.warning("⚠️  Note: Check if other components use these packages!")

    def _remove_cli_scripts(self, result: OperationResult) -> bool:
        logger.info("🧹 Removing atomic-shadcn CLI scripts from package.json")
        logger.info("   ℹ️ NOTE: This will NOT remove Radix UI dependencies")

        try:
            removed = self.manifest.remove_scripts(ManifestScripts.MANAGED)
        except (AtomicShadcnError, OSError) as e:
            logger.error(f"   ❌ Error updating package.json: {e}")
            return False

        result.add_count("scripts_removed", len(removed))
        if removed:
            logger.info(f"   ✅ Removed {len(removed)} atomic-shadcn script(s) from package.json")
            logger.info("   ✅ Radix UI dependencies preserved")
        else:
            logger.info("   ℹ️ No atomic-shadcn scripts found to remove")
        return True

    # uninstall

    def uninstall(self, component_id: Optional[str] = None) -> OperationResult:
        if component_id is not None:
            component_id = validate_component_id(component_id)
        result = OperationResult("uninstall")
        with capture_transcript() as transcript:
            if component_id:
                result.success = self._uninstall_component(component_id, result)
            else:
                result.success = self._uninstall_all(result)
        result.transcript = transcript
        return result

    def _uninstall_component(self, component_id: str, result: OperationResult) -> bool:
        logger.info(f"🔄 Moving {component_id} back to ui/...")
        category = self.relocator.locate(component_id)
        if category is None:
            logger.error(f"❌ Component {component_id} not found in atomic folders")
            return False

        if self.relocator.move_to_pool(component_id, category):
            result.add_count("components_restored")
        if not self.relocator.delete_from_category(component_id, category):
            return False

        result.add_count(
            "index_files_updated",
            self.indexes.remove_export_everywhere(component_id, include_root=False),
        )

        logger.info("\n🔄 Updating imports in project files...")
        result.merge_stats(self.rewriter.rewrite_reverse([component_id]))
        return True

    def _uninstall_all(self, result: OperationResult) -> bool:
        logger.info("🔄 Uninstalling atomic structure...")
        logger.info("⚠️  This will:")
        logger.info("   • Move all components from atoms/molecules/organisms back to ui/")
        logger.info("   • Delete atomic folder structure")
        logger.info("   • Revert to original shadcn/ui setup")

        pool = self.layout.pool_path
        if not pool.exists():
            pool.mkdir(parents=True, exist_ok=True)
            logger.info("📁 Created ui/ folder")

        for category in Category:
            for pid in self.relocator.category_components(category):
                if self.relocator.move_to_pool(pid, category):
                    result.add_count("components_restored")

        success = True
        logger.info("\n🗑️  Removing atomic folders...")
        for category in Category:
            if self.relocator.delete_category_folder(category):
                result.add_count("folders_removed")
            elif self.layout.category_path(category).exists():
                success = False

        self.indexes.remove_category_exports()

        logger.info("\n🔄 Updating imports in project files...")
        result.merge_stats(self.rewriter.rewrite_reverse())

        if self.manifest.exists():
            self._remove_cli_scripts(result)

        logger.info("\n✅ Atomic structure uninstalled successfully!" if success
                    else "\n⚠️  Atomic structure partially uninstalled, re-run to finish")
        logger.info("📊 Summary:")
        logger.info(f"   • {result.counts.get('components_restored', 0)} components moved back to ui/")
        logger.info(f"   • {result.counts.get('folders_removed', 0)} atomic folders removed")
        logger.info(f"   • {result.counts.get('files_updated', 0)} files with updated imports")
        logger.info("\n💡 Your project is back to original shadcn/ui structure")
        logger.info("   Import components like: import { Button } from '@/components/ui/button'")
        return success

    # mapping / debug

    def show_mapping(self) -> OperationResult:
        result = OperationResult("mapping")
        with capture_transcript() as transcript:
            logger.info("\n📋 Component Classification Mapping:\n")
            for category in Category:
                if category is not Category.ATOMS:
                    logger.info("")
                logger.info(CATEGORY_TITLES[category])
                members = components_in(category)
                for component_id in members:
                    logger.info(f"   • {component_id}")
                result.add_count(category.folder, len(members))

            logger.info(f"\n💡 Default: Unknown components → {DEFAULT_CATEGORY.folder}/")
            logger.info("\n🔧 Special Multi-Export Components:")
            for component_id, symbols in MULTI_EXPORT_REGISTRY.items():
                logger.info(f"   • {component_id} → {len(symbols)} exports")
        result.transcript = transcript
        return result

    def debug(self) -> OperationResult:
        result = OperationResult("debug")
        with capture_transcript() as transcript:
            layout = self.layout
            logger.info("🔍 Debug Information:\n")
            logger.info(f"📍 Working Directory: {layout.project_root}")
            logger.info(f"📁 Components Path: {layout.components_path}")
            logger.info(f"📂 Components Path Exists: {layout.components_path.exists()}")
            self._debug_manifest()

            pool = layout.pool_path
            logger.info(f"📂 UI Folder Path: {pool}")
            logger.info(f"📂 UI Folder Exists: {pool.exists()}")
            if pool.exists():
                entries = sorted(entry.name for entry in pool.iterdir())
                logger.info(f"📋 UI Folder Contents: {', '.join(entries)}")
                pending = self.relocator.pool_components()
                logger.info(f"📄 TSX Components: {len(pending)} files")
                for component_id in pending:
                    logger.info(f"   • {component_id}{layout.component_extension}")
                result.add_count("pool_components", len(pending))
            else:
                logger.info("❌ UI folder not found!")
                self._debug_alternative_pools()

            for category in Category:
                folder = layout.category_path(category)
                if folder.exists():
                    entries = sorted(entry.name for entry in folder.iterdir())
                    logger.info(f"📁 {category.folder}/ contents: {', '.join(entries)}")
                    result.add_count(category.folder, len(self.relocator.category_components(category)))
                else:
                    logger.info(f"📁 {category.folder}/ folder: Not found")
        result.transcript = transcript
        return result

    def _debug_manifest(self) -> None:
        if not self.manifest.exists():
            return
        try:
            data = self.manifest.load()
        except (ManifestError, OSError):
            logger.info("📦 Could not read package.json")
            return
        dependencies = data.get("dependencies") or {}
        logger.info(f"📦 Project Type: {'React' if 'react' in dependencies else 'Non-React'}")
        logger.info(f"📦 Has shadcn: {'Yes' if '@radix-ui/react-dialog' in dependencies else 'No'}")

    def _debug_alternative_pools(self) -> None:
        root = self.layout.project_root
        candidates = [
            root / "components" / "ui",
            root / "app" / "components" / "ui",
            root / "lib" / "components" / "ui",
        ]
        logger.info("🔍 Checking alternative paths:")
        extension = self.layout.component_extension
        for candidate in candidates:
            exists = candidate.is_dir()
            logger.info(f"   {candidate}: {'✅' if exists else '❌'}")
            if exists:
                files = sorted(p.name for p in candidate.iterdir() if p.name.endswith(extension))
                logger.info(f"     Components: {', '.join(files)}")

    def describe(self) -> str:
        """JSON snapshot of the classification, for scripting."""
        return json.dumps(
            {category.folder: components_in(category) for category in Category},
            indent=2,
        )
