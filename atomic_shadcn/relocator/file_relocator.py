import shutil
from pathlib import Path
from typing import List, Optional

from loguru import logger

from atomic_shadcn.models.domain_models import Category, ProjectLayout


class FileRelocator:
    """Moves component modules between the ``ui`` pool and the atomic folders."""

    def __init__(self, layout: ProjectLayout):
        self.layout = layout

    def pool_components(self) -> List[str]:
        return self._component_ids(self.layout.pool_path)

    def category_components(self, category: Category) -> List[str]:
        return self._component_ids(self.layout.category_path(category))

    def locate(self, component_id: str) -> Optional[Category]:
        for category in Category:
            if self.layout.component_file(component_id, category).is_file():
                return category
        return None

    def in_pool(self, component_id: str) -> bool:
        return self.layout.component_file(component_id).is_file()

    def move_to_category(self, component_id: str, category: Category) -> bool:
        source = self.layout.component_file(component_id)
        target = self.layout.component_file(component_id, category)
        logger.info(f"🚚 Moving: {self.layout.relative(source)} → {self.layout.relative(target)}")

        target_folder = target.parent
        if not target_folder.exists():
            target_folder.mkdir(parents=True, exist_ok=True)
            logger.info(f"📁 Created target folder: {category.folder}")

        if not source.is_file():
            logger.warning(f"⚠️  Source file not found: {self.layout.relative(source)}")
            return False

        try:
            # os.replace semantics: an existing target is overwritten
            source.replace(target)
        except OSError as e:
            logger.error(f"❌ Error moving {component_id}: {e}")
            return False

        logger.info(f"📁 Moved {component_id} → {category.folder}/")
        return True

    def move_to_pool(self, component_id: str, category: Category) -> bool:
        """
        Copy a classified component back into the pool.

        The category copy is left in place; the caller deletes it with
        :meth:`delete_from_category` once the pool copy is verified. A file
        already present in the pool is never overwritten.

        Returns True only when a new pool copy was written.
        """
        source = self.layout.component_file(component_id, category)
        target = self.layout.component_file(component_id)
        file_name = source.name

        if not source.is_file():
            logger.warning(f"⚠️  Source file not found: {category.folder}/{file_name}")
            return False

        if target.exists():
            logger.warning(f"⚠️  Skipped {file_name} (already exists in ui/)")
            return False

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
        except OSError as e:
            logger.error(f"❌ Error moving {file_name}: {e}")
            return False

        logger.info(f"📦 Moved {category.folder}/{file_name} → ui/{file_name}")
        return True

    def delete_from_category(self, component_id: str, category: Category) -> bool:
        source = self.layout.component_file(component_id, category)
        if not source.is_file():
            return False
        if not self.in_pool(component_id):
            logger.warning(
                f"⚠️  Keeping {category.folder}/{source.name}: no copy of it exists in ui/"
            )
            return False

        try:
            source.unlink()
        except OSError as e:
            logger.error(f"❌ Error deleting {category.folder}/{source.name}: {e}")
            return False

        logger.info(f"🗑️  Deleted {category.folder}/{source.name}")
        return True

    def delete_component(self, component_id: str) -> List[Path]:
        """Delete every copy of the component, classified or pooled."""
        candidates = [self.layout.component_file(component_id, category) for category in Category]
        candidates.append(self.layout.component_file(component_id))

        deleted = []
        for path in candidates:
            if not path.is_file():
                continue
            try:
                path.unlink()
            except OSError as e:
                logger.error(f"❌ Could not delete {self.layout.relative(path)}: {e}")
                continue
            deleted.append(path)
            logger.info(f"✅ Removed {path.name} from {path.parent.name}/")
        return deleted

    def delete_category_folder(self, category: Category) -> bool:
        folder = self.layout.category_path(category)
        if not folder.exists():
            return False

        stranded = [
            component_id for component_id in self.category_components(category)
            if not self.in_pool(component_id)
        ]
        if stranded:
            logger.warning(
                f"⚠️  Keeping {category.folder}/: no ui/ copy for {', '.join(stranded)}"
            )
            return False

        try:
            shutil.rmtree(folder)
        except OSError as e:
            logger.error(f"❌ Error deleting {category.folder}/: {e}")
            return False

        logger.info(f"✅ Deleted {category.folder}/")
        return True

    def cleanup_empty_pool(self) -> bool:
        pool = self.layout.pool_path
        if not pool.exists():
            logger.info("ℹ️  UI folder already removed")
            return False

        try:
            remaining = sorted(entry.name for entry in pool.iterdir())
            logger.info(f"📋 Checking ui folder contents: {', '.join(remaining)}")

            if not remaining:
                pool.rmdir()
                logger.info("🧹 Removed empty ui folder")
                return True

            component_files = [name for name in remaining if name.endswith(self.layout.component_extension)]
            if component_files:
                logger.warning(f"⚠️  UI folder still contains component files: {', '.join(component_files)}")
            else:
                logger.info("ℹ️  UI folder contains non-component files, keeping it")
                logger.info(f"📝 Remaining files: {', '.join(remaining)}")
        except OSError as e:
            logger.warning(f"⚠️  Could not remove ui folder: {e}")
            logger.info("💡 You can manually remove it if it's empty")
        return False

    def _component_ids(self, folder: Path) -> List[str]:
        if not folder.is_dir():
            return []
        extension = self.layout.component_extension
        return sorted(
            entry.name[: -len(extension)]
            for entry in folder.iterdir()
            if entry.is_file() and entry.name.endswith(extension)
        )
