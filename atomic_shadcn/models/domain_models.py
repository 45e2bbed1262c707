from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from atomic_shadcn.config.atomic_constants import AtomicFolders


class Category(Enum):
    ATOMS = AtomicFolders.ATOMS
    MOLECULES = AtomicFolders.MOLECULES
    ORGANISMS = AtomicFolders.ORGANISMS

    @property
    def folder(self) -> str:
        return self.value

    @property
    def index_header(self) -> str:
        return AtomicFolders.INDEX_HEADERS[self.value]


class RewriteDirection(Enum):
    FORWARD = "forward"
    REVERSE = "reverse"
    REMOVAL = "removal"


@dataclass(frozen=True)
class ProjectLayout:
    project_root: Path
    components_path: Path
    component_extension: str = ".tsx"
    index_filename: str = "index.ts"
    import_alias: str = "@"

    @classmethod
    def from_config(cls, project_root: Path, configs) -> "ProjectLayout":
        root = Path(project_root).resolve()
        return cls(
            project_root=root,
            components_path=root / configs.ATOMIC_COMPONENTS_DIR,
            component_extension=configs.ATOMIC_COMPONENT_EXTENSION,
            index_filename=configs.ATOMIC_INDEX_FILENAME,
            import_alias=configs.ATOMIC_IMPORT_ALIAS,
        )

    @property
    def pool_path(self) -> Path:
        return self.components_path / AtomicFolders.POOL

    @property
    def root_index_path(self) -> Path:
        return self.components_path / self.index_filename

    @property
    def manifest_path(self) -> Path:
        return self.project_root / "package.json"

    def category_path(self, category: Category) -> Path:
        return self.components_path / category.folder

    def index_path(self, category: Category) -> Path:
        return self.category_path(category) / self.index_filename

    def component_file(self, component_id: str, category: Optional[Category] = None) -> Path:
        folder = self.category_path(category) if category else self.pool_path
        return folder / f"{component_id}{self.component_extension}"

    def relative(self, path: Path) -> str:
        try:
            return str(Path(path).relative_to(self.project_root)) or "."
        except ValueError:
            return str(path)


@dataclass
class RewriteStats:
    files_scanned: int = 0
    files_updated: int = 0
    files_failed: int = 0
    updated_paths: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "files_scanned": self.files_scanned,
            "files_updated": self.files_updated,
            "files_failed": self.files_failed,
        }


@dataclass
class RemovalTarget:
    """What a removal pass needs to know about the deleted component."""
    component_id: str
    symbols: Tuple[str, ...] = field(default_factory=tuple)


@dataclass
class OperationResult:
    operation: str
    success: bool = True
    counts: Dict[str, int] = field(default_factory=dict)
    transcript: List[str] = field(default_factory=list)

    def add_count(self, key: str, amount: int = 1) -> None:
        self.counts[key] = self.counts.get(key, 0) + amount

    def merge_stats(self, stats: RewriteStats) -> None:
        for key, value in stats.to_dict().items():
            self.add_count(key, value)
