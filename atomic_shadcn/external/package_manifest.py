import json
from collections import OrderedDict
from pathlib import Path
from typing import Dict, Iterable, List

from loguru import logger

from atomic_shadcn.utils.common import read_file_content, write_file_content
from atomic_shadcn.utils.exceptions import ManifestError, ManifestNotFoundError


class PackageManifest:
    """
    Read/update access to a project's ``package.json``.

    Every mutating call re-reads the file, so nothing is cached between
    operations. A manifest that cannot be parsed raises :class:`ManifestError`
    before anything is written.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Dict:
        if not self.exists():
            raise ManifestNotFoundError(f"package.json not found at {self.path}")
        try:
            data = json.loads(read_file_content(self.path), object_pairs_hook=OrderedDict)
        except json.JSONDecodeError as e:
            raise ManifestError(f"Could not parse {self.path.name}: {e}") from e
        if not isinstance(data, dict):
            raise ManifestError(f"{self.path.name} must contain a JSON object")
        return data

    def save(self, data: Dict) -> None:
        write_file_content(self.path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")

    def add_dependencies(self, packages: Dict[str, str]) -> List[str]:
        """Add each ``name -> version`` not already declared. Returns the names added."""
        data = self.load()
        dependencies = self._section(data, "dependencies")
        declared = set(dependencies) | set(data.get("devDependencies") or {})

        added = [name for name in packages if name not in declared]
        if not added:
            return []
        for name in added:
            dependencies[name] = packages[name]
        self.save(data)
        return added

    def add_scripts(self, scripts: Dict[str, str]) -> List[str]:
        data = self.load()
        section = self._section(data, "scripts")
        added = [name for name in scripts if name not in section]
        if not added:
            return []
        for name in added:
            section[name] = scripts[name]
        self.save(data)
        return added

    def remove_scripts(self, names: Iterable[str]) -> List[str]:
        """Delete the named scripts, leaving every other key untouched."""
        data = self.load()
        section = data.get("scripts")
        if not isinstance(section, dict):
            return []

        removed = [name for name in names if name in section]
        if not removed:
            return []
        for name in removed:
            del section[name]
            logger.info(f"   🗑️ Removed script: {name}")
        self.save(data)
        return removed

    def _section(self, data: Dict, key: str) -> Dict:
        section = data.get(key)
        if section is None:
            section = OrderedDict()
            data[key] = section
        if not isinstance(section, dict):
            raise ManifestError(f'"{key}" in {self.path.name} must be an object')
        return section
