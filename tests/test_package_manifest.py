"""
Tests for package.json updates.
"""

import json

import pytest

from atomic_shadcn.external.package_manifest import PackageManifest
from atomic_shadcn.utils.exceptions import ManifestError, ManifestNotFoundError

from conftest import write


@pytest.fixture
def manifest(project):
    return PackageManifest(project / "package.json")


def load(project):
    return json.loads((project / "package.json").read_text())


class TestDependencies:

    def test_adds_only_missing_packages(self, manifest, project):
        added = manifest.add_dependencies({"react": "latest", "vaul": "latest"})

        assert added == ["vaul"]
        assert load(project)["dependencies"] == {"react": "^18.2.0", "vaul": "latest"}

    def test_dev_dependencies_count_as_declared(self, manifest, project):
        write(project / "package.json", json.dumps({"devDependencies": {"zod": "^3.0.0"}}))

        assert manifest.add_dependencies({"zod": "latest"}) == []
        assert "dependencies" not in load(project)

    def test_key_order_is_preserved(self, manifest, project):
        manifest.add_dependencies({"sonner": "latest"})
        assert list(load(project)) == ["name", "scripts", "dependencies"]


class TestScripts:

    def test_add_and_remove(self, manifest, project):
        assert manifest.add_scripts({"organize": "atomic-shadcn organize"}) == ["organize"]
        assert manifest.add_scripts({"organize": "something else"}) == []

        assert manifest.remove_scripts(["organize", "atomic-init"]) == ["organize"]
        assert load(project)["scripts"] == {"dev": "next dev"}

    def test_remove_without_scripts_section(self, manifest, project):
        write(project / "package.json", "{}")
        assert manifest.remove_scripts(["organize"]) == []


class TestErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestNotFoundError):
            PackageManifest(tmp_path / "package.json").load()

    def test_invalid_json(self, manifest, project):
        write(project / "package.json", "{")
        with pytest.raises(ManifestError):
            manifest.add_scripts({"organize": "atomic-shadcn organize"})
        assert (project / "package.json").read_text() == "{"

    def test_non_object_section(self, manifest, project):
        write(project / "package.json", json.dumps({"scripts": ["dev"]}))
        with pytest.raises(ManifestError):
            manifest.add_scripts({"organize": "atomic-shadcn organize"})

    def test_saved_file_ends_with_newline(self, manifest, project):
        manifest.add_scripts({"organize": "atomic-shadcn organize"})
        assert (project / "package.json").read_text().endswith("}\n")
