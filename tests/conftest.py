"""Shared fixtures for atomic-shadcn tests."""

import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from atomic_shadcn.config.config import configs
from atomic_shadcn.models.domain_models import ProjectLayout
from atomic_shadcn.utils.exceptions import ExternalToolError

BUTTON_TSX = """import * as React from "react"

const Button = React.forwardRef((props, ref) => <button ref={ref} {...props} />)
Button.displayName = "Button"

export { Button, buttonVariants }
"""

CARD_TSX = """import * as React from "react"

const Card = React.forwardRef((props, ref) => <div ref={ref} {...props} />)
const CardHeader = React.forwardRef((props, ref) => <div ref={ref} {...props} />)
const CardTitle = React.forwardRef((props, ref) => <div ref={ref} {...props} />)

export { Card, CardHeader, CardTitle }
"""


class FakePackageManager:
    """Stands in for npx/npm: records calls and writes scaffolded files into the pool."""

    def __init__(self, layout: ProjectLayout, fail_scaffold: bool = False, fail_uninstall: bool = False):
        self.layout = layout
        self.fail_scaffold = fail_scaffold
        self.fail_uninstall = fail_uninstall
        self.calls = []

    def scaffold(self, component_id: str) -> str:
        self.calls.append(("scaffold", component_id))
        if self.fail_scaffold:
            raise ExternalToolError(f"npx shadcn@latest add {component_id}", "exited with code 1", "network down")
        pool = self.layout.pool_path
        pool.mkdir(parents=True, exist_ok=True)
        (pool / f"{component_id}.tsx").write_text(f"export const Generated = '{component_id}'\n", encoding="utf-8")
        return ""

    def install(self) -> str:
        self.calls.append(("install",))
        return ""

    def uninstall(self, packages) -> str:
        self.calls.append(("uninstall", tuple(packages)))
        if self.fail_uninstall:
            raise ExternalToolError("npm uninstall", "exited with code 1")
        return ""


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path) -> Path:
    """A minimal Next.js-style project with an empty ui pool and a package.json."""
    write(
        tmp_path / "package.json",
        json.dumps({"name": "demo", "scripts": {"dev": "next dev"}, "dependencies": {"react": "^18.2.0"}}, indent=2),
    )
    (tmp_path / "src" / "components" / "ui").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def layout(project) -> ProjectLayout:
    return ProjectLayout.from_config(project, configs)


@pytest.fixture
def fake_packages(layout) -> FakePackageManager:
    return FakePackageManager(layout)


@pytest.fixture
def service(project, fake_packages):
    from atomic_shadcn.services.atomic_service import AtomicService

    return AtomicService(project, package_manager=fake_packages)
