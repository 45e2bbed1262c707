import os
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Configs(BaseSettings):

    # project layout
    ATOMIC_COMPONENTS_DIR: str = os.getenv("ATOMIC_COMPONENTS_DIR", os.path.join("src", "components"))
    ATOMIC_IMPORT_ALIAS: str = os.getenv("ATOMIC_IMPORT_ALIAS", "@")
    ATOMIC_COMPONENT_EXTENSION: str = os.getenv("ATOMIC_COMPONENT_EXTENSION", ".tsx")
    ATOMIC_INDEX_FILENAME: str = os.getenv("ATOMIC_INDEX_FILENAME", "index.ts")

    # import rewriting
    # The components tree is skipped unless ATOMIC_SCAN_COMPONENTS_DIR is set, so
    # app-level files kept there (e.g. src/components/site-header.tsx) keep their
    # ui/ imports after organize; sibling "./ui/<id>" paths only occur there too.
    ATOMIC_SEARCH_DIRS: List[str] = ["src", "app", "pages", "lib", "utils", "hooks", "."]
    ATOMIC_SOURCE_EXTENSIONS: List[str] = [".ts", ".tsx", ".js", ".jsx"]
    ATOMIC_SKIP_DIRS: List[str] = ["node_modules", ".next", ".git", "dist", "build"]
    ATOMIC_SCAN_COMPONENTS_DIR: bool = False

    # external tools
    ATOMIC_SCAFFOLD_COMMAND: str = os.getenv("ATOMIC_SCAFFOLD_COMMAND", "npx shadcn@latest add {component}")
    ATOMIC_INSTALL_COMMAND: str = os.getenv("ATOMIC_INSTALL_COMMAND", "npm install")
    ATOMIC_UNINSTALL_COMMAND: str = os.getenv("ATOMIC_UNINSTALL_COMMAND", "npm uninstall {packages}")
    ATOMIC_COMMAND_TIMEOUT: float = float(os.getenv("ATOMIC_COMMAND_TIMEOUT", "300"))
    ATOMIC_DEPENDENCY_VERSION: str = os.getenv("ATOMIC_DEPENDENCY_VERSION", "latest")

    # logging
    ATOMIC_LOG_FILE: str = os.getenv("ATOMIC_LOG_FILE", "atomic_shadcn.log")

    def validate_layout_config(self) -> None:
        """Validate settings the engine cannot run without."""
        if not self.ATOMIC_COMPONENTS_DIR:
            raise ValueError("ATOMIC_COMPONENTS_DIR must not be empty.")
        if not self.ATOMIC_IMPORT_ALIAS:
            raise ValueError("ATOMIC_IMPORT_ALIAS must not be empty.")
        if not self.ATOMIC_COMPONENT_EXTENSION.startswith("."):
            raise ValueError(
                "ATOMIC_COMPONENT_EXTENSION must start with a dot, "
                f"got {self.ATOMIC_COMPONENT_EXTENSION!r}."
            )
        if not self.ATOMIC_SEARCH_DIRS:
            raise ValueError("ATOMIC_SEARCH_DIRS must list at least one directory.")

    model_config = SettingsConfigDict(case_sensitive=True)


configs = Configs()
