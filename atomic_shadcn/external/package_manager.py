import shlex
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from atomic_shadcn.utils.exceptions import ExternalToolError


class PackageManager:
    """
    Synchronous wrapper around the scaffolding tool and the npm installer.

    Commands are templates from configuration; ``{component}`` and
    ``{packages}`` are substituted before the command is split and run
    without a shell.
    """

    def __init__(
        self,
        project_root: Path,
        scaffold_command: str = "npx shadcn@latest add {component}",
        install_command: str = "npm install",
        uninstall_command: str = "npm uninstall {packages}",
        timeout: Optional[float] = 300,
    ):
        self.project_root = Path(project_root)
        self.scaffold_command = scaffold_command
        self.install_command = install_command
        self.uninstall_command = uninstall_command
        self.timeout = timeout

    @classmethod
    def from_config(cls, project_root: Path, configs) -> "PackageManager":
        return cls(
            project_root,
            scaffold_command=configs.ATOMIC_SCAFFOLD_COMMAND,
            install_command=configs.ATOMIC_INSTALL_COMMAND,
            uninstall_command=configs.ATOMIC_UNINSTALL_COMMAND,
            timeout=configs.ATOMIC_COMMAND_TIMEOUT,
        )

    def scaffold(self, component_id: str) -> str:
        return self.run(self.scaffold_command.format(component=shlex.quote(component_id)))

    def install(self) -> str:
        return self.run(self.install_command)

    def uninstall(self, packages: Sequence[str]) -> str:
        return self.run(self.uninstall_command.format(packages=" ".join(shlex.quote(p) for p in packages)))

    def run(self, command: str) -> str:
        logger.info(f"> {command}")
        try:
            completed = subprocess.run(
                shlex.split(command),
                cwd=str(self.project_root),
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise ExternalToolError(command, f"executable not found ({e.filename})") from e
        except subprocess.TimeoutExpired as e:
            raise ExternalToolError(command, f"timed out after {self.timeout}s") from e

        if completed.returncode != 0:
            output = (completed.stderr or completed.stdout or "").strip()
            raise ExternalToolError(command, f"exited with code {completed.returncode}", output)

        logger.debug(completed.stdout.strip())
        return completed.stdout
