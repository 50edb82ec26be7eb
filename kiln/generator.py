"""
Kiln Generator - Creates a component project from templates

The project folder is created fresh; the run never touches an existing
folder and never deletes what it already wrote when a later step fails.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from kiln.config import KilnConfig
from kiln.errors import DependencyInstallFailed, FolderAlreadyExists, RepositoryInitFailed
from kiln.naming import ComponentName
from kiln.process import ProcessRunner
from kiln.render import TemplateRenderer

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# GENERATED FILE TRACKING
# ═══════════════════════════════════════════════════════════════════════════


@dataclass
class GeneratedFile:
    """Represents a generated file."""

    path: str  # Relative path from project directory
    template: str
    copied: bool = False  # Copied verbatim instead of rendered


@dataclass
class GenerationResult:
    """Result of a scaffolding run."""

    project_dir: Path
    files: list[GeneratedFile] = field(default_factory=list)
    repository_initialized: bool = False
    dependencies_installed: bool = False


# ═══════════════════════════════════════════════════════════════════════════
# COMPONENT GENERATOR
# ═══════════════════════════════════════════════════════════════════════════


class ComponentGenerator:
    """
    Scaffolds a TypeScript web component project.

    Every step takes the project directory explicitly; the process working
    directory is left alone.
    """

    def __init__(
        self,
        config: KilnConfig | None = None,
        runner: ProcessRunner | None = None,
        renderer: TemplateRenderer | None = None,
    ):
        self.config = config or KilnConfig()
        self.runner = runner or ProcessRunner()
        self.renderer = renderer or TemplateRenderer(self.config.templates_dir)

    def _rendered_files(self, name: ComponentName) -> list[tuple[str, str]]:
        """(destination, template) pairs for the rendered templates."""
        src_ext = self.config.source_extension
        cfg_ext = self.config.config_extension
        return [
            (f"src/{name.kebab_case}.{src_ext}", f"component.{src_ext}.j2"),
            (f"webpack.config.{cfg_ext}", f"webpack.config.{cfg_ext}.j2"),
            ("package.json", "package.json.j2"),
        ]

    def _copied_files(self) -> list[tuple[str, str]]:
        return [
            ("tsconfig.json", "tsconfig.json"),
            (".gitignore", "gitignore"),
        ]

    def plan(self, name: ComponentName) -> list[str]:
        """Relative paths a run for ``name`` would create."""
        return [dest for dest, _ in self._rendered_files(name) + self._copied_files()]

    def check_templates(self, name: ComponentName) -> None:
        """Resolve every template a run needs, before anything is written."""
        for _, template in self._rendered_files(name):
            self.renderer.load(template)
        for _, template in self._copied_files():
            self.renderer.path_of(template)

    def project_dir(self, name: ComponentName, target_dir: Path) -> Path:
        return Path(target_dir).expanduser().resolve() / name.raw

    # ═══════════════════════════════════════════════════════════════════════
    # STEPS
    # ═══════════════════════════════════════════════════════════════════════

    def create_folder(self, project_dir: Path) -> None:
        """Create the project folder (and its ``src``), failing if it exists."""
        try:
            project_dir.mkdir(parents=True)
        except FileExistsError as e:
            raise FolderAlreadyExists(project_dir) from e
        (project_dir / "src").mkdir()
        logger.info("Created %s", project_dir)

    def init_repository(self, project_dir: Path) -> None:
        command = self.config.git_command
        if not self.runner.run(command, project_dir):
            raise RepositoryInitFailed(project_dir, " ".join(command))
        logger.info("Initialized repository in %s", project_dir)

    def write_files(self, name: ComponentName, project_dir: Path, result: GenerationResult) -> None:
        """Render the templates and copy the fixed files into ``project_dir``."""
        bindings = name.template_content()

        for relative_path, template in self._rendered_files(name):
            content = self.renderer.render(template, bindings)
            full_path = project_dir / relative_path
            full_path.write_text(content)
            result.files.append(GeneratedFile(path=relative_path, template=template))
            logger.debug("Rendered %s -> %s", template, relative_path)

        for relative_path, template in self._copied_files():
            shutil.copyfile(self.renderer.path_of(template), project_dir / relative_path)
            result.files.append(GeneratedFile(path=relative_path, template=template, copied=True))
            logger.debug("Copied %s -> %s", template, relative_path)

    def install_dependencies(self, project_dir: Path) -> None:
        command = self.config.install_command
        if not self.runner.run(command, project_dir):
            raise DependencyInstallFailed(project_dir, " ".join(command))
        logger.info("Installed dependencies in %s", project_dir)

    # ═══════════════════════════════════════════════════════════════════════
    # PIPELINE
    # ═══════════════════════════════════════════════════════════════════════

    def generate(
        self,
        name: ComponentName,
        target_dir: Path,
        *,
        init_repository: bool,
        install_dependencies: bool,
    ) -> GenerationResult:
        """
        Run the whole scaffolding pipeline.

        Args:
            name: Accepted component name
            target_dir: Directory the project folder is created in
            init_repository: Run the git init command in the new folder
            install_dependencies: Run the install command in the new folder

        Returns:
            GenerationResult describing what was created

        Raises:
            FolderAlreadyExists: the project folder is already present
            RepositoryInitFailed: the git init command failed
            DependencyInstallFailed: the install command failed
            TemplateNotFound: a template is missing; nothing is created
        """
        self.check_templates(name)
        project_dir = self.project_dir(name, target_dir)
        self.create_folder(project_dir)
        result = GenerationResult(project_dir=project_dir)

        try:
            if init_repository:
                self.init_repository(project_dir)
                result.repository_initialized = True

            self.write_files(name, project_dir, result)

            if install_dependencies:
                self.install_dependencies(project_dir)
                result.dependencies_installed = True
        except Exception:
            logger.warning("Run aborted; %s was left partially populated", project_dir)
            raise

        return result


# ═══════════════════════════════════════════════════════════════════════════
# PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════


def generate_component(
    name: str | ComponentName,
    target_dir: str | Path,
    *,
    init_repository: bool = False,
    install_dependencies: bool = False,
    config: KilnConfig | None = None,
) -> GenerationResult:
    """
    Scaffold a component project.

    Args:
        name: Component name, as typed or already parsed
        target_dir: Directory the project folder is created in
        init_repository: Run git init in the new folder
        install_dependencies: Run npm install in the new folder
        config: Optional settings; defaults apply otherwise
    """
    if isinstance(name, str):
        name = ComponentName.parse(name)

    generator = ComponentGenerator(config)
    return generator.generate(
        name,
        Path(target_dir),
        init_repository=init_repository,
        install_dependencies=install_dependencies,
    )
