"""
Kiln CLI - Command-line interface for component scaffolding

Usage:
    kiln create [--name <name>] [--directory <dir>]
    kiln check-name <name>
    kiln version
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from kiln.config import KilnConfig
from kiln.errors import FolderAlreadyExists, RepositoryInitFailed
from kiln.generator import ComponentGenerator, GenerationResult
from kiln.log import setup_logging
from kiln.naming import ComponentName, validate_component_name
from kiln.prompts import Prompter, RichPrompter

app = typer.Typer(
    name="kiln",
    help="Scaffold TypeScript web component projects",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _load_config(path: Optional[Path]) -> KilnConfig:
    try:
        return KilnConfig.load(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        err_console.print(f"Invalid configuration: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(2)


def _collect_answers(
    prompter: Prompter,
    config: KilnConfig,
    name: Optional[str],
    git: Optional[bool],
    install: Optional[bool],
) -> tuple[ComponentName, bool, bool]:
    """Ask for whatever was not given on the command line."""
    if name is None:
        name = prompter.text("Component name", validate_component_name)
    component = ComponentName.parse(name)

    if git is None:
        git = prompter.confirm("Create a git repository?", config.init_repository)
    if install is None:
        install = prompter.confirm("Install dependencies?", config.install_dependencies)

    return component, git, install


@app.command()
def create(
    name: Optional[str] = typer.Option(
        None,
        "--name", "-n",
        help="Component name (snake_case, kebab-case or UpperCamelCase)",
    ),
    directory: Path = typer.Option(
        Path("."),
        "--directory", "-d",
        help="Directory the project folder is created in",
        file_okay=False,
        resolve_path=True,
    ),
    git: Optional[bool] = typer.Option(
        None,
        "--git/--no-git",
        help="Initialize a git repository (asked when omitted)",
    ),
    install: Optional[bool] = typer.Option(
        None,
        "--install/--no-install",
        help="Install npm dependencies (asked when omitted)",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to a kiln.yaml config file",
        exists=True,
        dir_okay=False,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be generated without writing files",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Create a new component project."""
    config = _load_config(config_file)
    setup_logging("DEBUG" if verbose else config.log_level)

    try:
        component, git, install = _collect_answers(RichPrompter(console), config, name, git, install)
        generator = ComponentGenerator(config)

        if dry_run:
            generator.check_templates(component)
            rprint(f"\n[yellow]Dry run - would generate to: {generator.project_dir(component, directory)}[/yellow]\n")
            _show_preview(generator, component, git, install)
            return

        with console.status(f"Creating [bold]{component}[/bold]..."):
            result = generator.generate(
                component,
                directory,
                init_repository=git,
                install_dependencies=install,
            )

        rprint(f"[green]✓[/green] Generated {len(result.files)} files to {result.project_dir}")
        _show_next_steps(result)

    except (FolderAlreadyExists, RepositoryInitFailed) as e:
        err_console.print(str(e), markup=False, soft_wrap=True)
        raise typer.Exit(e.exit_code)
    except typer.Exit:
        raise
    except Exception as e:
        logger.debug("Unhandled failure", exc_info=True)
        err_console.print(f"Unknown error: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(2)


@app.command("check-name")
def check_name(
    name: str = typer.Argument(..., help="Component name to check"),
) -> None:
    """Show how a component name is classified and converted."""
    error = validate_component_name(name)
    if error is not None:
        rprint(f"[red]✗[/red] {error}")
        raise typer.Exit(1)

    component = ComponentName.parse(name)
    rprint(f"[green]✓[/green] Valid: [bold]{component}[/bold]")

    table = Table()
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Style", component.style.value)
    table.add_row("componentName", component.kebab_case)
    table.add_row("componentClassName", component.upper_camel_case)

    rprint(table)


@app.command()
def version() -> None:
    """Show version."""
    from kiln import __version__
    rprint(f"kiln {__version__}")


def _show_preview(
    generator: ComponentGenerator,
    component: ComponentName,
    git: bool,
    install: bool,
) -> None:
    """Show what would be generated."""
    tree = Tree(f"[bold]{component}/[/bold]")
    for path in generator.plan(component):
        tree.add(path)

    steps = tree.add("[blue]Steps[/blue]")
    steps.add(f"git init: {'yes' if git else 'no'}")
    steps.add(f"install dependencies: {'yes' if install else 'no'}")

    rprint(tree)


def _show_next_steps(result: GenerationResult) -> None:
    """Show next steps."""
    install_line = "" if result.dependencies_installed else "\n  npm install"
    steps = f"""
[bold]Next:[/bold]
  cd {result.project_dir}{install_line}
  npm run build
"""
    rprint(Panel(steps, title="Done"))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
