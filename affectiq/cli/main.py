# ==============================
# 📁 affectiq/cli/main.py
# ==============================
import asyncio
import json
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import DetectConfig, load_config
from ..core.detector import detect
from ..core.exceptions import AffectIQError
from ..providers import (
    ChangedFilesProvider,
    CommandListProvider,
    CurrentCommitProvider,
    DeclaredDependencyProvider,
    DependencyProvider,
    GitDiffProvider,
    NpmDependencyProvider,
    StagedFilesProvider,
    YarnWorkspaceProvider,
    git_root,
)
from ..shared.app_logger import configure_logging, get_app_logger
from ..shared.tracing import setup_tracing

logger = get_app_logger(__name__)

app = typer.Typer(
    name="affectiq",
    help="Print the workspace projects affected by the current changes as JSON.",
    add_completion=False,
)


def select_changed_files_provider(
    tag: str, staged: bool, current_commit: bool, list_command: Optional[str], cwd: Optional[str] = None
) -> ChangedFilesProvider:
    if list_command:
        return CommandListProvider(list_command, cwd=cwd)
    if current_commit:
        return CurrentCommitProvider(cwd=cwd)
    if staged:
        return StagedFilesProvider(cwd=cwd)
    return GitDiffProvider(tag, cwd=cwd)


def run_detection(config: DetectConfig, changed_provider: ChangedFilesProvider) -> dict:
    root = config.root or git_root()
    workspace = YarnWorkspaceProvider(root).workspace()
    changed = changed_provider.changed_files()
    dependency_provider: DependencyProvider
    if config.dependency_source == "npm":
        dependency_provider = NpmDependencyProvider()
    else:
        dependency_provider = DeclaredDependencyProvider(workspace, root)
    result = asyncio.run(detect(workspace, changed, config, dependency_provider=dependency_provider, root=root))
    return result.output()


@app.command("detect")
def detect_command(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Write verbose logs to stderr.")] = False,
    tag: Annotated[str, typer.Option("--tag", "-t", help="Compare to tag (master, HEAD~1, sha, etc).")] = "master",
    staged: Annotated[bool, typer.Option("--staged", help="Only use currently staged files.")] = False,
    list_command: Annotated[Optional[str], typer.Option("--list-command", help="Command to execute to get the set of changed files.")] = None,
    current_commit: Annotated[bool, typer.Option("--current-commit", help="Only use files in the current commit.")] = False,
    no_transitive: Annotated[bool, typer.Option("--no-transitive", help="Don't follow transitive dependencies.")] = False,
    config: Annotated[Optional[str], typer.Option("--config", "-c", help="Path to config. Defaults to .affectiq.json in the working directory.")] = None,
    parallelism: Annotated[Optional[int], typer.Option("--parallelism", "-p", min=1, help="Number of projects to process at once.")] = None,
    root: Annotated[Optional[str], typer.Option("--root", help="Workspace root. Defaults to the git toplevel.")] = None,
    declared_deps: Annotated[bool, typer.Option("--declared-deps", help="Use yarn's declared workspace dependencies instead of npm list.")] = False,
):
    """Detect dirty workspace projects."""
    configure_logging(verbose=verbose)
    setup_tracing("affectiq")

    settings = load_config(config).merged(
        parallelism=parallelism,
        root=root,
        transitive=False if no_transitive else None,
        dependency_source="declared" if declared_deps else None,
    )
    changed_provider = select_changed_files_provider(tag, staged, current_commit, list_command, cwd=settings.root)

    try:
        output = run_detection(settings, changed_provider)
    except AffectIQError as e:
        logger.error(f"Detection aborted: {e}")
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(output))


if __name__ == "__main__":
    app()
