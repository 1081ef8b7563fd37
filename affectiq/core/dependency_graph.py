# ========================================
# 📁 affectiq/core/dependency_graph.py
# ========================================
import asyncio
import logging
import os
from typing import Dict, Set

from ..interfaces.types.workspace import Workspace
from ..providers.base import DependencyProvider
from .exceptions import AffectIQError, CollaboratorFailure

logger = logging.getLogger(__name__)


async def build_dependency_graph(
    workspace: Workspace,
    provider: DependencyProvider,
    root: str,
    parallelism: int = 5,
) -> Dict[str, Set[str]]:
    """
    Looks up every project's direct dependencies, at most `parallelism` at a time.

    The first failed lookup cancels the ones still running and is raised as
    CollaboratorFailure. A partial graph is never returned.
    """
    if parallelism < 1:
        raise ValueError("parallelism must be >= 1")

    limiter = asyncio.Semaphore(parallelism)
    graph: Dict[str, Set[str]] = {}

    async def lookup(project: str) -> None:
        path = os.path.join(root, workspace[project]["location"])
        async with limiter:
            logger.debug(f"processing {project}...")
            try:
                graph[project] = set(await provider.dependencies(path))
            except CollaboratorFailure as e:
                if e.project is None:
                    e.project = project
                logger.error(f"Failed processing {path}: {e.message}")
                raise
            except AffectIQError:
                raise
            except Exception as e:
                logger.error(f"Failed processing {path}: {e}", exc_info=True)
                raise CollaboratorFailure(str(e), collaborator="dependencies", project=project) from e

    tasks = [asyncio.create_task(lookup(name), name=f"deps:{name}") for name in workspace]
    if not tasks:
        return graph

    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    failed = [t for t in done if not t.cancelled() and t.exception() is not None]
    if failed:
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        raise failed[0].exception()

    logger.info(f"Resolved dependencies for {len(graph)} project(s).")
    return graph
