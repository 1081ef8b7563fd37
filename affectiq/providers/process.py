# ====================================
# 📁 affectiq/providers/process.py
# ====================================
import asyncio
import logging
import os
import shlex
import subprocess
from typing import List, Optional, Sequence, Tuple, Union

from ..core.exceptions import CollaboratorFailure

logger = logging.getLogger(__name__)

Command = Union[str, Sequence[str]]


def _argv(command: Command) -> List[str]:
    return shlex.split(command) if isinstance(command, str) else list(command)


def run(command: Command, cwd: Optional[str] = None, collaborator: str = "command", check: bool = True) -> str:
    """Runs a command and returns its stripped stdout."""
    argv = _argv(command)
    if not argv:
        raise CollaboratorFailure("Empty command.", collaborator=collaborator)

    logger.debug(f"Running {' '.join(argv)} (cwd={cwd or os.getcwd()})")
    try:
        result = subprocess.run(argv, capture_output=True, text=True, check=check, cwd=cwd, env=os.environ.copy())
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        logger.error(f"Command '{' '.join(argv)}' exited with {e.returncode}: {stderr}")
        raise CollaboratorFailure(
            f"'{' '.join(argv)}' exited with code {e.returncode}: {stderr or 'no output'}",
            collaborator=collaborator,
        ) from e
    except (FileNotFoundError, NotADirectoryError) as e:
        raise CollaboratorFailure(f"Command not found: {argv[0]} (cwd={cwd or os.getcwd()})", collaborator=collaborator) from e
    return result.stdout.strip()


def split_lines(output: str) -> List[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


async def run_async(command: Command, cwd: Optional[str] = None, collaborator: str = "command") -> Tuple[int, str, str]:
    """Runs a command without blocking the event loop. Returns (exit_code, stdout, stderr)."""
    argv = _argv(command)
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=os.environ.copy(),
        )
    except FileNotFoundError as e:
        raise CollaboratorFailure(f"Command not found or bad directory: {argv[0]} (cwd={cwd})", collaborator=collaborator) from e
    try:
        stdout, stderr = await proc.communicate()
    except asyncio.CancelledError:
        if proc.returncode is None:
            proc.kill()
            await proc.wait()
        raise
    return proc.returncode, stdout.decode("utf-8", errors="replace"), stderr.decode("utf-8", errors="replace")
