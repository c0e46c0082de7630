import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from src.git_log.errors import (
    GitBinaryMissingError,
    GitCommandError,
    GitOutputEncodingError,
    GitSpawnError,
)
from src.git_log.models import GitGraph
from src.git_log.parser import LOG_FORMAT
from src.graph.assembler import fetch_limit_for, graph_from_log
from src.graph.worktree import Worktree

logger = logging.getLogger(__name__)


def git_log_args(max_count: int) -> List[str]:
    return [
        "--no-pager",
        "log",
        "--all",
        "--date-order",
        "--decorate=full",
        "--color=never",
        f"--max-count={max_count}",
        f"--pretty=format:{LOG_FORMAT}",
    ]


def run_git_log(
    git_executable: Path,
    worktree_root: Path,
    env: Sequence[Tuple[str, str]],
    max_count: int,
) -> str:
    """Runs `git log` in the worktree and returns its decoded stdout.

    `env` is layered over the current process environment.
    No timeout is applied; callers needing one must impose it themselves.
    """
    cmd = [str(git_executable), *git_log_args(max_count)]
    logger.debug(f"Running {' '.join(cmd[:7])} in {worktree_root}")
    try:
        proc = subprocess.run(
            cmd,
            cwd=worktree_root,
            env={**os.environ, **dict(env)},
            capture_output=True,
        )
    except OSError as e:
        logger.warning(f"Failed to start git at {git_executable}: {e}")
        raise GitSpawnError(e) from e

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        logger.warning(f"git log exited with status {proc.returncode}: {stderr}")
        raise GitCommandError(stderr)

    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise GitOutputEncodingError(e) from e


class GraphCollector:
    """Captures the git history of a worktree as a GitGraph."""

    def __init__(self, git_executable: Path, worktree_root: Path, env: Sequence[Tuple[str, str]] = ()):
        self.git_executable = git_executable
        self.worktree_root = worktree_root
        self.env = env

    @classmethod
    def from_worktree(cls, worktree: Worktree) -> "GraphCollector":
        git_path = worktree.which("git")
        if not git_path:
            raise GitBinaryMissingError()
        return cls(
            git_executable=Path(git_path),
            worktree_root=Path(worktree.root_path),
            env=worktree.shell_env(),
        )

    def collect_graph(self, limit: Optional[int] = None) -> GitGraph:
        output = run_git_log(
            self.git_executable, self.worktree_root, self.env, fetch_limit_for(limit)
        )
        graph = graph_from_log(output, limit)
        logger.info(
            f"Collected {len(graph.commits)} commits from {self.worktree_root} "
            f"(truncated={graph.truncated})"
        )
        return graph
