from pathlib import Path
from typing import Optional, Sequence

from src.api.commands import run_slash_command, to_response
from src.api.schemas import GraphResponse
from src.graph.collector import GraphCollector
from src.graph.worktree import Worktree


class GitGraphService:
    def __init__(self, worktree_root: Path = Path(".")):
        self.worktree = Worktree.from_path(worktree_root)

    def get_graph(self, limit: Optional[int] = None) -> GraphResponse:
        """Collects a fresh graph; nothing is cached between calls."""
        collector = GraphCollector.from_worktree(self.worktree)
        return to_response(collector.collect_graph(limit))

    def run_command(self, name: str, args: Sequence[str]) -> str:
        return run_slash_command(name, args, self.worktree)
