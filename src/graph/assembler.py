from typing import Iterable, List, Optional, Sequence

from src.git_log.models import CommitNode, GitGraph, GraphEdge
from src.git_log.parser import parse_git_log

DEFAULT_LIMIT = 400
MAX_LIMIT = 2000


def clamp_limit(limit: Optional[int] = None) -> int:
    """Resolves a requested commit limit into the range [1, MAX_LIMIT]."""
    if limit is None:
        return DEFAULT_LIMIT
    return max(1, min(limit, MAX_LIMIT))


def fetch_limit_for(limit: Optional[int] = None) -> int:
    """Number of log entries to request: one more than kept, to detect truncation."""
    return clamp_limit(limit) + 1


def build_edges(commits: Iterable[CommitNode]) -> List[GraphEdge]:
    """One child -> parent edge per parent of every commit.

    Parents outside the fetched window still get an edge.
    """
    return [
        GraphEdge(child=commit.oid, parent=parent)
        for commit in commits
        for parent in commit.parents
    ]


def assemble_graph(commits: Sequence[CommitNode], limit: Optional[int] = None) -> GitGraph:
    """Builds the graph from commits fetched with `fetch_limit_for(limit)`."""
    limit = clamp_limit(limit)
    truncated = len(commits) >= limit + 1
    kept = tuple(commits[:limit])
    return GitGraph(commits=kept, edges=tuple(build_edges(kept)), truncated=truncated)


def graph_from_log(raw_output: str, limit: Optional[int] = None) -> GitGraph:
    return assemble_graph(parse_git_log(raw_output), limit)
