import logging
from typing import Optional, Sequence

from src.api.schemas import CommitResponse, DecorationsResponse, GraphEdge, GraphResponse
from src.git_log.errors import GitGraphError, GitLogParseError
from src.git_log.models import CommitNode, GitGraph
from src.git_log.parser import parse_int64
from src.graph.assembler import DEFAULT_LIMIT, clamp_limit
from src.graph.collector import GraphCollector
from src.graph.worktree import Worktree

logger = logging.getLogger(__name__)

GIT_GRAPH_COMMAND = "git-graph"


class SlashCommandError(Exception):
    """A command failure, already rendered as the message shown to the user."""


def parse_limit_args(args: Sequence[str]) -> int:
    """Reads the optional limit argument; absent means DEFAULT_LIMIT."""
    if not args:
        return DEFAULT_LIMIT
    try:
        limit = parse_int64(args[0])
    except ValueError as e:
        raise GitLogParseError(f"invalid limit: {e}") from e
    return clamp_limit(limit)


def to_response(graph: GitGraph) -> GraphResponse:
    return GraphResponse(
        commits=[_commit_response(commit) for commit in graph.commits],
        edges=[GraphEdge(child=edge.child, parent=edge.parent) for edge in graph.edges],
        truncated=graph.truncated,
    )


def _commit_response(commit: CommitNode) -> CommitResponse:
    decorations = commit.decorations
    return CommitResponse(
        oid=commit.oid,
        short_oid=commit.short_oid,
        parents=list(commit.parents),
        author=commit.author,
        author_email=commit.author_email,
        relative_time=commit.relative_time,
        committed_at=commit.committed_at,
        committed_timestamp=commit.committed_timestamp,
        summary=commit.summary,
        decorations=DecorationsResponse(
            head=decorations.head,
            tags=list(decorations.tags),
            local_branches=list(decorations.local_branches),
            remote_branches=list(decorations.remote_branches),
        ),
    )


def render_graph(graph: GitGraph) -> str:
    """Pretty-printed JSON document for a graph."""
    return to_response(graph).model_dump_json(indent=2)


def run_slash_command(name: str, args: Sequence[str], worktree: Optional[Worktree]) -> str:
    """Runs the `git-graph` command and returns the rendered graph.

    Every failure is raised as a SlashCommandError carrying a display string.
    """
    if name != GIT_GRAPH_COMMAND:
        raise SlashCommandError(f"unknown slash command `{name}`")
    if worktree is None:
        raise SlashCommandError("git graph slash command requires an attached workspace/root")

    try:
        limit = parse_limit_args(args)
        collector = GraphCollector.from_worktree(worktree)
        graph = collector.collect_graph(limit)
    except GitGraphError as e:
        logger.error(f"{name} failed in {worktree.root_path}: {e}")
        raise SlashCommandError(str(e)) from e

    return render_graph(graph)
