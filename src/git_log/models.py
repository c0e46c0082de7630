from dataclasses import dataclass, field
from typing import Optional, Tuple

SHORT_OID_LENGTH = 8


def abbreviate_oid(oid: str) -> str:
    """First 8 characters of the hash, or the whole hash if shorter."""
    return oid[:SHORT_OID_LENGTH]


@dataclass(frozen=True)
class CommitDecorations:
    head: Optional[str] = None
    tags: Tuple[str, ...] = ()
    local_branches: Tuple[str, ...] = ()
    remote_branches: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CommitNode:
    oid: str
    parents: Tuple[str, ...] = ()
    author: str = ""
    author_email: str = ""
    relative_time: str = ""
    committed_at: str = ""
    committed_timestamp: int = 0
    summary: str = ""
    decorations: CommitDecorations = field(default_factory=CommitDecorations)
    short_oid: str = field(init=False)

    def __post_init__(self):
        # Always derived from the full hash
        object.__setattr__(self, "short_oid", abbreviate_oid(self.oid))
        object.__setattr__(self, "parents", tuple(self.parents))


@dataclass(frozen=True)
class GraphEdge:
    child: str
    parent: str


@dataclass(frozen=True)
class GitGraph:
    commits: Tuple[CommitNode, ...]
    edges: Tuple[GraphEdge, ...]
    truncated: bool = False
