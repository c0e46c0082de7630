from typing import List, Optional
from pydantic import BaseModel


class DecorationsResponse(BaseModel):
    head: Optional[str] = None
    tags: List[str]
    local_branches: List[str]
    remote_branches: List[str]


class CommitResponse(BaseModel):
    oid: str
    short_oid: str
    parents: List[str]
    author: str
    author_email: str
    relative_time: str
    committed_at: str
    committed_timestamp: int
    summary: str
    decorations: DecorationsResponse


class GraphEdge(BaseModel):
    child: str
    parent: str


class GraphResponse(BaseModel):
    commits: List[CommitResponse]
    edges: List[GraphEdge]
    truncated: bool


class CommandRequest(BaseModel):
    args: List[str] = []
