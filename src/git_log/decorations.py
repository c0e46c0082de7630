from typing import List, Optional

from src.git_log.models import CommitDecorations

HEAD_PREFIX = "HEAD -> "
TAG_PREFIX = "tag: "


def classify_decorations(raw: str) -> CommitDecorations:
    """Splits a `%D` decoration string into HEAD target, tags and branches.

    Tokens are comma separated. Each non-empty token lands in exactly one
    bucket, checked in order: ``HEAD -> <name>``, ``tag: <name>``, anything
    containing a slash (remote branch), everything else (local branch).
    """
    head: Optional[str] = None
    tags: List[str] = []
    local_branches: List[str] = []
    remote_branches: List[str] = []

    for token in (value.strip() for value in raw.split(",")):
        if not token:
            continue
        if token.startswith(HEAD_PREFIX):
            # A later HEAD token overwrites an earlier one
            head = token[len(HEAD_PREFIX):].strip()
        elif token.startswith(TAG_PREFIX):
            tags.append(token[len(TAG_PREFIX):].strip())
        elif "/" in token:
            # Heuristic: a local branch named like `feature/x` also ends up here
            remote_branches.append(token)
        else:
            local_branches.append(token)

    return CommitDecorations(
        head=head,
        tags=tuple(tags),
        local_branches=tuple(local_branches),
        remote_branches=tuple(remote_branches),
    )
