from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from typing import Optional
from pathlib import Path
import os

from src.api.commands import SlashCommandError
from src.api.service import GitGraphService
from src.api.schemas import CommandRequest, GraphResponse
from src.git_log.errors import GitBinaryMissingError, GitGraphError, GitLogParseError

import logging

# Configure Logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Git Graph API")

# Allow CORS
# In production, set ALLOWED_ORIGINS to a comma-separated list of domains
allowed_origins_env = os.getenv("ALLOWED_ORIGINS", "*")
allowed_origins = [origin.strip() for origin in allowed_origins_env.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize Service
# By default use the CWD as the worktree. Can be overridden by env var GIT_GRAPH_WORKTREE.
worktree_path = os.getenv("GIT_GRAPH_WORKTREE", ".")
service = GitGraphService(Path(worktree_path))


def _status_for(error: GitGraphError) -> int:
    if isinstance(error, GitBinaryMissingError):
        return 503
    if isinstance(error, GitLogParseError):
        return 500
    return 502


@app.get("/api/graph", response_model=GraphResponse)
def get_graph(limit: Optional[int] = Query(None)):
    """Get the commit graph (commits, edges, truncation flag)."""
    try:
        return service.get_graph(limit)
    except GitGraphError as e:
        logger.error(f"Failed to collect graph for {service.worktree.root_path}: {e}")
        raise HTTPException(status_code=_status_for(e), detail=str(e))


@app.post("/api/commands/{name}", response_class=PlainTextResponse)
def run_command(name: str, req: Optional[CommandRequest] = None):
    """Run a named command; `git-graph` returns the graph as pretty-printed JSON."""
    args = req.args if req else []
    try:
        return service.run_command(name, args)
    except SlashCommandError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/health")
def health_check():
    return {"status": "ok", "worktree": str(service.worktree.root_path)}
