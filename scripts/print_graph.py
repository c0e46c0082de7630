import sys
from pathlib import Path

from src.api.commands import GIT_GRAPH_COMMAND, SlashCommandError, run_slash_command
from src.graph.worktree import Worktree

def main():
    """Usage: python -m scripts.print_graph [limit] -- run from the root of a git repo."""
    worktree = Worktree.from_path(Path("."))
    try:
        print(run_slash_command(GIT_GRAPH_COMMAND, sys.argv[1:2], worktree))
    except SlashCommandError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
