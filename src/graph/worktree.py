import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple


@dataclass
class Worktree:
    """The repository a graph is collected for, plus the shell environment to run git in."""

    root_path: Path
    env: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_path(cls, path: Path) -> "Worktree":
        return cls(root_path=Path(path).resolve(), env=dict(os.environ))

    def which(self, name: str) -> Optional[str]:
        """Looks up an executable on this worktree's PATH."""
        return shutil.which(name, path=self.env.get("PATH"))

    def shell_env(self) -> List[Tuple[str, str]]:
        return list(self.env.items())
