class GitGraphError(Exception):
    """Base class for every failure while producing a commit graph.

    ``str(err)`` is the message shown to the user at the command boundary.
    """


class GitBinaryMissingError(GitGraphError):
    def __init__(self):
        super().__init__("git executable was not found on PATH")


class GitSpawnError(GitGraphError):
    """The git process could not be started."""

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(f"failed to run git: {error}")


class GitCommandError(GitGraphError):
    """git started but exited with a non-zero status."""

    def __init__(self, stderr: str):
        self.stderr = stderr
        super().__init__(f"git log exited with an error: {stderr}")


class GitOutputEncodingError(GitGraphError):
    def __init__(self, error: UnicodeDecodeError):
        self.error = error
        super().__init__(f"git output was not valid UTF-8: {error}")


class GitLogParseError(GitGraphError):
    """A record (or a command argument) could not be parsed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"failed to parse git output: {reason}")
