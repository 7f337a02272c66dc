from pathlib import Path
from typing import Optional


class LinkError(Exception):
    """A single file could not be published to the target tree"""

    def __init__(self, source: Path, target: Path, cause: Optional[OSError] = None) -> None:
        self.source = source
        self.target = target
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        reason = ""
        if self.cause is not None:
            reason = f" ({self.cause.strerror or self.cause})"
        return f"{self.source} -> {self.target}{reason}"


class DirectoryCreationError(LinkError):
    """Parent directory of the link could not be created"""


class LinkCreationError(LinkError):
    """The symlink itself could not be created or replaced"""


class TraversalError(Exception):
    """The source tree could not be enumerated"""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause.strerror or cause}")
