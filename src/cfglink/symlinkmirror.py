import errno
import os
from enum import Enum
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from cfglink import report
from cfglink.config import Config
from cfglink.errors import DirectoryCreationError, LinkCreationError, LinkError, TraversalError


class LinkStatus(str, Enum):
    """Outcome of publishing a single file"""

    LINKED = "linked"
    WOULD_LINK = "would link"
    FAILED = "failed"


@dataclass(frozen=True)
class FileEntry:
    """Regular file found under the source root"""

    path: Path
    relative_path: Path


@dataclass
class LinkResult:
    entry: FileEntry
    target: Path
    status: LinkStatus
    error: Optional[LinkError] = None
    created_directories: Tuple[Path, ...] = ()


@dataclass
class RunSummary:
    """Counts for one invocation. Would-be links in a dry run count as linked."""

    dry_run: bool
    linked: int = 0
    failed: int = 0

    @property
    def processed(self) -> int:
        return self.linked + self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def add(self, result: LinkResult) -> None:
        if result.status == LinkStatus.FAILED:
            self.failed += 1
        else:
            self.linked += 1


def walk_sources(source_root: Path, exclude: Iterable[str]) -> Iterator[FileEntry]:
    """
    Yields every regular file under `source_root`. Anything whose name is in `exclude` is skipped, and excluded
    directories are never descended into. Symlinks are neither followed nor yielded.

    Parameters
    ----------
    source_root : Path
        The root directory to walk
    exclude : Iterable[str]
        Base names to prune, matched at any depth

    Raises
    ------
    TraversalError
        If any directory in the tree, the root included, cannot be listed
    """

    _exclude = frozenset(exclude)

    def _abort(err: OSError) -> None:
        raise TraversalError(Path(err.filename or source_root), err)

    for r, d, f in os.walk(source_root, onerror=_abort):
        # pruning in place stops os.walk from entering the directory at all
        d[:] = [dd for dd in d if dd not in _exclude]

        for ff in f:
            if ff in _exclude:
                continue

            file = Path(r).joinpath(ff)
            if file.is_symlink() or not file.is_file():
                continue

            yield FileEntry(path=file, relative_path=file.relative_to(source_root))


def _replace_symlink(source: Path, link: Path) -> None:
    """Points `link` at `source`, replacing any file or symlink already there without following it"""

    if link.is_dir() and not link.is_symlink():
        raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(link))

    # a target that is the source itself is never replaced
    if link.exists() and not link.is_symlink() and os.path.samefile(link, source):
        raise FileExistsError(errno.EEXIST, "source and target are the same file", str(link))

    tmp = link.with_name(f".{link.name}.cfglink~")
    if tmp.is_symlink() or tmp.exists():
        tmp.unlink()

    tmp.symlink_to(source)
    try:
        os.replace(tmp, link)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def _missing_parents(path: Path) -> Tuple[Path, ...]:
    """Ancestors of `path` that do not exist yet, outermost first"""

    missing = []
    parent = path.parent
    while not parent.is_dir() and parent != parent.parent:
        missing.append(parent)
        parent = parent.parent
    return tuple(reversed(missing))


def link_file(entry: FileEntry, target_root: Path, dry_run: bool = False) -> LinkResult:
    """
    Publishes one file as a symlink at the same relative location under `target_root`. Filesystem errors are
    returned as a FAILED result and never raised.
    """

    target = target_root.joinpath(entry.relative_path)

    if dry_run:
        return LinkResult(entry=entry, target=target, status=LinkStatus.WOULD_LINK)

    created = _missing_parents(target)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return LinkResult(
            entry=entry,
            target=target,
            status=LinkStatus.FAILED,
            error=DirectoryCreationError(entry.path, target, e),
        )

    try:
        _replace_symlink(entry.path, target)
    except OSError as e:
        return LinkResult(
            entry=entry,
            target=target,
            status=LinkStatus.FAILED,
            error=LinkCreationError(entry.path, target, e),
            created_directories=created,
        )

    return LinkResult(entry=entry, target=target, status=LinkStatus.LINKED, created_directories=created)


def _report(result: LinkResult, verbose: bool) -> None:
    for directory in result.created_directories:
        report.info(f"Created directory: {directory}", verbose)

    if result.status == LinkStatus.WOULD_LINK:
        report.info(f"Would link: {result.target} -> {result.entry.path}", verbose)
    elif result.status == LinkStatus.LINKED:
        report.success(f"Linked: {result.target} -> {result.entry.path}")
    elif isinstance(result.error, DirectoryCreationError):
        report.error(f"Failed to create directory for: {result.error}")
    else:
        report.error(f"Failed to link: {result.error}")


def link_mirror(config: Config) -> RunSummary:
    """
    Creates a mirror of the source directory filled with symbolic links to the files. This function does not remove
    any links that exist in the target if their source has since been deleted.

    Parameters
    ----------
    config : Config
        Source and target roots, exclusions and the dry run/verbose switches

    Returns
    -------
    RunSummary
        Linked and failed counts. A failed entry never stops the remaining ones.
    """

    src = config.source_root.resolve()
    dst = config.target_root.resolve()

    report.info(f"Linking configs from {src} to {dst}", config.verbose)

    summary = RunSummary(dry_run=config.dry_run)
    for entry in walk_sources(src, config.exclude):
        result = link_file(entry, dst, dry_run=config.dry_run)
        _report(result, config.verbose)
        summary.add(result)

    report.summary(
        processed=summary.processed,
        linked=summary.linked,
        failed=summary.failed,
        dry_run=summary.dry_run,
    )
    return summary
