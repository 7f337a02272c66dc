import os
from typing import Iterable, FrozenSet, Mapping, Optional
from dataclasses import dataclass
from pathlib import Path

DEFAULT_EXCLUDE = (
    ".git",
    ".gitignore",
    "README.md",
    "LICENSE",
    "link.sh",
)

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def _resolve_path(path: str) -> Path:
    return Path(os.path.expanduser(path)).resolve()


def _user_config_dir() -> Path:
    return Path.home().joinpath(".config")


def _target_dir() -> Path:
    return _user_config_dir().joinpath("zellij")


def parse_bool(name: str, value: str) -> bool:
    """Parse a boolean configuration variable, raising ValueError on garbage"""
    _value = value.strip().lower()
    if _value in _TRUE:
        return True
    if _value in _FALSE:
        return False
    raise ValueError(f"{name} must be true or false, got {value!r}")


@dataclass
class Config:
    """cfglink runtime config object"""

    __slots__ = (
        "source_root",
        "target_root",
        "exclude",
        "dry_run",
        "verbose",
    )

    source_root: Path
    target_root: Path
    exclude: FrozenSet[str]
    dry_run: bool
    verbose: bool

    def _overrides(self, conf: Mapping[str, str]) -> None:
        """apply overrides from conf, usually the process environment"""

        _dry_run = conf.get("DRY_RUN")
        if _dry_run and _dry_run.strip():
            setattr(self, "dry_run", parse_bool("DRY_RUN", _dry_run))

        _verbose = conf.get("VERBOSE")
        if _verbose and _verbose.strip():
            setattr(self, "verbose", parse_bool("VERBOSE", _verbose))

        _source_root = conf.get("CFGLINK_SOURCE")
        if _source_root:
            setattr(self, "source_root", _resolve_path(_source_root))

        _target_root = conf.get("CFGLINK_TARGET")
        if _target_root:
            setattr(self, "target_root", _resolve_path(_target_root))

    def __init__(self, load: bool = True, environ: Optional[Mapping[str, str]] = None) -> None:
        self.source_root = Path.cwd().resolve()
        self.target_root = _target_dir()
        self.exclude = frozenset(DEFAULT_EXCLUDE)
        self.dry_run = False
        self.verbose = True

        if load:
            self._overrides(conf=os.environ if environ is None else environ)

    def with_flags(
        self,
        dry_run: bool = False,
        quiet: bool = False,
        source: Optional[str] = None,
        target: Optional[str] = None,
        exclude: Iterable[str] = (),
    ) -> "Config":
        """
        Returns a copy with command line flags applied on top. Flags can only switch dry run on and verbosity off,
        they never undo the environment in the other direction.
        """

        conf = Config(load=False)
        conf.source_root = _resolve_path(source) if source else self.source_root
        conf.target_root = _resolve_path(target) if target else self.target_root
        conf.exclude = self.exclude.union(exclude)
        conf.dry_run = self.dry_run or dry_run
        conf.verbose = self.verbose and not quiet
        return conf

    def __repr__(self) -> str:
        attributes = [k for k in self.__slots__]
        width = max([len(i) for i in attributes])
        s = "Config: environment + flags\n"
        s += "-" * len(s) + "\n"
        for k in attributes:
            v = self.__getattribute__(k)
            space = " " * (width - len(str(k)) + 2)
            if isinstance(v, frozenset):
                extra_space = " " * (width + 2) + "    "
                end_space = len(f"  {k}{space}")
                s += f"  {k}{space}[\n"
                s += ",\n".join([extra_space + str(i) for i in sorted(v)])
                s += "\n" + (end_space * " ") + "]\n"
            else:
                s += f"  {k}{space}{str(v)}\n"
        return s
