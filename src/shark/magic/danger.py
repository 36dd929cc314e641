"""Danger analysis: classify filesystem targets before destructive commands.

Both entry points are advisory. They only read metadata and list a single
directory level; they never modify, delete or block anything. A target
that cannot be inspected is reported as :attr:`DangerLevel.NONE`.
"""

from __future__ import annotations

import logging
import stat
import time
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import islice

from shark.core.models import DangerItem, DangerLevel, DangerReport
from shark.magic import fs
from shark.magic.fs import DirectoryLister

logger = logging.getLogger(__name__)

MAX_TARGETS = 8
LARGE_SIZE_BYTES = 10 * 1024 * 1024
RECENT_SECONDS = 24 * 3600

VCS_MARKER = ".git"

SECRET_FILES = frozenset({".env", "secret.key", "id_rsa", "private.pem"})

# Matched case-insensitively against the text from the last "." onwards.
CODE_EXTENSIONS = frozenset(
    ext.lower()
    for ext in (
        ".c", ".h", ".cpp", ".hpp", ".cc", ".cxx", ".hxx", ".hh",
        ".py", ".pyw", ".ipynb", ".pyc", ".pyo", ".pyd",
        ".java", ".class", ".jar", ".jad", ".jmod",
        ".cs", ".vb", ".fs",
        ".go", ".mod", ".sum",
        ".rs", ".rlib", ".toml",
        ".js", ".jsx", ".mjs", ".cjs",
        ".ts", ".tsx",
        ".php", ".phtml", ".php3", ".php4", ".php5", ".phps",
        ".rb", ".erb", ".rake", ".gemspec",
        ".pl", ".pm", ".pod", ".t",
        ".swift",
        ".kt", ".kts",
        ".scala", ".sc",
        ".sh", ".bash", ".zsh", ".csh", ".tcsh", ".ksh",
        ".bat", ".cmd", ".ps1", ".psm1",
        ".lua",
        ".sql", ".sqlite", ".db",
        ".html", ".htm", ".xhtml",
        ".css", ".scss", ".less",
        ".xml", ".xsd", ".xslt",
        ".json", ".yaml", ".yml",
        ".dart",
        ".groovy", ".gradle",
        ".r", ".rmd",
        ".m", ".mm",
        ".asm", ".s",
        ".v", ".vh", ".sv", ".vhd", ".vhdl",
        ".coffee",
        ".clj", ".cljs", ".cljc", ".edn",
        ".hs", ".lhs", ".ghc",
        ".ml", ".mli", ".ocaml",
        ".ada", ".adb", ".ads",
        ".for", ".f90", ".f95", ".f03", ".f08", ".f", ".f77",
        ".pro", ".tcl",
        ".tex", ".sty", ".cls",
        ".nim",
        ".cr",
        ".ex", ".exs",
        ".elm",
        ".erl", ".hrl",
        ".lisp", ".el", ".scm", ".cl", ".lsp",
        ".pas", ".pp", ".p",
        ".d",
        ".vala",
        ".vbs",
        ".awk",
        ".ps",
        ".raku", ".pl6", ".pm6",
        ".sol",
        ".cmake",
        ".build", ".options",
        ".dockerfile",
        ".ini", ".conf", ".cfg",
        ".sln", ".vcxproj", ".csproj",
        ".xcodeproj", ".xcworkspace",
        ".bazel", ".bzl",
        ".ninja",
        ".gitignore", ".gitattributes", ".editorconfig", ".env",
    )
)

CODE_FILENAMES = frozenset({
    "Makefile", "CMakeLists.txt", "Dockerfile", "BUILD", "WORKSPACE",
    "SConstruct", "Rakefile", "Gemfile", "meson.build",
})

SUSPICIOUS_EXTENSIONS = frozenset({
    ".exe", ".dll", ".bin", ".sh", ".bat", ".cmd",
    ".scr", ".pif", ".com", ".js", ".vbs", ".elf",
})


def _extension(name: str) -> str:
    dot = name.rfind(".")
    return name[dot:].lower() if dot >= 0 else ""


def _basename(path: str) -> str:
    return path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


def is_code_file(path: str) -> bool:
    """Recognised source/build extension, or a well-known build file name."""
    name = _basename(path)
    return _extension(name) in CODE_EXTENSIONS or name in CODE_FILENAMES


def assign_level(contains_code: bool, contains_secrets: bool, large_size: bool) -> DangerLevel:
    """Secrets dominate code, code dominates size."""
    level = DangerLevel.NONE
    if contains_code:
        level = DangerLevel.HIGH
    if contains_secrets:
        level = DangerLevel.CRITICAL
    if large_size and level < DangerLevel.MEDIUM:
        level = DangerLevel.MEDIUM
    return level


@dataclass
class _DirectorySignals:
    vcs: bool = False
    secrets: bool = False
    suspicious: bool = False
    size: int = 0


def _scan_directory(path: str, lister: DirectoryLister) -> _DirectorySignals:
    """Single pass over the immediate entries of ``path``."""
    signals = _DirectorySignals()
    try:
        for entry in lister.entries(path):
            if entry.name == VCS_MARKER:
                signals.vcs = True
            if entry.name in SECRET_FILES and not entry.is_dir:
                signals.secrets = True
            if _extension(entry.name) in SUSPICIOUS_EXTENSIONS:
                signals.suspicious = True
            signals.size += entry.size
    except (OSError, ValueError):
        logger.debug("Could not list %s", path, exc_info=True)
    return signals


def danger_analyze(path: str | None, lister: DirectoryLister | None = None) -> DangerItem:
    """Classify one target on the NONE..CRITICAL scale.

    For files ``contains_code`` checks the extension; for directories it
    checks for an immediate ``.git`` entry and ``contains_secrets`` checks
    for well-known secret file names. Directory size is the sum of the
    immediate children, not a recursive total.
    """
    if path is None:
        return DangerItem(target_path="")

    st = fs.stat_target(path)
    if st is None:
        return DangerItem(target_path=path)

    is_directory = stat.S_ISDIR(st.st_mode)
    writable = fs.owner_writable(path, st)

    if is_directory:
        signals = _scan_directory(path, lister or fs.default_lister())
        contains_code = contains_vcs = signals.vcs
        contains_secrets = signals.secrets
        size = signals.size
        suspicious_extension = False
        contains_suspicious_files = signals.suspicious
    else:
        contains_code = is_code_file(path)
        contains_vcs = False
        contains_secrets = False
        size = st.st_size if stat.S_ISREG(st.st_mode) else 0
        suspicious_extension = _extension(_basename(path)) in SUSPICIOUS_EXTENSIONS
        contains_suspicious_files = False

    large_size = size > LARGE_SIZE_BYTES
    age = time.time() - st.st_mtime

    item = DangerItem(
        target_path=path,
        level=assign_level(contains_code, contains_secrets, large_size),
        is_directory=is_directory,
        contains_code=contains_code,
        contains_vcs=contains_vcs,
        contains_secrets=contains_secrets,
        large_size=large_size,
        writable=writable,
        is_symlink=fs.is_symlink(path),
        world_writable=fs.world_writable(st),
        suspicious_extension=suspicious_extension,
        recently_modified=0 < age < RECENT_SECONDS,
        contains_suspicious_files=contains_suspicious_files,
    )
    logger.debug("Danger analysis %s -> %s", path, item.level.name)
    return item


def danger_report(
    paths: Iterable[str | None],
    lister: DirectoryLister | None = None,
) -> DangerReport:
    """Analyse up to eight targets and derive the overall advisory.

    Targets beyond the eighth are ignored.
    """
    items = tuple(danger_analyze(p, lister) for p in islice(paths, MAX_TARGETS))
    overall = max((item.level for item in items), default=DangerLevel.NONE)
    return DangerReport(
        items=items,
        overall_level=overall,
        block_recommended=overall == DangerLevel.CRITICAL,
        warning_required=overall >= DangerLevel.MEDIUM,
    )
