"""Coarse file-type classification used to group owned files."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, TypeVar


class FileType(Enum):
    SOURCE = "source"
    CONFIG = "config"
    DOCS = "docs"
    TEST = "test"
    OTHER = "other"


SOURCE_EXTENSIONS = frozenset(
    {
        # Web
        "js", "jsx", "ts", "tsx", "mjs", "cjs", "vue", "svelte",
        "html", "css", "scss", "sass", "less", "styl",
        # Python
        "py", "pyx", "pyi",
        # JVM
        "java", "kt", "kts", "scala", "sc", "groovy",
        # C family
        "c", "cpp", "cc", "cxx", "h", "hpp", "hxx", "cs", "m", "mm",
        # Systems and others
        "go", "rs", "rb", "rake", "php", "phtml", "swift", "dart", "r",
        "sh", "bash", "zsh", "fish", "ps1", "psm1", "lua", "pl", "pm",
        "ex", "exs", "clj", "cljs", "cljc", "erl", "hrl", "hs", "lhs",
        "ml", "mli", "fs", "fsi", "fsx", "wasm", "wat",
    }
)

CONFIG_PATTERNS = (
    "json", "yaml", "yml", "toml", "ini", "conf", "config", "properties", "lock",
    "requirements.txt", "Pipfile", "setup.py", "setup.cfg", "Gemfile",
    "pom.xml", "build.gradle", "build.gradle.kts", "Podfile",
    ".github", ".vscode", ".idea", ".circleci",
    "Dockerfile", ".dockerignore", "Jenkinsfile", ".env",
)
_CONFIG_PATTERNS_LOWER = tuple(p.lower() for p in CONFIG_PATTERNS)

DOCS_EXTENSIONS = frozenset({"md", "mdx", "txt", "rst", "adoc", "org", "wiki"})

TEST_MARKERS = (".test.", ".spec.", "__tests__", "__test__", "test_", "spec_")

_EXTENSIONLESS_CONFIG = frozenset({"makefile", "rakefile", "gemfile", "rakefile.rb"})


def classify_file_type(file_path: str) -> FileType:
    """Classify by test markers, then config names, then extension."""
    lower = file_path.lower()

    if any(marker in lower for marker in TEST_MARKERS):
        return FileType.TEST

    for pattern in _CONFIG_PATTERNS_LOWER:
        if lower.endswith(pattern) or f"/{pattern}/" in lower:
            return FileType.CONFIG

    _, dot, extension = lower.rpartition(".")
    if dot:
        if extension in DOCS_EXTENSIONS:
            return FileType.DOCS
        if extension in SOURCE_EXTENSIONS:
            return FileType.SOURCE

    if lower.rsplit("/", 1)[-1] in _EXTENSIONLESS_CONFIG:
        return FileType.CONFIG

    return FileType.OTHER


T = TypeVar("T")


def group_files_by_type(files: Iterable[T]) -> dict[FileType, list[T]]:
    """Bucket objects with a ``file`` attribute by FileType, preserving order."""
    grouped: dict[FileType, list[T]] = {file_type: [] for file_type in FileType}
    for item in files:
        grouped[classify_file_type(item.file)].append(item)  # type: ignore[attr-defined]
    return grouped
