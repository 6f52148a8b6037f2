"""Directory and author ownership derived from per-file ownership.

The same functions serve the ownership parser and the pattern filter, which
recomputes everything from the files that survive filtering.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from ..math import percent_share
from ..models import AuthorOwnership, DirectoryOwnership, FileOwnership, OwnedFile

ROOT_DIRECTORY = "./"


def get_directory(file_path: str) -> str:
    """Parent directory with a trailing slash; ``./`` for top-level files."""
    index = file_path.rfind("/")
    if index == -1:
        return ROOT_DIRECTORY
    return file_path[: index + 1]


def pick_owner(counts: Mapping[str, int]) -> tuple[str, int]:
    """Author with the strictly greatest count, skipping blank names.

    Ties keep the author that appears first in ``counts``. Returns
    ``("", 0)`` when there is no named author.
    """
    owner = ""
    best = None
    for author, count in counts.items():
        if not author or not author.strip():
            continue
        if best is None or count > best:
            owner, best = author, count
    return owner, best or 0


def build_directory_ownership(
    files: Mapping[str, FileOwnership],
) -> dict[str, DirectoryOwnership]:
    """Roll up direct files of each directory by primary-owner file count."""
    by_directory: dict[str, list[FileOwnership]] = {}
    for path, ownership in files.items():
        by_directory.setdefault(get_directory(path), []).append(ownership)

    result: dict[str, DirectoryOwnership] = {}
    for directory, members in by_directory.items():
        owner_counts: dict[str, int] = {}
        for ownership in members:
            owner_counts[ownership.owner] = owner_counts.get(ownership.owner, 0) + 1

        owner, owner_files = pick_owner(owner_counts)
        if not owner:
            continue

        total_files = len(members)
        result[directory] = DirectoryOwnership(
            directory=directory,
            owner=owner,
            share=percent_share(owner_files, total_files),
            owner_files=owner_files,
            total_files=total_files,
            total_lines=sum(m.total_lines for m in members),
        )
    return result


def build_author_ownership(files: Iterable[FileOwnership]) -> dict[str, AuthorOwnership]:
    """Invert file ownership: each primary owner with the files they own."""
    result: dict[str, AuthorOwnership] = {}
    for ownership in files:
        entry = result.get(ownership.owner)
        if entry is None:
            entry = result[ownership.owner] = AuthorOwnership(author=ownership.owner)
        entry.files.append(
            OwnedFile(file=ownership.file, lines=ownership.owner_lines, share=ownership.share)
        )
        entry.total_files += 1
        entry.total_lines += ownership.owner_lines

    for entry in result.values():
        entry.files.sort(key=lambda owned: owned.lines, reverse=True)
    return result
