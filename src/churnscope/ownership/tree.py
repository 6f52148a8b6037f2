"""Directory tree of file ownership with recursive rollups.

The tree is built bottom-up and never mutated: every directory node is
constructed after its children, with its statistics already computed.
Directory owners are the authors who own the most descendant files, where
each file counts for its own primary owner.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Iterator, Mapping, Optional

from ..math import percent_share
from ..models import FileOwnership
from .rollup import pick_owner


class NodeType(Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class TreeNode:
    name: str
    path: str
    type: NodeType
    owner: str = ""
    share: int = 0
    owner_files: int = 0
    total_files: int = 0
    lines: int = 0
    last_commit_date: Optional[datetime] = None
    children: tuple["TreeNode", ...] = ()
    file_ownership: Optional[FileOwnership] = field(default=None, compare=False)

    @property
    def is_directory(self) -> bool:
        return self.type is NodeType.DIRECTORY


@dataclass
class _Skeleton:
    directories: dict[str, "_Skeleton"] = field(default_factory=dict)
    files: dict[str, FileOwnership] = field(default_factory=dict)


ROOT_NAME = "."


def build_directory_tree(files: Mapping[str, FileOwnership]) -> TreeNode:
    """Build the rooted tree for ``files`` keyed by ``/``-separated path.

    Children are ordered directories first, then files, each by name.
    """
    root = _Skeleton()
    for file_path, ownership in files.items():
        parts = [part for part in file_path.split("/") if part]
        if not parts:
            continue
        node = root
        for part in parts[:-1]:
            node = node.directories.setdefault(part, _Skeleton())
        node.files[parts[-1]] = ownership

    tree, _ = _build_directory(ROOT_NAME, ROOT_NAME, root)
    return tree


def _file_node(name: str, path: str, ownership: FileOwnership) -> TreeNode:
    return TreeNode(
        name=name,
        path=path,
        type=NodeType.FILE,
        owner=ownership.owner,
        share=ownership.share,
        owner_files=1,
        total_files=1,
        lines=ownership.total_lines,
        last_commit_date=ownership.last_commit_date,
        file_ownership=ownership,
    )


def _build_directory(
    name: str, path: str, skeleton: _Skeleton
) -> tuple[TreeNode, dict[str, int]]:
    def child_path(child: str) -> str:
        return child if path == ROOT_NAME else f"{path}/{child}"

    children: list[TreeNode] = []
    owner_counts: dict[str, int] = {}

    for dir_name in sorted(skeleton.directories):
        child, counts = _build_directory(
            dir_name, child_path(dir_name), skeleton.directories[dir_name]
        )
        children.append(child)
        for author, count in counts.items():
            owner_counts[author] = owner_counts.get(author, 0) + count

    for file_name in sorted(skeleton.files):
        ownership = skeleton.files[file_name]
        children.append(_file_node(file_name, child_path(file_name), ownership))
        if ownership.owner:
            owner_counts[ownership.owner] = owner_counts.get(ownership.owner, 0) + 1

    total_files = sum(child.total_files for child in children)
    owner, owner_files = pick_owner(owner_counts)
    dates = [c.last_commit_date for c in children if c.last_commit_date is not None]

    node = TreeNode(
        name=name,
        path=path,
        type=NodeType.DIRECTORY,
        owner=owner,
        share=percent_share(owner_files, total_files),
        owner_files=owner_files,
        total_files=total_files,
        lines=sum(child.lines for child in children),
        last_commit_date=max(dates) if dates else None,
        children=tuple(children),
    )
    return node, owner_counts


def flatten_single_child_paths(node: TreeNode) -> TreeNode:
    """Merge chains of directories that each hold a single subdirectory.

    ``src`` containing only ``utils`` becomes one node named ``src/utils``
    that carries the statistics and path of ``utils``.
    """
    flattened: list[TreeNode] = []
    for child in node.children:
        if not child.is_directory:
            flattened.append(child)
            continue

        name = child.name
        deepest = child
        while len(deepest.children) == 1 and deepest.children[0].is_directory:
            deepest = deepest.children[0]
            name = f"{name}/{deepest.name}"

        flattened.append(replace(flatten_single_child_paths(deepest), name=name))

    return replace(node, children=tuple(flattened))


def iter_nodes(node: TreeNode) -> Iterator[TreeNode]:
    """Pre-order traversal."""
    yield node
    for child in node.children:
        yield from iter_nodes(child)


@dataclass(frozen=True)
class ConcentrationArea:
    path: str
    owner: str
    share: int
    lines: int


def _related(path: str, directory: str) -> bool:
    directory = directory.removeprefix("./").rstrip("/")
    path = path.removeprefix("./")
    return (
        path == directory
        or path.startswith(f"{directory}/")
        or directory.startswith(f"{path}/")
    )


def knowledge_concentration(
    tree: TreeNode,
    min_lines: int = 500,
    limit: Optional[int] = 3,
    directory: Optional[str] = None,
) -> list[ConcentrationArea]:
    """Directories wholly owned by one author with at least ``min_lines`` churn.

    Args:
        tree: Root from build_directory_tree
        min_lines: Minimum directory churn to report
        limit: Maximum number of areas, largest first; None for all
        directory: When given, only directories on the path to or below it

    Returns:
        Areas sorted by lines descending
    """
    areas = [
        ConcentrationArea(path=n.path, owner=n.owner, share=n.share, lines=n.lines)
        for n in iter_nodes(tree)
        if n.is_directory
        and n.owner
        and n.share == 100
        and n.lines >= min_lines
        and (directory is None or _related(n.path, directory))
    ]
    areas.sort(key=lambda area: area.lines, reverse=True)
    return areas if limit is None else areas[:limit]
