"""Ownership rollups: directories, authors and the directory tree."""

from .rollup import (
    ROOT_DIRECTORY,
    build_author_ownership,
    build_directory_ownership,
    get_directory,
    pick_owner,
)
from .tree import (
    ConcentrationArea,
    NodeType,
    TreeNode,
    build_directory_tree,
    flatten_single_child_paths,
    iter_nodes,
    knowledge_concentration,
)

__all__ = [
    "ROOT_DIRECTORY",
    "build_author_ownership",
    "build_directory_ownership",
    "get_directory",
    "pick_owner",
    "ConcentrationArea",
    "NodeType",
    "TreeNode",
    "build_directory_tree",
    "flatten_single_child_paths",
    "iter_nodes",
    "knowledge_concentration",
]
