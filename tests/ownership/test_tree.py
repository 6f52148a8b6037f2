"""Tests for ownership/tree.py - directory tree, flattening, concentration."""

from datetime import datetime, timezone

from churnscope.models import FileOwnership
from churnscope.ownership import (
    NodeType,
    build_directory_tree,
    flatten_single_child_paths,
    iter_nodes,
    knowledge_concentration,
)
from churnscope.parsing import parse_ownership_stats


def make_file(path: str, owner: str, lines: int) -> FileOwnership:
    return FileOwnership(
        file=path,
        owner=owner,
        share=100,
        owner_lines=lines,
        total_lines=lines,
        authors={owner: lines},
    )


def find(node, path):
    return next(n for n in iter_nodes(node) if n.path == path)


class TestBuildDirectoryTree:
    """Test structure and the bottom-up rollup."""

    def test_children_directories_first_then_names(self, ownership_log):
        tree = build_directory_tree(parse_ownership_stats(ownership_log).files)
        assert tree.type is NodeType.DIRECTORY
        assert [c.name for c in tree.children] == ["src", "README.md", "yarn.lock"]

    def test_root_rollup(self, ownership_log):
        tree = build_directory_tree(parse_ownership_stats(ownership_log).files)
        assert tree.total_files == 4
        assert tree.lines == 76
        assert tree.owner == "Bob"
        assert tree.owner_files == 3
        assert tree.share == 75
        assert tree.last_commit_date == datetime(2025, 2, 1, 12, 0, tzinfo=timezone.utc)

    def test_directory_owner_counts_files_owned(self, ownership_log):
        tree = build_directory_tree(parse_ownership_stats(ownership_log).files)
        src = find(tree, "src")
        assert (src.owner, src.share, src.lines) == ("Alice", 50, 55)

    def test_file_leaves(self, ownership_log):
        tree = build_directory_tree(parse_ownership_stats(ownership_log).files)
        util = find(tree, "src/util.py")
        assert util.type is NodeType.FILE
        assert (util.owner, util.share, util.lines) == ("Bob", 67, 15)
        assert util.file_ownership.authors == {"Alice": 5, "Bob": 10}

    def test_undated_directory_has_no_date(self):
        tree = build_directory_tree({"d/a": make_file("d/a", "Ann", 3)})
        assert find(tree, "d").last_commit_date is None

    def test_mixed_date_forms_roll_up(self):
        log = (
            "AUTHOR:Ann|DATE:2025-01-01\n1\t0\tsrc/a.py\n\n"
            "AUTHOR:Ben|DATE:2025-01-02 10:00:00 +0000\n1\t0\tsrc/b.py\n"
        )
        tree = build_directory_tree(parse_ownership_stats(log).files)
        assert find(tree, "src").last_commit_date == datetime(
            2025, 1, 2, 10, 0, tzinfo=timezone.utc
        )

    def test_building_twice_gives_equal_trees(self, ownership_log):
        files = parse_ownership_stats(ownership_log).files
        assert build_directory_tree(files) == build_directory_tree(files)

    def test_empty(self):
        tree = build_directory_tree({})
        assert tree.children == ()
        assert (tree.owner, tree.share, tree.total_files) == ("", 0, 0)


class TestFlattenSingleChildPaths:
    def test_chain_collapses_to_deepest_node(self):
        files = {
            "a/b/c/x.py": make_file("a/b/c/x.py", "Ann", 3),
            "a/b/c/y.py": make_file("a/b/c/y.py", "Ben", 4),
            "top.py": make_file("top.py", "Ann", 1),
        }
        tree = build_directory_tree(files)
        deepest = find(tree, "a/b/c")

        flat = flatten_single_child_paths(tree)
        merged = flat.children[0]
        assert merged.name == "a/b/c"
        assert merged.path == "a/b/c"
        assert (merged.owner, merged.share, merged.lines) == (
            deepest.owner,
            deepest.share,
            deepest.lines,
        )
        assert [c.name for c in merged.children] == ["x.py", "y.py"]

    def test_directory_with_two_children_is_kept(self, ownership_log):
        tree = build_directory_tree(parse_ownership_stats(ownership_log).files)
        assert flatten_single_child_paths(tree) == tree

    def test_input_tree_is_untouched(self):
        files = {"a/b/x.py": make_file("a/b/x.py", "Ann", 3)}
        tree = build_directory_tree(files)
        flatten_single_child_paths(tree)
        assert tree.children[0].name == "a"


class TestKnowledgeConcentration:
    def make_tree(self):
        return build_directory_tree(
            {
                "core/engine.py": make_file("core/engine.py", "Ann", 900),
                "core/util.py": make_file("core/util.py", "Ann", 200),
                "web/app.ts": make_file("web/app.ts", "Ben", 600),
                "shared/a.py": make_file("shared/a.py", "Ann", 800),
                "shared/b.py": make_file("shared/b.py", "Ben", 800),
                "small/x.py": make_file("small/x.py", "Cy", 10),
            }
        )

    def test_single_owner_large_directories(self):
        areas = knowledge_concentration(self.make_tree())
        assert [(a.path, a.owner, a.lines) for a in areas] == [
            ("core", "Ann", 1100),
            ("web", "Ben", 600),
        ]

    def test_limit(self):
        assert len(knowledge_concentration(self.make_tree(), limit=1)) == 1

    def test_directory_scope(self):
        areas = knowledge_concentration(self.make_tree(), directory="web")
        assert [a.path for a in areas] == ["web"]
