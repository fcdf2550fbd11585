from dataclasses import dataclass
from typing import Sequence

from ai_terminal.models.filesystem import DirectoryNode, FileNode


@dataclass(frozen=True)
class PathResolution:
    """
    Outcome of resolving a path string.

    `parent` and `node` are both None when the path cannot be resolved at all.
    A valid `parent` with `node` None means only the last segment is missing,
    which is what create-if-missing commands need.
    """

    parent: DirectoryNode | None
    node: FileNode | DirectoryNode | None
    segments: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.segments[-1] if self.segments else ""

    @property
    def exists(self) -> bool:
        return self.node is not None

    @property
    def is_valid(self) -> bool:
        return self.parent is not None or self.node is not None

    @property
    def is_dir(self) -> bool:
        return isinstance(self.node, DirectoryNode)

    @property
    def is_file(self) -> bool:
        return isinstance(self.node, FileNode)

    @property
    def path(self) -> str:
        return "/" + "/".join(self.segments)


def normalize_segments(path_str: str, cwd: Sequence[str]) -> tuple[str, ...]:
    """
    Turn a path string into absolute segments without touching the tree.

    `.` is dropped and `..` pops the last segment; popping past the root is a
    no-op.
    """
    segments = [] if path_str.startswith("/") else list(cwd)
    for part in path_str.split("/"):
        if not part or part == ".":
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    return tuple(segments)


def resolve_path(tree: DirectoryNode, cwd: Sequence[str], path_str: str) -> PathResolution:
    """
    Resolves a user-provided path against a tree snapshot and working directory.

    Args:
        tree: The root directory of the snapshot to resolve against.
        cwd: Absolute segments of the current working directory.
        path_str: The path string provided by the user. Empty means the CWD.

    Returns:
        A PathResolution. The function never raises for a bad path and never
        modifies its inputs.
    """
    segments = normalize_segments(path_str, cwd)
    if not segments:
        return PathResolution(parent=None, node=tree, segments=())

    parent: DirectoryNode = tree
    for segment in segments[:-1]:
        child = parent.children.get(segment)
        if not isinstance(child, DirectoryNode):
            return PathResolution(parent=None, node=None, segments=segments)
        parent = child

    return PathResolution(parent=parent, node=parent.children.get(segments[-1]), segments=segments)
