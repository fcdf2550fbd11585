"""
Node types and persistent operations for the in-memory filesystem.

Nodes are never modified once built. Every change produces a new root that
shares all untouched branches with the previous one; only the directories on
the path to the changed node are copied.
"""

from enum import Enum
from typing import Annotated, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


class NodeType(str, Enum):
    FILE = "FILE"
    DIRECTORY = "DIRECTORY"


class FileNode(BaseModel):
    """A regular file holding text content."""

    model_config = ConfigDict(frozen=True)

    type: Literal["FILE"] = NodeType.FILE.value
    name: str = Field(min_length=1)
    content: str = ""


class DirectoryNode(BaseModel):
    """A directory; `children` maps each child's name to the child node."""

    model_config = ConfigDict(frozen=True)

    type: Literal["DIRECTORY"] = NodeType.DIRECTORY.value
    name: str
    children: dict[str, "Node"] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.children


Node = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="type")]

DirectoryNode.model_rebuild()

ROOT_NAME = "/"


def default_filesystem() -> DirectoryNode:
    """The tree every new session starts with."""
    readme = FileNode(
        name="README.md",
        content="Hello! This is a README file. You can edit it using the `edit` command.",
    )
    example = FileNode(
        name="example.py",
        content=(
            "def factorial(n):\n"
            "    if n == 0:\n"
            "        return 1\n"
            "    else:\n"
            "        return n * factorial(n-1)\n"
            "\n"
            'print(f"The factorial of 5 is {factorial(5)}")\n'
        ),
    )
    user = DirectoryNode(name="user", children={readme.name: readme, example.name: example})
    home = DirectoryNode(name="home", children={user.name: user})
    return DirectoryNode(name=ROOT_NAME, children={home.name: home})


def get_node(root: DirectoryNode, segments: Sequence[str]) -> FileNode | DirectoryNode | None:
    """Return the node at `segments`, or None if any step is missing."""
    node: FileNode | DirectoryNode = root
    for segment in segments:
        if not isinstance(node, DirectoryNode):
            return None
        child = node.children.get(segment)
        if child is None:
            return None
        node = child
    return node


def is_directory(root: DirectoryNode, segments: Sequence[str]) -> bool:
    return isinstance(get_node(root, segments), DirectoryNode)


def rename_node(node: FileNode | DirectoryNode, name: str) -> FileNode | DirectoryNode:
    if node.name == name:
        return node
    return node.model_copy(update={"name": name})


def put_node(
    root: DirectoryNode, segments: Sequence[str], node: FileNode | DirectoryNode
) -> DirectoryNode:
    """
    Return a new root with `node` stored at `segments`.

    The node is renamed to the last segment so that a child's name always
    matches its key. An existing entry of that name is replaced in place,
    keeping its position in the listing order.

    Raises:
        KeyError: If a directory on the way does not exist.
        NotADirectoryError: If a step on the way is a file.
    """
    if not segments:
        raise ValueError("cannot replace the root directory")
    head, *rest = segments
    if not rest:
        children = dict(root.children)
        children[head] = rename_node(node, head)
        return root.model_copy(update={"children": children})

    child = root.children[head]
    if not isinstance(child, DirectoryNode):
        raise NotADirectoryError(head)
    children = dict(root.children)
    children[head] = put_node(child, rest, node)
    return root.model_copy(update={"children": children})


def remove_node(root: DirectoryNode, segments: Sequence[str]) -> DirectoryNode:
    """
    Return a new root without the node at `segments`.

    Raises:
        KeyError: If the node does not exist.
        NotADirectoryError: If a step on the way is a file.
    """
    if not segments:
        raise ValueError("cannot remove the root directory")
    head, *rest = segments
    children = dict(root.children)
    if not rest:
        del children[head]
        return root.model_copy(update={"children": children})

    child = root.children[head]
    if not isinstance(child, DirectoryNode):
        raise NotADirectoryError(head)
    children[head] = remove_node(child, rest)
    return root.model_copy(update={"children": children})


def is_within(segments: Sequence[str], ancestor: Sequence[str]) -> bool:
    """True if `segments` equals `ancestor` or lies below it."""
    return len(segments) >= len(ancestor) and list(segments[: len(ancestor)]) == list(ancestor)
