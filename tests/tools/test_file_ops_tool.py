#!/usr/bin/env python3
"""
Unit тесты для file_ops_tool.py
"""

import errno

import pytest

from ai_terminal.models.filesystem import DirectoryNode, FileNode, get_node, put_node
from ai_terminal.models.session import ShellSession
from ai_terminal.tools.file_ops_tool import FileOpsTool

USER = ["home", "user"]


class TestFileOpsTool:
    """Тесты для FileOpsTool"""

    @pytest.fixture
    def ops_tool(self):
        return FileOpsTool()

    @pytest.fixture
    def session(self):
        """Сессия с /home/user/d/inner.txt и пустой /home/user/empty"""
        session = ShellSession()
        tree = put_node(session.tree, USER + ["d"], DirectoryNode(name="d"))
        tree = put_node(tree, USER + ["d", "inner.txt"], FileNode(name="inner.txt", content="inner"))
        session.tree = put_node(tree, USER + ["empty"], DirectoryNode(name="empty"))
        return session

    async def run(self, tool, session, command, *args, line=None):
        arguments = {"command": command, "args": list(args), "_session": session}
        if line is not None:
            arguments["line"] = line
        return await tool.execute(arguments)

    # mkdir / touch

    @pytest.mark.asyncio
    async def test_mkdir_creates_directory(self, ops_tool, session):
        result = await self.run(ops_tool, session, "mkdir", "new")
        assert result.error is None
        assert isinstance(get_node(result.tree, USER + ["new"]), DirectoryNode)
        assert get_node(session.tree, USER + ["new"]) is None

    @pytest.mark.asyncio
    async def test_mkdir_existing_fails(self, ops_tool, session):
        """Повторный mkdir сообщает File exists и не меняет дерево"""
        result = await self.run(ops_tool, session, "mkdir", "d")
        assert result.error == "mkdir: cannot create directory 'd': File exists"
        assert result.error_code == errno.EEXIST
        assert result.tree is None

    @pytest.mark.asyncio
    async def test_mkdir_missing_parent(self, ops_tool, session):
        result = await self.run(ops_tool, session, "mkdir", "a/b")
        assert result.error == "mkdir: cannot create directory 'a/b': No such file or directory"

    @pytest.mark.asyncio
    async def test_touch_creates_empty_file(self, ops_tool, session):
        result = await self.run(ops_tool, session, "touch", "d/new.txt")
        node = get_node(result.tree, USER + ["d", "new.txt"])
        assert isinstance(node, FileNode)
        assert node.content == ""

    @pytest.mark.asyncio
    async def test_touch_existing_file_fails(self, ops_tool, session):
        result = await self.run(ops_tool, session, "touch", "README.md")
        assert result.error == "touch: cannot create file 'README.md': File exists"

    @pytest.mark.asyncio
    async def test_create_missing_operand(self, ops_tool, session):
        assert (await self.run(ops_tool, session, "mkdir")).error == "mkdir: missing operand"
        assert (await self.run(ops_tool, session, "touch")).error == "touch: missing operand"

    # echo

    @pytest.mark.asyncio
    async def test_echo_redirect_strips_quotes(self, ops_tool, session):
        result = await self.run(ops_tool, session, "echo", line='echo "hi there" > a.txt')
        assert get_node(result.tree, USER + ["a.txt"]).content == "hi there"

    @pytest.mark.asyncio
    async def test_echo_overwrites_in_place(self, ops_tool, session):
        result = await self.run(ops_tool, session, "echo", line="echo 'new' > README.md")
        user = get_node(result.tree, USER)
        assert user.children["README.md"].content == "new"
        assert list(user.children)[0] == "README.md"

    @pytest.mark.asyncio
    async def test_echo_without_redirect_prints(self, ops_tool, session):
        result = await self.run(ops_tool, session, "echo", line="echo 'hello'")
        assert result.output == "hello"
        assert result.tree is None

    @pytest.mark.asyncio
    async def test_echo_errors(self, ops_tool, session):
        assert (await self.run(ops_tool, session, "echo", line="echo hi >")).error == "echo: missing output file"
        assert (await self.run(ops_tool, session, "echo", line="echo hi > d")).error == "echo: d: Is a directory"
        result = await self.run(ops_tool, session, "echo", line="echo hi > nope/a.txt")
        assert result.error == "echo: cannot write to 'nope/a.txt': Invalid path"

    # rm

    @pytest.mark.asyncio
    async def test_rm_file(self, ops_tool, session):
        result = await self.run(ops_tool, session, "rm", "README.md")
        assert get_node(result.tree, USER + ["README.md"]) is None

    @pytest.mark.asyncio
    async def test_rm_non_empty_directory_requires_recursive(self, ops_tool, session):
        """rm без -r не удаляет непустую директорию"""
        result = await self.run(ops_tool, session, "rm", "d")
        assert result.error == "rm: cannot remove 'd': Is a directory"
        assert result.error_code == errno.EISDIR
        assert result.tree is None

    @pytest.mark.asyncio
    async def test_rm_recursive_removes_subtree(self, ops_tool, session):
        result = await self.run(ops_tool, session, "rm", "-r", "d")
        assert get_node(result.tree, USER + ["d"]) is None
        assert get_node(result.tree, USER + ["d", "inner.txt"]) is None

    @pytest.mark.asyncio
    async def test_rm_empty_directory(self, ops_tool, session):
        result = await self.run(ops_tool, session, "rm", "empty")
        assert get_node(result.tree, USER + ["empty"]) is None

    @pytest.mark.asyncio
    async def test_rm_multiple_operands(self, ops_tool, session):
        result = await self.run(ops_tool, session, "rm", "README.md", "example.py")
        assert list(get_node(result.tree, USER).children) == ["d", "empty"]

    @pytest.mark.asyncio
    async def test_rm_errors(self, ops_tool, session):
        assert (await self.run(ops_tool, session, "rm")).error == "rm: missing operand"
        assert (await self.run(ops_tool, session, "rm", "x")).error == "rm: cannot remove 'x': No such file or directory"
        assert (await self.run(ops_tool, session, "rm", "-r", "/")).error_code == errno.EINVAL

    # mv / cp

    @pytest.mark.asyncio
    async def test_mv_into_directory(self, ops_tool, session):
        """mv в директорию сохраняет имя источника"""
        result = await self.run(ops_tool, session, "mv", "README.md", "d")
        assert get_node(result.tree, USER + ["README.md"]) is None
        assert get_node(result.tree, USER + ["d", "README.md"]).content.startswith("Hello!")

    @pytest.mark.asyncio
    async def test_mv_renames(self, ops_tool, session):
        result = await self.run(ops_tool, session, "mv", "README.md", "NOTES.md")
        node = get_node(result.tree, USER + ["NOTES.md"])
        assert node.name == "NOTES.md"
        assert get_node(result.tree, USER + ["README.md"]) is None

    @pytest.mark.asyncio
    async def test_mv_directory_into_itself_fails(self, ops_tool, session):
        result = await self.run(ops_tool, session, "mv", "d", "d/sub")
        assert "subdirectory of itself" in result.error
        assert result.tree is None

    @pytest.mark.asyncio
    async def test_cp_keeps_original(self, ops_tool, session):
        result = await self.run(ops_tool, session, "cp", "d", "copy")
        original = get_node(result.tree, USER + ["d", "inner.txt"])
        copied = get_node(result.tree, USER + ["copy", "inner.txt"])
        assert original.content == copied.content == "inner"
        assert original is not copied

    @pytest.mark.asyncio
    async def test_cp_overwrites_file(self, ops_tool, session):
        result = await self.run(ops_tool, session, "cp", "README.md", "example.py")
        assert get_node(result.tree, USER + ["example.py"]).content.startswith("Hello!")

    @pytest.mark.asyncio
    async def test_transfer_errors(self, ops_tool, session):
        assert (await self.run(ops_tool, session, "mv")).error == "mv: missing file operand"
        result = await self.run(ops_tool, session, "cp", "README.md")
        assert result.error == "cp: missing destination file operand after 'README.md'"
        result = await self.run(ops_tool, session, "mv", "x", "y")
        assert result.error == "mv: cannot stat 'x': No such file or directory"
        result = await self.run(ops_tool, session, "cp", "README.md", "nope/x")
        assert result.error == "cp: cannot copy 'README.md' to 'nope/x': No such file or directory"

    @pytest.mark.asyncio
    async def test_overwrite_type_mismatch(self, ops_tool, session):
        session.tree = put_node(session.tree, USER + ["e"], DirectoryNode(name="e"))
        session.tree = put_node(session.tree, USER + ["e", "d"], FileNode(name="d"))
        result = await self.run(ops_tool, session, "mv", "d", "e")
        assert result.error_code == errno.ENOTDIR
        session.tree = put_node(session.tree, USER + ["empty", "README.md"], DirectoryNode(name="README.md"))
        result = await self.run(ops_tool, session, "cp", "README.md", "empty")
        assert result.error_code == errno.EISDIR

    @pytest.mark.asyncio
    async def test_echo_append_operator_is_not_special(self, ops_tool, session):
        """`>>` не дописывает: редирект берется по последнему `>`"""
        result = await self.run(ops_tool, session, "echo", line="echo hi >> f.txt")
        assert get_node(result.tree, USER + ["f.txt"]).content == "hi >"
