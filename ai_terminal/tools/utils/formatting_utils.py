from typing import Dict, List

from ai_terminal.models.filesystem import DirectoryNode, FileNode, NodeType


def listing_entries(node: FileNode | DirectoryNode) -> List[Dict]:
    """Structured `ls` entries: one dict per name, with its node type."""
    if isinstance(node, FileNode):
        return [{"name": node.name, "type": NodeType.FILE.value}]
    return [{"name": child.name, "type": child.type} for child in node.children.values()]


def format_listing(entries: List[Dict]) -> str:
    return "  ".join(entry["name"] for entry in entries)


def format_search_results(results: List) -> str:
    return "\n".join(result.line for result in results)


def format_history(commands: List[str]) -> str:
    width = len(str(len(commands)))
    return "\n".join(f"  {index:>{width}}  {command}" for index, command in enumerate(commands, start=1))


def format_help(specs: List) -> str:
    """Two-column help text, synopsis padded to the widest entry."""
    if not specs:
        return ""
    width = max(len(spec.synopsis) for spec in specs)
    lines = ["Available Commands:"]
    lines.extend(f"  {spec.synopsis:<{width}}  - {spec.description}" for spec in specs)
    return "\n".join(lines)
