"""Rendering of parsed documents back to markup, plus a debug tree dump."""

from .node import AttrKind, BangTagNode, CommentNode, Document, EndTagNode, TagNode, TextNode


def to_html(node):
    """Render a node or a whole :class:`Document` back to source text."""
    if isinstance(node, Document):
        return "".join(child.to_html() for child in node.children)
    return node.to_html()


def to_test_format(document):
    """One line per node, attributes indented below their tag.

    ``| <div>`` / ``|   [plain] class="a"`` / ``| "text"`` ... Used by the
    tests and by ``attorder --debug``.
    """
    lines = []
    for node in document:
        lines.extend(_node_lines(node))
    return "\n".join(lines)


def _node_lines(node):
    if isinstance(node, TextNode):
        return [f"| {node.data!r}"]
    if isinstance(node, CommentNode):
        return [f"| <!--{node.data}-->"]
    if isinstance(node, BangTagNode):
        return [f"| <!{node.data}>"]
    if isinstance(node, EndTagNode):
        return [f"| </{node.name}>"]
    if isinstance(node, TagNode):
        closing = " /" if node.self_closing else ""
        lines = [f"| <{node.name}{closing}>"]
        for attr in node.attrs:
            kind = AttrKind.NAMES[attr.kind]
            if attr.has_value:
                lines.append(f"|   [{kind}] {attr.name}={attr.value}")
            else:
                lines.append(f"|   [{kind}] {attr.name}")
        return lines
    raise TypeError(f"Unsupported node: {type(node).__name__}")
