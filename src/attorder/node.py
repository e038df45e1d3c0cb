"""Lossless syntax tree for attribute reordering.

Every node keeps the exact source text it was built from so that
``to_html()`` on the whole document reproduces the input, apart from the
order of attributes inside opening tags.
"""


class AttrKind:
    __slots__ = ()

    PLAIN = 0
    BRACKET = 1
    PAREN = 2
    HASH = 3
    AT = 4
    STAR = 5
    TWO_WAY = 6

    # (prefix, suffix) rendered around the attribute name.
    WRAPPERS = {
        PLAIN: ("", ""),
        BRACKET: ("[", "]"),
        PAREN: ("(", ")"),
        HASH: ("#", ""),
        AT: ("@", ""),
        STAR: ("*", ""),
        TWO_WAY: ("[(", ")]"),
    }

    NAMES = {
        PLAIN: "plain",
        BRACKET: "bracket",
        PAREN: "paren",
        HASH: "hash",
        AT: "at",
        STAR: "star",
        TWO_WAY: "two-way",
    }


class Node:
    __slots__ = ()

    def to_html(self):
        raise NotImplementedError


class TextNode(Node):
    __slots__ = ("data",)

    def __init__(self, data=""):
        self.data = data

    def __repr__(self):
        return f"TextNode({self.data!r})"

    def to_html(self):
        return self.data


class Attribute:
    """A single attribute of an opening tag.

    ``value`` keeps its quotes verbatim (``'"a b"'``) or is the bare
    identifier for unquoted values. It is empty when ``has_value`` is false.
    """

    __slots__ = ("has_value", "kind", "name", "value")

    def __init__(self, name, value="", kind=AttrKind.PLAIN, has_value=False):
        if not has_value and value:
            raise ValueError(f"Attribute {name!r} has no value but value={value!r} was given")
        self.name = name
        self.value = value
        self.kind = kind
        self.has_value = bool(has_value)

    def __repr__(self):
        return f"Attribute({self.wrapped_name()!r}, {self.value!r})"

    def wrapped_name(self):
        prefix, suffix = AttrKind.WRAPPERS[self.kind]
        return f"{prefix}{self.name}{suffix}"

    def to_html(self):
        if self.has_value:
            return f"{self.wrapped_name()}={self.value}"
        return self.wrapped_name()


class TagNode(Node):
    """An opening tag.

    ``whitespace[i]`` is the text rendered in front of ``attrs[i]``. The two
    lists are index aligned, not attribute aligned: reordering ``attrs``
    leaves ``whitespace`` alone. ``trailing`` is the whitespace between the
    last attribute and ``/`` or ``>``.
    """

    __slots__ = ("attrs", "name", "self_closing", "trailing", "whitespace")

    def __init__(self, name, attrs=None, whitespace=None, trailing="", self_closing=False):
        self.name = name
        self.attrs = attrs if attrs is not None else []
        self.whitespace = whitespace if whitespace is not None else [""] * len(self.attrs)
        if len(self.whitespace) != len(self.attrs):
            raise ValueError(
                f"TagNode {name!r} needs one whitespace slot per attribute "
                f"({len(self.whitespace)} slots, {len(self.attrs)} attributes)"
            )
        self.trailing = trailing
        self.self_closing = bool(self_closing)

    def __repr__(self):
        closing = " /" if self.self_closing else ""
        return f"<start:{self.name}{closing} {self.attrs!r}>"

    def append_attr(self, attr, whitespace):
        self.attrs.append(attr)
        self.whitespace.append(whitespace)

    def to_html(self):
        parts = ["<", self.name]
        for ws, attr in zip(self.whitespace, self.attrs):
            parts.append(ws)
            parts.append(attr.to_html())
        parts.append(self.trailing)
        if self.self_closing:
            parts.append("/")
        parts.append(">")
        return "".join(parts)


class EndTagNode(Node):
    __slots__ = ("name",)

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<end:{self.name}>"

    def to_html(self):
        return f"</{self.name}>"


class CommentNode(Node):
    __slots__ = ("data",)

    def __init__(self, data=""):
        self.data = data

    def __repr__(self):
        return f"CommentNode({self.data!r})"

    def to_html(self):
        return f"<!--{self.data}-->"


class BangTagNode(Node):
    """``<!...>`` that is not a comment, e.g. a doctype declaration."""

    __slots__ = ("data",)

    def __init__(self, data=""):
        self.data = data

    def __repr__(self):
        return f"BangTagNode({self.data!r})"

    def to_html(self):
        return f"<!{self.data}>"


class Document:
    __slots__ = ("children",)

    def __init__(self, children=None):
        self.children = children if children is not None else []

    def __iter__(self):
        return iter(self.children)

    def __len__(self):
        return len(self.children)

    def __getitem__(self, index):
        return self.children[index]

    def append_child(self, node):
        self.children.append(node)

    def to_html(self):
        return "".join(child.to_html() for child in self.children)
