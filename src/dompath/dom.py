#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dompath/dom.py
"""Document tree model read by the locator.

This module defines a small DOM-like node hierarchy. It carries only what
path generation needs: tag names, attributes, parent/child links, the owning
document and the table-specific row and cell indices.

Node Hierarchy
--------------
- Node (base class, no tag name)
    - Document (tree root)
    - Element (tagged node; the only kind with a tag name)
    - Text, Comment, DocumentType (untagged leaves)

Examples
--------
Build a small tree by hand:

    >>> doc = Document()
    >>> html = doc.append_child(Element("html"))
    >>> body = html.append_child(Element("body"))
    >>> div = body.append_child(Element("div", {"id": "main"}))
    >>> div.owner_document is doc
    True

"""

from __future__ import annotations

from typing import Iterator, Optional

TABLE_SECTION_TAGS = frozenset({"thead", "tbody", "tfoot"})
TABLE_CELL_TAGS = frozenset({"td", "th"})


class Node:
    """Base class for every node in a document tree.

    Parameters
    ----------
    tag_name : str or None, default None
        Element name; ``None`` for non-element nodes
    attributes : dict or None, default None
        Attribute name to value mapping

    """

    def __init__(self, tag_name: Optional[str] = None, attributes: Optional[dict[str, str]] = None) -> None:
        self.tag_name = tag_name
        self.attributes: dict[str, str] = dict(attributes or {})
        self.parent: Optional[Node] = None
        self.children: list[Node] = []

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.tag_name!r}>"

    @property
    def owner_document(self) -> Optional[Document]:
        """Return the document this node belongs to, or None when detached.

        A parent chain that loops back on itself also yields None.
        """
        seen = {id(self)}
        current = self.parent
        while current is not None and id(current) not in seen:
            if isinstance(current, Document):
                return current
            seen.add(id(current))
            current = current.parent
        return None

    def is_ancestor_of(self, node: Node) -> bool:
        """Return True if this node is a proper ancestor of ``node``."""
        seen = {id(node)}
        current = node.parent
        while current is not None and id(current) not in seen:
            if current is self:
                return True
            seen.add(id(current))
            current = current.parent
        return False

    def get_attribute(self, name: str) -> Optional[str]:
        """Return the value of attribute ``name`` or None."""
        return self.attributes.get(name)

    @property
    def id(self) -> str:
        return self.attributes.get("id", "")

    @property
    def class_name(self) -> str:
        return self.attributes.get("class", "")

    def append_child(self, child: Node) -> Node:
        """Append ``child`` as the last child of this node and return it.

        A child that already has a parent is moved.

        Raises
        ------
        ValueError
            If ``child`` is this node or one of its ancestors.

        """
        # Childless nodes have no descendants
        if child is self or (child.children and child.is_ancestor_of(self)):
            raise ValueError(f"Cannot append {child!r} to {self!r}: the tree would contain a cycle")
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: Node) -> Node:
        """Detach ``child`` from this node and return it.

        Raises
        ------
        ValueError
            If ``child`` is not a child of this node.

        """
        self.children.remove(child)
        child.parent = None
        return child

    def iter_descendants(self) -> Iterator[Node]:
        """Yield every descendant in document order, each node once."""
        seen = {id(self)}
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            yield node
            stack.extend(reversed(node.children))

    def iter_elements(self) -> Iterator[Element]:
        """Yield every descendant element in document order."""
        for node in self.iter_descendants():
            if isinstance(node, Element):
                yield node

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        """Return the first descendant element whose id equals ``element_id``."""
        for element in self.iter_elements():
            if element.get_attribute("id") == element_id:
                return element
        return None

    def get_elements_by_tag_name(self, tag_name: str) -> list[Element]:
        """Return descendant elements with the given tag name (case-insensitive)."""
        wanted = tag_name.lower()
        if wanted == "*":
            return list(self.iter_elements())
        return [element for element in self.iter_elements() if element.local_name == wanted]


class Element(Node):
    """A tagged node.

    Parameters
    ----------
    tag_name : str
        Element name as written in the source
    attributes : dict or None, default None
        Attribute name to value mapping
    namespace_uri : str or None, default None
        Namespace of the element. Falls back to the ``xmlns`` attribute.

    """

    tag_name: str

    def __init__(
        self,
        tag_name: str,
        attributes: Optional[dict[str, str]] = None,
        namespace_uri: Optional[str] = None,
    ) -> None:
        super().__init__(tag_name, attributes)
        self._namespace_uri = namespace_uri

    @property
    def namespace_uri(self) -> Optional[str]:
        if self._namespace_uri is not None:
            return self._namespace_uri
        return self.attributes.get("xmlns") or None

    @property
    def local_name(self) -> str:
        return self.tag_name.lower()

    @property
    def rows(self) -> list[Element]:
        """Rows of a table or table section, in DOM order.

        For a ``table`` this is thead rows, then body rows, then tfoot rows.
        Other elements have no rows.
        """
        name = self.local_name
        if name in TABLE_SECTION_TAGS:
            return _child_elements(self, {"tr"})
        if name != "table":
            return []

        head: list[Element] = []
        body: list[Element] = []
        foot: list[Element] = []
        for child in _child_elements(self, {"thead", "tbody", "tfoot", "tr"}):
            section = child.local_name
            if section == "tr":
                body.append(child)
            elif section == "thead":
                head.extend(child.rows)
            elif section == "tfoot":
                foot.extend(child.rows)
            else:
                body.extend(child.rows)
        return head + body + foot

    @property
    def cells(self) -> list[Element]:
        """Cells (``td`` and ``th``) of a table row."""
        if self.local_name != "tr":
            return []
        return _child_elements(self, TABLE_CELL_TAGS)

    @property
    def row_index(self) -> int:
        """Position of this row within its table, or -1."""
        if self.local_name != "tr":
            return -1
        table = self.parent
        if isinstance(table, Element) and table.local_name in TABLE_SECTION_TAGS:
            table = table.parent
        if not isinstance(table, Element) or table.local_name != "table":
            return -1
        for index, row in enumerate(table.rows):
            if row is self:
                return index
        return -1

    @property
    def cell_index(self) -> int:
        """Position of this cell within its row, or -1."""
        row = self.parent
        if self.local_name not in TABLE_CELL_TAGS or not isinstance(row, Element):
            return -1
        for index, cell in enumerate(row.cells):
            if cell is self:
                return index
        return -1


class Document(Node):
    """Root of a document tree. Has no tag name."""

    @property
    def owner_document(self) -> Optional[Document]:
        return None

    @property
    def document_element(self) -> Optional[Element]:
        """Return the first element child (the root element)."""
        for child in self.children:
            if isinstance(child, Element):
                return child
        return None


class Text(Node):
    """Character data."""

    def __init__(self, data: str = "") -> None:
        super().__init__()
        self.data = data

    def __repr__(self) -> str:
        return f"<Text {self.data[:20]!r}>"


class Comment(Text):
    """Comment node."""

    def __repr__(self) -> str:
        return f"<Comment {self.data[:20]!r}>"


class DocumentType(Node):
    """Doctype declaration."""

    def __init__(self, name: str = "html") -> None:
        super().__init__()
        self.name = name

    def __repr__(self) -> str:
        return f"<DocumentType {self.name!r}>"


def _child_elements(node: Node, names: set[str] | frozenset[str]) -> list[Element]:
    return [child for child in node.children if isinstance(child, Element) and child.local_name in names]


__all__ = [
    "Node",
    "Element",
    "Document",
    "Text",
    "Comment",
    "DocumentType",
]
