"""Test utilities for the dompath test suite.

This module provides helpers for building document trees by hand and small
node doubles used to exercise the locator's guarded traversal.
"""

from dataclasses import dataclass

from dompath.dom import Comment, Document, DocumentType, Element, Text


@dataclass
class SampleDocument:
    """A hand-built document and handles to the nodes tests look at."""

    document: Document
    html: Element
    body: Element
    header: Element
    main: Element
    first_p: Element
    second_p: Element
    span: Element
    third_p: Element
    table: Element
    rows: list
    cell: Element
    comment: Comment


def element(tag, attributes=None, children=()):
    """Create an element with the given children appended."""
    node = Element(tag, attributes)
    for child in children:
        node.append_child(child)
    return node


def build_sample_document(namespace_uri=None) -> SampleDocument:
    """Build the tree used across locator tests.

    Structure::

        <!DOCTYPE html>
        <html>
          <head/>
          <body>
            <div class="header"/>
            "text"
            <div id="main">
              <p/> <!--note--> <p id="second"/> <span/> <p/>
            </div>
            <table><tbody>
              <tr><td/><td/></tr>
              <tr><td id="cell"/><td/></tr>
            </tbody></table>
          </body>
        </html>

    """
    first_p = element("p")
    comment = Comment("note")
    second_p = element("p", {"id": "second"})
    span = element("span")
    third_p = element("p")
    main = element("div", {"id": "main"}, [first_p, comment, second_p, span, third_p])
    header = element("div", {"class": "header"})

    cell = element("td", {"id": "cell"})
    row1 = element("tr", children=[element("td"), element("td")])
    row2 = element("tr", children=[cell, element("td")])
    table = element("table", children=[element("tbody", children=[row1, row2])])

    body = element("body", children=[header, Text("\n  "), main, table])
    html = Element("html", namespace_uri=namespace_uri)
    html.append_child(element("head"))
    html.append_child(body)

    document = Document()
    document.append_child(DocumentType("html"))
    document.append_child(html)

    return SampleDocument(
        document=document,
        html=html,
        body=body,
        header=header,
        main=main,
        first_p=first_p,
        second_p=second_p,
        span=span,
        third_p=third_p,
        table=table,
        rows=[row1, row2],
        cell=cell,
        comment=comment,
    )


class FragileNode:
    """Node double whose ``parent`` access raises, like a node in a torn-down tree."""

    def __init__(self, tag_name="div", owner_document=None):
        self.tag_name = tag_name
        self.children = []
        self.owner_document = owner_document

    @property
    def parent(self):
        raise RuntimeError("node is no longer attached")

    def get_attribute(self, name):
        return None


class PlainNode:
    """Minimal duck-typed node without the dompath.dom base class."""

    def __init__(self, tag_name, parent=None, attributes=None, owner_document=None):
        self.tag_name = tag_name
        self.parent = parent
        self.children = []
        self.attributes = attributes or {}
        self.owner_document = owner_document
        if parent is not None:
            parent.children.append(self)

    def get_attribute(self, name):
        return self.attributes.get(name)


class TornChildren(list):
    """Children list that fails when iterated, like a collection invalidated mid-walk."""

    def __iter__(self):
        raise RuntimeError("children list torn down")
