#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for node path generation.

This module tests dompath.locator.get_xpath, including positional sibling
indexing, the id suffix, namespace prefixes, the id-predicate option and
the sentinel values returned for missing or detached nodes.
"""

import threading

import pytest
from utils import FragileNode, PlainNode, TornChildren, build_sample_document, element

from dompath.dom import Document, Element, Text
from dompath.locator import get_xpath, locate
from dompath.options import LocatorOptions


@pytest.mark.unit
class TestSentinels:
    """Test the values returned instead of paths."""

    def test_none_node(self):
        """Test that a missing node yields the (none) sentinel."""
        assert get_xpath(None) == "(none)"

    def test_none_node_with_options(self):
        """Test that options do not change the (none) sentinel."""
        assert get_xpath(None, LocatorOptions(use_id_predicates=True)) == "(none)"

    def test_detached_element(self):
        """Test that an element without a parent yields an empty path."""
        assert get_xpath(Element("div")) == ""

    def test_detached_element_with_id(self):
        """Test that the id suffix is not added when the walk fails."""
        assert get_xpath(Element("div", {"id": "lonely"})) == ""

    def test_detached_subtree(self):
        """Test that a node whose ancestor lost its parent yields an empty path."""
        sample = build_sample_document()
        sample.body.remove_child(sample.main)

        assert get_xpath(sample.second_p) == ""

    def test_text_node(self):
        """Test that a node without a tag name yields an empty path."""
        sample = build_sample_document()
        text = sample.body.children[1]

        assert isinstance(text, Text)
        assert get_xpath(text) == ""

    def test_comment_node(self, sample_document):
        """Test that comment nodes yield an empty path."""
        assert get_xpath(sample_document.comment) == ""

    def test_document_node(self, sample_document):
        """Test that the document itself yields an empty path."""
        assert get_xpath(sample_document.document) == ""

    def test_parent_access_raises(self):
        """Test that an exception while reading the parent is treated as detached."""
        assert get_xpath(FragileNode()) == ""

    def test_parent_access_raises_mid_chain(self):
        """Test that a raising ancestor anywhere in the chain yields an empty path."""
        broken = FragileNode()
        child = PlainNode("span", parent=broken)

        assert get_xpath(child) == ""

    def test_cyclic_parent_chain(self):
        """Test that a parent cycle is reported as malformed rather than looping."""
        a = PlainNode("div")
        b = PlainNode("div", parent=a)
        a.parent = b

        assert get_xpath(b) == ""

    def test_cyclic_dom_tree(self):
        """Test that a cycle in a dompath.dom tree yields an empty path."""
        outer = Element("div")
        inner = outer.append_child(Element("span"))
        outer.parent = inner
        inner.children.append(outer)

        assert get_xpath(outer) == ""
        assert get_xpath(inner) == ""
        assert get_xpath(outer, LocatorOptions(use_id_predicates=True)) == ""

    def test_children_iteration_raises(self):
        """Test that an exception while scanning siblings yields an empty path."""
        document = PlainNode(None)
        root = PlainNode("root", parent=document, owner_document=document)
        root.children = TornChildren()
        target = PlainNode("item", parent=root, attributes={"id": "t"}, owner_document=document)
        document.document_element = root

        assert get_xpath(target) == ""

    def test_document_element_namespace_not_a_string(self):
        """Test that a non-string namespace on the root element adds no prefix."""
        document = PlainNode(None)
        root = PlainNode("root", parent=document, owner_document=document)
        root.namespace_uri = object()
        document.document_element = root

        assert get_xpath(root) == "/root[1]"


@pytest.mark.unit
class TestPositionalPaths:
    """Test positional segment construction."""

    def test_root_element(self, sample_document):
        """Test the path of the document element."""
        assert get_xpath(sample_document.html) == "/html[1]"

    def test_body(self, sample_document):
        """Test that untagged siblings do not count towards the index."""
        assert get_xpath(sample_document.body) == "/html[1]/body[1]"

    def test_second_of_same_tag(self, sample_document):
        """Test that the second div among siblings gets index 2."""
        assert get_xpath(sample_document.main) == "/html[1]/body[1]/div[2]#main"

    def test_first_of_same_tag(self, sample_document):
        """Test that the first div gets index 1 and no id suffix."""
        assert get_xpath(sample_document.header) == "/html[1]/body[1]/div[1]"

    def test_comment_and_other_tags_do_not_count(self, sample_document):
        """Test that comments and differently named siblings are skipped."""
        assert get_xpath(sample_document.second_p) == "/html[1]/body[1]/div[2]/p[2]#second"
        assert get_xpath(sample_document.third_p) == "/html[1]/body[1]/div[2]/p[3]"
        assert get_xpath(sample_document.span) == "/html[1]/body[1]/div[2]/span[1]"

    def test_three_sibling_divs(self):
        """Test that b in a, b, c gets index 2."""
        document = Document()
        a, b, c = Element("div"), Element("div"), Element("div")
        document.append_child(element("root", children=[a, b, c]))

        assert get_xpath(a) == "/root[1]/div[1]"
        assert get_xpath(b) == "/root[1]/div[2]"
        assert get_xpath(c) == "/root[1]/div[3]"

    def test_tag_comparison_is_case_insensitive(self):
        """Test that tag names are lowercased and matched case-insensitively."""
        document = Document()
        first = Element("DIV")
        second = Element("Div")
        document.append_child(element("HTML", children=[first, second]))

        assert get_xpath(second) == "/html[1]/div[2]"

    def test_table_rows_and_cells_use_positional_indexing(self, sample_document):
        """Test that tr and td get ordinary positional segments."""
        assert get_xpath(sample_document.rows[1]) == "/html[1]/body[1]/table[1]/tbody[1]/tr[2]"
        assert get_xpath(sample_document.cell) == "/html[1]/body[1]/table[1]/tbody[1]/tr[2]/td[1]#cell"

    def test_id_suffix_appended_once(self, sample_document):
        """Test that ancestor ids are not appended, only the node's own id."""
        path = get_xpath(sample_document.second_p)

        assert path.count("#") == 1
        assert path.endswith("#second")

    def test_empty_id_not_appended(self):
        """Test that an empty id attribute adds no suffix."""
        document = Document()
        node = Element("div", {"id": ""})
        document.append_child(node)

        assert get_xpath(node) == "/div[1]"

    def test_locate_alias(self, sample_document):
        """Test that locate is the same function as get_xpath."""
        assert locate is get_xpath
        assert locate(sample_document.span) == get_xpath(sample_document.span)

    def test_duck_typed_nodes(self):
        """Test that any object exposing the node attributes can be located."""
        document = PlainNode(None)
        root = PlainNode("root", parent=document, owner_document=document)
        PlainNode("item", parent=root, owner_document=document)
        target = PlainNode("item", parent=root, attributes={"id": "t"}, owner_document=document)
        document.document_element = root

        assert get_xpath(target) == "/root[1]/item[2]#t"

    def test_non_string_id_ignored(self):
        """Test that an id attribute that is not a string adds no suffix."""
        document = PlainNode(None)
        root = PlainNode("root", parent=document, owner_document=document)
        target = PlainNode("item", parent=root, attributes={"id": 7}, owner_document=document)
        document.document_element = root

        assert get_xpath(target) == "/root[1]/item[1]"

    def test_non_string_id_ignored_with_id_predicates(self):
        """Test that a non-string id does not trigger the id shortcut."""
        document = PlainNode(None)
        root = PlainNode("root", parent=document, attributes={"id": 3.5}, owner_document=document)
        target = PlainNode("item", parent=root, owner_document=document)
        document.document_element = root

        assert get_xpath(target, LocatorOptions(use_id_predicates=True)) == "/root[1]/item[1]"


@pytest.mark.unit
class TestNamespacePrefix:
    """Test the x: prefix applied for namespaced documents."""

    def test_prefix_on_every_segment(self):
        """Test that every segment gets the prefix when the root declares a namespace."""
        sample = build_sample_document(namespace_uri="http://www.w3.org/1999/xhtml")

        assert get_xpath(sample.second_p) == "/x:html[1]/x:body[1]/x:div[2]/x:p[2]#second"

    def test_prefix_from_xmlns_attribute(self):
        """Test that an xmlns attribute on the root element also triggers the prefix."""
        document = Document()
        child = Element("item")
        document.append_child(element("feed", {"xmlns": "http://www.w3.org/2005/Atom"}, [child]))

        assert get_xpath(child) == "/x:feed[1]/x:item[1]"

    def test_no_prefix_without_namespace(self, sample_document):
        """Test that no prefix is used when the root has no namespace."""
        assert "x:" not in get_xpath(sample_document.second_p)


@pytest.mark.unit
class TestIdPredicates:
    """Test the optional id-predicate shortcut."""

    def test_disabled_by_default(self, sample_document):
        """Test that ids do not shorten paths by default."""
        assert LocatorOptions().use_id_predicates is False
        assert get_xpath(sample_document.span).startswith("/html[1]")

    def test_shortcut_at_nearest_ancestor_with_id(self, sample_document):
        """Test that the walk stops at the nearest element carrying an id."""
        options = LocatorOptions(use_id_predicates=True)

        assert get_xpath(sample_document.span, options) == '//div[@id="main"]/span[1]'

    def test_shortcut_on_node_itself(self, sample_document):
        """Test that a node with an id is addressed directly, with the id suffix kept."""
        options = LocatorOptions(use_id_predicates=True)

        assert get_xpath(sample_document.second_p, options) == '//p[@id="second"]#second'

    def test_shortcut_with_namespace_prefix(self):
        """Test that the predicate segment carries the namespace prefix."""
        sample = build_sample_document(namespace_uri="urn:example")
        options = LocatorOptions(use_id_predicates=True)

        assert get_xpath(sample.span, options) == '//x:div[@id="main"]/x:span[1]'


@pytest.mark.unit
class TestPurity:
    """Test that path generation reads but never changes the tree."""

    def test_tree_unchanged(self, sample_document):
        """Test that locating a node leaves parent and child links untouched."""
        before = [(node, node.parent, list(node.children)) for node in sample_document.document.iter_descendants()]

        for node, _, _ in before:
            get_xpath(node)

        after = [(node, node.parent, list(node.children)) for node in sample_document.document.iter_descendants()]
        assert before == after

    def test_concurrent_calls(self, sample_document):
        """Test that concurrent callers all get the same path."""
        results = []

        def worker():
            results.append(get_xpath(sample_document.cell))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert set(results) == {"/html[1]/body[1]/table[1]/tbody[1]/tr[2]/td[1]#cell"}

    def test_deep_chain(self):
        """Test that very deep trees are located without recursion."""
        document = Document()
        current = document.append_child(Element("div"))
        for _ in range(4999):
            current = current.append_child(Element("div"))

        assert get_xpath(current) == "/div[1]" * 5000
