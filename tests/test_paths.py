"""Unit tests for dotted-path access and per-node copying."""

import sys
import unittest
from enum import Enum
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalker.core.paths import (
    copy_excluding,
    get_path,
    has_path,
    is_group,
    is_record,
    set_path,
)


class TestHasPath(unittest.TestCase):
    """Presence rule: every segment must be truthy or an empty container."""

    def test_single_segment(self):
        self.assertTrue(has_path({'children': [{'id': 1}]}, 'children'))
        self.assertFalse(has_path({'id': 1}, 'children'))

    def test_nested_segments(self):
        node = {'attrs': {'left': {'right': {'node': True}}}}
        self.assertTrue(has_path(node, 'attrs.left.right'))
        self.assertTrue(has_path(node, 'attrs.left'))
        self.assertFalse(has_path(node, 'attrs.right'))
        self.assertFalse(has_path(node, 'attrs.left.right.missing'))

    def test_falsy_intermediate_means_absent(self):
        self.assertFalse(has_path({'attrs': None}, 'attrs.left'))
        self.assertFalse(has_path({'attrs': 0}, 'attrs.left'))
        self.assertFalse(has_path({'attrs': ''}, 'attrs.left'))

    def test_falsy_leaf_means_absent(self):
        self.assertFalse(has_path({'child': None}, 'child'))
        self.assertFalse(has_path({'child': 0}, 'child'))
        self.assertFalse(has_path({'child': ''}, 'child'))

    def test_empty_containers_are_present(self):
        self.assertTrue(has_path({'children': []}, 'children'))
        self.assertTrue(has_path({'children': ()}, 'children'))
        self.assertTrue(has_path({'attrs': {}}, 'attrs'))
        self.assertFalse(has_path({'attrs': {}}, 'attrs.left'))

    def test_attribute_access(self):
        node = SimpleNamespace(attrs=SimpleNamespace(left=SimpleNamespace(id=2)))
        self.assertTrue(has_path(node, 'attrs.left'))
        self.assertFalse(has_path(node, 'attrs.right'))


class TestGetSetPath(unittest.TestCase):
    """Plain reads and writes along a dotted path."""

    def test_get_nested(self):
        node = {'a': {'b': {'c': 3}}}
        self.assertEqual(get_path(node, 'a.b.c'), 3)
        self.assertEqual(get_path(node, 'a.b'), {'c': 3})

    def test_get_missing_is_none(self):
        self.assertIsNone(get_path({'a': {}}, 'a.b'))
        self.assertIsNone(get_path({'a': None}, 'a.b.c'))

    def test_set_nested(self):
        node = {'a': {'b': {}}}
        set_path(node, 'a.b.c', 5)
        self.assertEqual(node, {'a': {'b': {'c': 5}}})

    def test_set_top_level(self):
        node = {}
        set_path(node, 'children', [])
        self.assertEqual(node, {'children': []})

    def test_set_on_object(self):
        node = SimpleNamespace(attrs=SimpleNamespace())
        set_path(node, 'attrs.left', 1)
        self.assertEqual(node.attrs.left, 1)


def test_set_missing_intermediate_raises():
    with pytest.raises(KeyError):
        set_path({}, 'a.b', 1)


def test_is_group():
    assert is_group([1, 2])
    assert is_group(())
    assert not is_group({'id': 1})
    assert not is_group('abc')


class TestCopyExcluding(unittest.TestCase):
    """Field-by-field copy that leaves child paths out."""

    def test_excludes_top_level_keys(self):
        node = {'id': 1, 'children': [{'id': 2}], 'name': 'root'}
        self.assertEqual(copy_excluding(node, ['children']), {'id': 1, 'name': 'root'})

    def test_excludes_nested_keys_only(self):
        node = {'id': 1, 'attrs': {'color': 'red', 'left': {'id': 2}}}
        copy = copy_excluding(node, ['attrs.left'])
        self.assertEqual(copy, {'id': 1, 'attrs': {'color': 'red'}})
        self.assertIsNot(copy['attrs'], node['attrs'])

    def test_does_not_alias_nested_mappings(self):
        node = {'meta': {'tags': {'x': 1}}}
        copy = copy_excluding(node, [])
        copy['meta']['tags']['x'] = 2
        self.assertEqual(node['meta']['tags']['x'], 1)

    def test_non_child_arrays_copied_as_lists(self):
        node = {'tags': ['a', 'b'], 'points': [{'x': 1}]}
        copy = copy_excluding(node, [])
        self.assertEqual(copy, {'tags': ['a', 'b'], 'points': [{'x': 1}]})
        self.assertIsNot(copy['tags'], node['tags'])
        self.assertIsNot(copy['points'][0], node['points'][0])

    def test_literal_arrays_copied_by_index(self):
        node = {'tags': ['a', 'b']}
        self.assertEqual(copy_excluding(node, [], literal_arrays=True),
                         {'tags': {'0': 'a', '1': 'b'}})

    def test_input_untouched(self):
        node = {'id': 1, 'children': [{'id': 2}]}
        copy_excluding(node, ['children'])
        self.assertEqual(node, {'id': 1, 'children': [{'id': 2}]})

    def test_nested_records_copied_as_dicts(self):
        attrs = SimpleNamespace(color='red', left={'id': 2})
        node = {'id': 1, 'attrs': attrs}

        copy = copy_excluding(node, ['attrs.left'])

        self.assertEqual(copy, {'id': 1, 'attrs': {'color': 'red'}})
        self.assertIsNot(copy['attrs'], attrs)
        self.assertEqual(attrs.left, {'id': 2})

    def test_opaque_values_shared(self):
        class Color(Enum):
            RED = 1

        node = {'color': Color.RED, 'kind': SimpleNamespace, 'key': len}
        copy = copy_excluding(node, [])
        self.assertIs(copy['color'], Color.RED)
        self.assertIs(copy['kind'], SimpleNamespace)
        self.assertIs(copy['key'], len)


def test_is_record():
    assert is_record(SimpleNamespace(id=1))
    assert not is_record({'id': 1})
    assert not is_record('abc')
    assert not is_record(SimpleNamespace)
    assert not is_record(len)
