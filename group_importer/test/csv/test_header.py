# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.test import TestCase
from group_importer.csv.header import (
    Field, HeaderMap, GROUP_FIELDS, GROUPING_FIELDS)
from group_importer.exceptions import (
    InvalidFieldException, MissingFieldException, DuplicateFieldException,
    MissingFieldValueException)


class FieldTest(TestCase):
    def test_matches(self):
        field = Field('description', [r'^desc$'])
        self.assertTrue(field.matches('desc'))
        self.assertTrue(field.matches('DESC'))
        self.assertFalse(field.matches('descr'))
        self.assertFalse(Field('picture').matches('picture'))


class GroupHeaderTest(TestCase):
    def setUp(self):
        self.header_map = HeaderMap(GROUP_FIELDS)

    def test_canonical_names(self):
        self.assertEqual(self.header_map.normalize(
            ['groupname', 'coursename', 'idnumber', 'groupidnumber',
             'description', 'enrolmentkey', 'groupingname',
             'enablemessaging', 'picture', 'hidepicture', 'member']),
            [f.name for f in GROUP_FIELDS])

    def test_alternative_names(self):
        self.assertEqual(self.header_map.canonical_name('Group Name'),
                         'groupname')
        self.assertEqual(self.header_map.canonical_name('GROUP'),
                         'groupname')
        self.assertEqual(self.header_map.canonical_name('Student ID'),
                         'idnumber')
        self.assertEqual(self.header_map.canonical_name('Desc'),
                         'description')
        self.assertEqual(self.header_map.canonical_name('enrol key'),
                         'enrolmentkey')
        self.assertEqual(self.header_map.canonical_name('Username'),
                         'member')
        self.assertEqual(self.header_map.canonical_name('Login Name'),
                         'member')
        self.assertEqual(self.header_map.canonical_name(' "group" '),
                         'groupname')

    def test_first_match_wins(self):
        # Also matches the '^user' member pattern
        self.assertEqual(self.header_map.canonical_name('User ID'),
                         'idnumber')
        self.assertEqual(self.header_map.canonical_name('userid'),
                         'idnumber')
        self.assertEqual(self.header_map.canonical_name('user_login'),
                         'member')

    def test_invalid_field(self):
        with self.assertRaises(InvalidFieldException) as cm:
            self.header_map.normalize(['group', 'email', 'phone'])
        self.assertEqual(cm.exception.fields, ['email', 'phone'])

    def test_missing_field(self):
        with self.assertRaises(MissingFieldException) as cm:
            self.header_map.normalize(['member', 'groupingname'])
        self.assertEqual(cm.exception.fields, ['groupname'])

    def test_duplicate_field(self):
        with self.assertRaises(DuplicateFieldException) as cm:
            self.header_map.normalize(['group', 'Group Name'])
        self.assertEqual(cm.exception.fields, ['groupname'])

    def test_records(self):
        records = self.header_map.records(
            ['Group Name', 'Username', 'desc'],
            [[' Alpha ', 'javerage ', ''], ['Beta', '', 'Second']])
        self.assertEqual(records, [
            {'groupname': 'Alpha', 'member': 'javerage', 'description': ''},
            {'groupname': 'Beta', 'member': '', 'description': 'Second'},
        ])

    def test_records_missing_value(self):
        with self.assertRaises(MissingFieldValueException) as cm:
            self.header_map.records(
                ['groupname', 'member'],
                [['Alpha', 'javerage'], ['  ', 'bill']])
        self.assertEqual(cm.exception.fields, ['groupname'])
        self.assertEqual(cm.exception.line, 3)


class GroupingHeaderTest(TestCase):
    def test_normalize(self):
        header_map = HeaderMap(GROUPING_FIELDS)
        self.assertEqual(header_map.normalize(['grouping', 'Group']),
                         ['grouping', 'groupname'])
        self.assertRaises(MissingFieldException, header_map.normalize,
                          ['groupname'])
        self.assertRaises(InvalidFieldException, header_map.normalize,
                          ['grouping', 'member'])
