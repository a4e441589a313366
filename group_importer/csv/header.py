# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from group_importer.exceptions import (
    InvalidFieldException, MissingFieldException, DuplicateFieldException,
    MissingFieldValueException)
import re

HEADER_STRIP_CHARS = ' "\''


class Field(object):
    def __init__(self, name, patterns=None, required=False):
        self.name = name
        self.required = required
        self.patterns = [re.compile(p, re.I) for p in (patterns or [])]

    def matches(self, header):
        for pattern in self.patterns:
            if pattern.search(header):
                return True
        return False


GROUP_FIELDS = (
    Field('groupname', [r'^group$', r'^group name$'], required=True),
    Field('coursename'),
    Field('idnumber', [r'^id number$', r'^studentid$', r'^student id$',
                       r'^user id$', r'^userid$']),
    Field('groupidnumber'),
    Field('description', [r'^desc$']),
    Field('enrolmentkey', [r'^enrolment key$', r'^enrolkey$',
                           r'^enrol key$']),
    Field('groupingname'),
    Field('enablemessaging'),
    Field('picture'),
    Field('hidepicture'),
    Field('member', [r'^user', r'^username$', r'^login$', r'^login name$']),
)

GROUPING_FIELDS = (
    Field('grouping', required=True),
    Field('groupname', [r'^group$', r'^group name$']),
)


class HeaderMap(object):
    """
    Maps the header labels of an uploaded file to canonical field names.
    """
    def __init__(self, fields):
        self.fields = fields
        self.field_names = [f.name for f in fields]
        self.required = [f.name for f in fields if f.required]

    def canonical_name(self, header):
        header = header.strip(HEADER_STRIP_CHARS)
        if header in self.field_names:
            return header

        for field in self.fields:
            if field.matches(header):
                return field.name

        return header

    def normalize(self, headers):
        names = [self.canonical_name(h) for h in headers]

        invalid = [n for n in names if n not in self.field_names]
        if len(invalid):
            raise InvalidFieldException(invalid)

        missing = [n for n in self.required if n not in names]
        if len(missing):
            raise MissingFieldException(missing)

        duplicates = []
        for name in names:
            if names.count(name) > 1 and name not in duplicates:
                duplicates.append(name)
        if len(duplicates):
            raise DuplicateFieldException(duplicates)

        return names

    def records(self, headers, lines):
        """
        Returns a list of dicts of canonical field name to trimmed value.
        Every line is checked for required values before any is returned.
        """
        names = self.normalize(headers)

        records = []
        for idx, line in enumerate(lines, start=2):
            record = {}
            for name, value in zip(names, line):
                record[name] = value.strip()

            empty = [n for n in self.required if not record.get(n)]
            if len(empty):
                raise MissingFieldValueException(empty, idx)

            records.append(record)

        return records
