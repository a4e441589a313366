# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

"""
Contains the custom exceptions used by group_importer.
"""


class ImportException(Exception):
    pass


# Fatal, raised before any record is processed
class ImportFileException(ImportException):
    pass


class EmptyFileException(ImportFileException):
    pass


class NoDataException(ImportFileException):
    pass


class UnreadableContentException(ImportFileException):
    pass


class ImportHeaderException(ImportException):
    def __init__(self, fields):
        self.fields = list(fields)
        super(ImportHeaderException, self).__init__(', '.join(self.fields))


class InvalidFieldException(ImportHeaderException):
    pass


class MissingFieldException(ImportHeaderException):
    pass


class DuplicateFieldException(ImportHeaderException):
    pass


class MissingFieldValueException(ImportHeaderException):
    def __init__(self, fields, line):
        self.line = line
        super(MissingFieldValueException, self).__init__(fields)


# Persistence failures, reported per record
class GroupPolicyException(Exception):
    pass


class GroupExistsException(GroupPolicyException):
    pass


class GroupCreateException(GroupPolicyException):
    pass


class GroupingExistsException(GroupPolicyException):
    pass


class GroupingCreateException(GroupPolicyException):
    pass


class GroupingAssignedException(GroupPolicyException):
    pass


class GroupingAssignException(GroupPolicyException):
    pass


class MembershipException(Exception):
    pass


class UserNotEnrolledException(MembershipException):
    pass


class MembershipExistsException(MembershipException):
    pass
