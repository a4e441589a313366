# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.utils.translation import gettext_lazy as _

SUCCESS = 'success'
WARNING = 'warning'
ERROR = 'error'

# Notification tags
GROUP_CREATED = 'group-created'
GROUP_EXISTS = 'group-exists'
GROUP_CREATE_FAILED = 'group-create-failed'
DUPLICATE_IDNUMBER = 'duplicate-idnumber'
NO_PERMISSION_FOR_CREATION = 'no-permission-for-creation'
USER_NOT_FOUND = 'user-not-found'
AMBIGUOUS_USER = 'ambiguous-user'
PERMISSION_DENIED = 'permission-denied'
ALREADY_MEMBER = 'already-member'
NOT_ENROLLED = 'not-enrolled'
MEMBERSHIP_ADD_FAILED = 'membership-add-failed'
MEMBERSHIP_ADDED = 'membership-added'
GROUPING_CREATED = 'grouping-created'
GROUPING_EXISTS = 'grouping-exists'
GROUPING_CREATE_FAILED = 'grouping-create-failed'
GROUPING_ASSIGNED = 'grouping-assigned'
ALREADY_ASSOCIATED = 'already-associated'
ASSOCIATION_FAILED = 'association-failed'

# Message keys that share a tag with another message
USERNAME_ID_MISMATCH = 'username-id-mismatch'
GROUPING_NO_PERMISSION = 'grouping-no-permission'

MESSAGES = {
    GROUP_CREATED: (
        GROUP_CREATED, SUCCESS,
        _('Group "{group}" added successfully')),
    GROUP_EXISTS: (
        GROUP_EXISTS, SUCCESS,
        _('Group "{group}" already exists')),
    GROUP_CREATE_FAILED: (
        GROUP_CREATE_FAILED, ERROR,
        _('Group "{group}" could not be added')),
    DUPLICATE_IDNUMBER: (
        DUPLICATE_IDNUMBER, WARNING,
        _('Group "{group}" already uses ID number "{idnumber}", '
          'group "{problem_group}" will be added without it')),
    NO_PERMISSION_FOR_CREATION: (
        NO_PERMISSION_FOR_CREATION, ERROR,
        _('Cannot add group "{group}": you do not have permission to '
          'manage groups in this course')),
    GROUPING_NO_PERMISSION: (
        NO_PERMISSION_FOR_CREATION, ERROR,
        _('Cannot add grouping "{grouping}": you do not have permission to '
          'manage groups in this course')),
    USER_NOT_FOUND: (
        USER_NOT_FOUND, WARNING,
        _('User "{user}" not found, skipping membership')),
    USERNAME_ID_MISMATCH: (
        USER_NOT_FOUND, WARNING,
        _('No user has both username "{user}" and ID number "{idnumber}", '
          'skipping membership')),
    AMBIGUOUS_USER: (
        AMBIGUOUS_USER, WARNING,
        _('More than one user matches "{user}": {names}')),
    PERMISSION_DENIED: (
        PERMISSION_DENIED, ERROR,
        _('You do not have permission to add "{user}" to group "{group}"')),
    ALREADY_MEMBER: (
        ALREADY_MEMBER, WARNING,
        _('User "{user}" is already a member of group "{group}"')),
    NOT_ENROLLED: (
        NOT_ENROLLED, ERROR,
        _('User "{user}" is not enrolled in this course')),
    MEMBERSHIP_ADD_FAILED: (
        MEMBERSHIP_ADD_FAILED, ERROR,
        _('User "{user}" could not be added to group "{group}"')),
    MEMBERSHIP_ADDED: (
        MEMBERSHIP_ADDED, SUCCESS,
        _('User "{user}" added to group "{group}"')),
    GROUPING_CREATED: (
        GROUPING_CREATED, SUCCESS,
        _('Grouping "{grouping}" added successfully')),
    GROUPING_EXISTS: (
        GROUPING_EXISTS, SUCCESS,
        _('Grouping "{grouping}" already exists')),
    GROUPING_CREATE_FAILED: (
        GROUPING_CREATE_FAILED, ERROR,
        _('Grouping "{grouping}" could not be added')),
    GROUPING_ASSIGNED: (
        GROUPING_ASSIGNED, SUCCESS,
        _('Group "{group}" added to grouping "{grouping}"')),
    ALREADY_ASSOCIATED: (
        ALREADY_ASSOCIATED, WARNING,
        _('Group "{group}" is already in grouping "{grouping}"')),
    ASSOCIATION_FAILED: (
        ASSOCIATION_FAILED, ERROR,
        _('Group "{group}" could not be added to grouping "{grouping}"')),
}
