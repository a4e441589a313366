# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from group_importer.importers import Importer
from group_importer.importers.messages import (
    DUPLICATE_IDNUMBER, NO_PERMISSION_FOR_CREATION, USER_NOT_FOUND,
    USERNAME_ID_MISMATCH, AMBIGUOUS_USER, PERMISSION_DENIED, ALREADY_MEMBER,
    NOT_ENROLLED, MEMBERSHIP_ADD_FAILED, MEMBERSHIP_ADDED)
from group_importer.csv.header import GROUP_FIELDS
from group_importer.dao.group import (
    get_group_by_idnumber, is_member, add_member)
from group_importer.dao.user import get_users
from group_importer.exceptions import (
    MembershipException, MembershipExistsException, UserNotEnrolledException)

TRUE_VALUES = ('1', 'y', 'yes', 'true', 't', 'on')


def parse_bool(value):
    return (value or '').strip().lower() in TRUE_VALUES


def parse_int(value):
    try:
        return int((value or '').strip())
    except ValueError:
        return 0


class GroupImporter(Importer):
    """
    Imports groups from records with a groupname, optionally adding a
    member (by username in 'member' and/or user ID number in 'idnumber')
    and assigning the group to the grouping in 'groupingname'. The
    'coursename' column is accepted but the import course is always the
    course in the import context.
    """
    csv_type = 'group'
    fields = GROUP_FIELDS

    def _process(self, result, record):
        name = record.get('groupname')
        if not name:
            return

        if not self.context.can_manage_groups:
            result.add(NO_PERMISSION_FOR_CREATION, group=name)
            return

        group = self.resolve_group(result, record)
        if group is None:
            return

        username = record.get('member')
        idnumber = record.get('idnumber')
        if username or idnumber:
            self.add_membership(result, group, username, idnumber)

        grouping_name = record.get('groupingname')
        if grouping_name:
            grouping = self.find_or_create_grouping(
                result, grouping_name, report_existing=False)
            if grouping is not None:
                self.add_group_to_grouping(result, grouping, group)

    def resolve_group(self, result, record):
        name = record['groupname']
        kwargs = self.group_attributes(record)

        # The group ID number is only set if permitted and not already
        # used by a group in the course
        idnumber = record.get('groupidnumber', '').strip()
        if idnumber and self.context.can_change_idnumber:
            existing = get_group_by_idnumber(self.context.course, idnumber)
            if existing is None:
                kwargs['idnumber'] = idnumber
            else:
                result.add(DUPLICATE_IDNUMBER, group=existing.name,
                           idnumber=existing.idnumber, problem_group=name)

        return self.find_or_create_group(result, name, **kwargs)

    @staticmethod
    def group_attributes(record):
        kwargs = {}
        if record.get('description'):
            kwargs['description'] = record['description']
        if record.get('enrolmentkey'):
            kwargs['enrolment_key'] = record['enrolmentkey']
        if 'enablemessaging' in record:
            kwargs['enable_messaging'] = parse_bool(record['enablemessaging'])
        if 'picture' in record:
            kwargs['picture'] = parse_int(record['picture'])
        if 'hidepicture' in record:
            kwargs['hide_picture'] = parse_bool(record['hidepicture'])
        return kwargs

    def add_membership(self, result, group, username=None, idnumber=None):
        users = get_users(username=username, idnumber=idnumber)

        if not len(users):
            if username and idnumber:
                result.add(USERNAME_ID_MISMATCH, user=username,
                           idnumber=idnumber)
            else:
                result.add(USER_NOT_FOUND, user=username or idnumber)
            return

        if len(users) > 1:
            result.add(AMBIGUOUS_USER, user=username or idnumber,
                       names=' '.join("'{}'".format(
                           u.username) for u in users))
            return

        user = users[0]
        if not self.context.can_manage_members:
            result.add(PERMISSION_DENIED, user=user.username,
                       group=group.name)

        elif is_member(group, user):
            result.add(ALREADY_MEMBER, user=user.username, group=group.name)

        else:
            try:
                add_member(group, user)
                result.add(MEMBERSHIP_ADDED, user=user.username,
                           group=group.name)

            except UserNotEnrolledException:
                result.add(NOT_ENROLLED, user=user.username)

            except MembershipExistsException:
                result.add(ALREADY_MEMBER, user=user.username,
                           group=group.name)

            except MembershipException as ex:
                self.logger.info('Skip member {} in group {}: {}'.format(
                    user.username, group.name, ex))
                result.add(MEMBERSHIP_ADD_FAILED, user=user.username,
                           group=group.name)
