# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.db import transaction, IntegrityError, DatabaseError
from group_importer.models import Enrollment
from group_importer.models.group import (
    Group, GroupMember, Grouping, GroupingGroup)
from group_importer.exceptions import (
    GroupExistsException, GroupCreateException, GroupingExistsException,
    GroupingCreateException, GroupingAssignedException,
    GroupingAssignException, MembershipException, MembershipExistsException,
    UserNotEnrolledException)
from logging import getLogger

logger = getLogger(__name__)

GROUP_NAME_MAX_LENGTH = Group._meta.get_field('name').max_length
GROUPING_NAME_MAX_LENGTH = Grouping._meta.get_field('name').max_length


def valid_group_name(name, max_length=GROUP_NAME_MAX_LENGTH):
    if not name or not name.strip():
        raise GroupCreateException('Missing group name')

    if len(name) > max_length:
        raise GroupCreateException(
            'Name exceeds {} characters: {}'.format(max_length, name))


def get_group_by_name(course, name):
    return Group.objects.find_by_name(course, name).first()


def get_group_by_idnumber(course, idnumber):
    if not idnumber:
        return None
    return Group.objects.find_by_idnumber(course, idnumber).first()


def create_group(course, name, added_by='', **kwargs):
    """
    Creates a group in the passed course.  A group with the same name
    created by a concurrent import raises GroupExistsException.
    """
    valid_group_name(name)
    try:
        with transaction.atomic():
            return Group.objects.create(
                course=course, name=name, added_by=added_by, **kwargs)

    except IntegrityError as ex:
        if get_group_by_name(course, name) is not None:
            raise GroupExistsException(name)
        raise GroupCreateException('{}: {}'.format(name, ex))

    except DatabaseError as ex:
        logger.error('Create group {} failed: {}'.format(name, ex))
        raise GroupCreateException('{}: {}'.format(name, ex))


def get_grouping_by_name(course, name):
    return Grouping.objects.find_by_name(course, name).first()


def create_grouping(course, name, description=''):
    try:
        valid_group_name(name, max_length=GROUPING_NAME_MAX_LENGTH)
    except GroupCreateException as ex:
        raise GroupingCreateException(ex)

    try:
        with transaction.atomic():
            return Grouping.objects.create(
                course=course, name=name, description=description)

    except IntegrityError as ex:
        if get_grouping_by_name(course, name) is not None:
            raise GroupingExistsException(name)
        raise GroupingCreateException('{}: {}'.format(name, ex))

    except DatabaseError as ex:
        logger.error('Create grouping {} failed: {}'.format(name, ex))
        raise GroupingCreateException('{}: {}'.format(name, ex))


def is_grouping_member(grouping, group):
    return GroupingGroup.objects.filter(
        grouping=grouping, group=group).exists()


def assign_grouping(grouping, group):
    if grouping.course_id != group.course_id:
        raise GroupingAssignException(
            'Group {} is not in the grouping course'.format(group.name))

    if is_grouping_member(grouping, group):
        raise GroupingAssignedException(
            '{} in {}'.format(group.name, grouping.name))

    try:
        with transaction.atomic():
            return GroupingGroup.objects.create(
                grouping=grouping, group=group)

    except IntegrityError:
        raise GroupingAssignedException(
            '{} in {}'.format(group.name, grouping.name))

    except DatabaseError as ex:
        logger.error('Assign group {} to {} failed: {}'.format(
            group.name, grouping.name, ex))
        raise GroupingAssignException(ex)


def is_member(group, user):
    return GroupMember.objects.is_member(group, user)


def is_enrolled(course, user):
    return Enrollment.objects.is_enrolled(course, user)


def add_member(group, user):
    """
    Adds the passed user to the group. Only users enrolled in the group
    course can be members.
    """
    if not is_enrolled(group.course, user):
        raise UserNotEnrolledException(
            '{} not enrolled in {}'.format(user.username, group.course))

    try:
        with transaction.atomic():
            return GroupMember.objects.create(group=group, user=user)

    except IntegrityError:
        raise MembershipExistsException(
            '{} in {}'.format(user.username, group.name))

    except DatabaseError as ex:
        logger.error('Add member {} to {} failed: {}'.format(
            user.username, group.name, ex))
        raise MembershipException(ex)
