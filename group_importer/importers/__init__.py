# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.conf import settings
from django.utils import translation
from group_importer.models import Import
from group_importer.csv.header import HeaderMap
from group_importer.csv.reader import read_csv_content, DEFAULT_ENCODING
from group_importer.dao.group import (
    get_group_by_name, create_group, get_grouping_by_name, create_grouping,
    assign_grouping)
from group_importer.exceptions import (
    ImportException, GroupExistsException, GroupCreateException,
    GroupingExistsException, GroupingCreateException,
    GroupingAssignedException, GroupingAssignException)
from group_importer.importers.messages import (
    MESSAGES, ERROR, GROUP_CREATED, GROUP_EXISTS, GROUP_CREATE_FAILED,
    GROUPING_CREATED, GROUPING_EXISTS, GROUPING_CREATE_FAILED,
    GROUPING_ASSIGNED, ALREADY_ASSOCIATED, ASSOCIATION_FAILED)
from prometheus_client import Counter
from logging import getLogger

logger = getLogger(__name__)
prometheus_import_notifications = Counter(
    'group_import_notification_count',
    'Group Import Notification Counter',
    ['tag'])


class ImportContext(object):
    """
    The course and caller permissions an import runs with.
    """
    def __init__(self, course, added_by, can_manage_groups=True,
                 can_manage_members=None, can_change_idnumber=True,
                 language=None):
        self.course = course
        self.added_by = added_by
        self.can_manage_groups = can_manage_groups
        self.can_manage_members = can_manage_groups if (
            can_manage_members is None) else can_manage_members
        self.can_change_idnumber = can_change_idnumber
        self.language = language or settings.LANGUAGE_CODE


class Notification(object):
    def __init__(self, tag, status, message):
        self.tag = tag
        self.status = status
        self.message = message

    def json_data(self):
        return {
            'tag': self.tag,
            'status': self.status,
            'message': self.message,
        }

    def __str__(self):
        return self.message


class RowResult(object):
    """
    The ordered notifications for one imported record.
    """
    def __init__(self, row, record):
        self.row = row
        self.record = record
        self.notifications = []

    def add(self, key, **kwargs):
        (tag, status, message) = MESSAGES[key]
        notification = Notification(tag, status, str(message).format(
            **kwargs))
        self.notifications.append(notification)
        prometheus_import_notifications.labels(tag).inc()
        return notification

    @property
    def tags(self):
        return [n.tag for n in self.notifications]

    def has_errors(self):
        return any(n.status == ERROR for n in self.notifications)

    def json_data(self):
        return {
            'row': self.row,
            'notifications': [n.json_data() for n in self.notifications],
        }


class Importer(object):
    csv_type = None
    fields = ()

    def __init__(self, context):
        self.context = context
        self.results = []
        self.logger = getLogger(__name__)

    def _process(self, result, record):
        raise NotImplementedError

    def read_records(self, content, encoding=DEFAULT_ENCODING,
                     delimiter_name='comma'):
        (header, lines) = read_csv_content(
            content, encoding=encoding, delimiter_name=delimiter_name)
        return HeaderMap(self.fields).records(header, lines)

    def import_content(self, content, encoding=DEFAULT_ENCODING,
                       delimiter_name='comma'):
        """
        Reads and imports uploaded csv content. Header and file errors are
        recorded on an Import and raised before any record is processed.
        """
        try:
            records = self.read_records(
                content, encoding=encoding, delimiter_name=delimiter_name)
        except ImportException as ex:
            imp = self._new_import(encoding, delimiter_name)
            imp.csv_errors = '{}: {}'.format(ex.__class__.__name__, ex)
            imp.save()
            self.logger.info('Import {} for {} failed: {}'.format(
                self.csv_type, self.context.course, imp.csv_errors))
            raise

        return self.run(
            records, encoding=encoding, delimiter_name=delimiter_name)

    def run(self, records, encoding=None, delimiter_name=None):
        self.results = []
        with translation.override(self.context.language):
            for row, record in enumerate(records, start=1):
                result = RowResult(row, record)
                self._process(result, record)
                self.results.append(result)

        imp = self._new_import(encoding, delimiter_name)
        imp.set_results(self.results)
        imp.save()

        self.logger.info('Import {} for {} by {}: {} rows'.format(
            self.csv_type, self.context.course, self.context.added_by,
            len(self.results)))
        return imp

    def _new_import(self, encoding, delimiter_name):
        return Import(csv_type=self.csv_type,
                      course=self.context.course,
                      added_by=self.context.added_by,
                      encoding=encoding,
                      delimiter=delimiter_name)

    def find_or_create_group(self, result, name, **kwargs):
        """
        Returns the named group in the import course, creating it if
        necessary, or None if it cannot be created.
        """
        course = self.context.course
        group = get_group_by_name(course, name)
        if group is not None:
            result.add(GROUP_EXISTS, group=name)
            return group

        try:
            group = create_group(
                course, name, added_by=self.context.added_by, **kwargs)
            result.add(GROUP_CREATED, group=name)

        except GroupExistsException:
            group = get_group_by_name(course, name)
            result.add(GROUP_EXISTS, group=name)

        except GroupCreateException as ex:
            self.logger.info('Skip group {} in {}: {}'.format(
                name, course, ex))
            result.add(GROUP_CREATE_FAILED, group=name)
            return None

        return group

    def find_or_create_grouping(self, result, name, report_existing=True):
        course = self.context.course
        grouping = get_grouping_by_name(course, name)
        if grouping is not None:
            if report_existing:
                result.add(GROUPING_EXISTS, grouping=name)
            return grouping

        try:
            grouping = create_grouping(course, name)
            result.add(GROUPING_CREATED, grouping=name)

        except GroupingExistsException:
            grouping = get_grouping_by_name(course, name)
            if report_existing:
                result.add(GROUPING_EXISTS, grouping=name)

        except GroupingCreateException as ex:
            self.logger.info('Skip grouping {} in {}: {}'.format(
                name, course, ex))
            result.add(GROUPING_CREATE_FAILED, grouping=name)
            return None

        return grouping

    def add_group_to_grouping(self, result, grouping, group):
        try:
            assign_grouping(grouping, group)
            result.add(GROUPING_ASSIGNED, group=group.name,
                       grouping=grouping.name)

        except GroupingAssignedException:
            result.add(ALREADY_ASSOCIATED, group=group.name,
                       grouping=grouping.name)

        except GroupingAssignException as ex:
            self.logger.info('Skip group {} in grouping {}: {}'.format(
                group.name, grouping.name, ex))
            result.add(ASSOCIATION_FAILED, group=group.name,
                       grouping=grouping.name)
