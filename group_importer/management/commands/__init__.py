# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from group_importer.models import Course
from group_importer.importers import ImportContext
from group_importer.csv.reader import (
    get_delimiter_list, default_delimiter_name, DEFAULT_ENCODING)
from group_importer.exceptions import ImportException


class ImportCommand(BaseCommand):
    importer_class = None

    def add_arguments(self, parser):
        parser.add_argument(
            'course', help='Course short name or id to import into')
        parser.add_argument('path', help='Path to the csv file')
        parser.add_argument(
            '--delimiter', dest='delimiter_name', default=None,
            choices=sorted(get_delimiter_list()),
            help='Field delimiter name')
        parser.add_argument(
            '--encoding', default=DEFAULT_ENCODING,
            help='Character encoding of the csv file')
        parser.add_argument(
            '--added-by', dest='added_by', default='',
            help='Username recorded as the importer')
        parser.add_argument(
            '--no-idnumber', dest='idnumber', action='store_false',
            help='Ignore group ID numbers in the csv file')

    def handle(self, *args, **options):
        course = self.get_course(options['course'])

        try:
            with open(options['path'], 'rb') as f:
                content = f.read()
        except OSError as ex:
            raise CommandError('Cannot read {}: {}'.format(
                options['path'], ex))

        context = ImportContext(
            course, options['added_by'] or 'manage.py',
            can_change_idnumber=options['idnumber'],
            language=settings.LANGUAGE_CODE)
        importer = self.importer_class(context)

        try:
            imp = importer.import_content(
                content, encoding=options['encoding'],
                delimiter_name=(options['delimiter_name'] or
                                default_delimiter_name()))
        except ImportException as ex:
            raise CommandError('{}: {}'.format(ex.__class__.__name__, ex))

        for result in importer.results:
            for notification in result.notifications:
                self.stdout.write('Row {}: [{}] {}'.format(
                    result.row, notification.status, notification.message))

        self.stdout.write('Import {}: {} rows'.format(imp.pk, imp.row_count))

    def get_course(self, value):
        try:
            return Course.objects.get(short_name=value)
        except Course.DoesNotExist:
            pass

        try:
            return Course.objects.get(pk=int(value))
        except (ValueError, Course.DoesNotExist):
            raise CommandError('Course not found: {}'.format(value))
