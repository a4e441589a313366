# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.urls import reverse
from group_importer.models import Course, Import
from group_importer.forms import ImportForm
from group_importer.importers.groups import GroupImporter
from group_importer.importers.groupings import GroupingImporter
from group_importer.exceptions import ImportException
from group_importer.views import RESTDispatch, import_context
from logging import getLogger

logger = getLogger(__name__)


class CourseImportView(RESTDispatch):
    """ Imports an uploaded csv file into a course.
        POST returns 200 with the notifications for every row, 400 for
        an unreadable file, or 404 for an unknown course.
    """
    importer_class = None
    return_url_name = None

    def post(self, request, *args, **kwargs):
        course_id = kwargs['course_id']
        try:
            course = Course.objects.get(pk=course_id)
        except Course.DoesNotExist:
            return self.error_response(
                404, 'Course {} not found'.format(course_id))

        form = ImportForm(request.POST, request.FILES)
        if not form.is_valid():
            return self.error_response(
                400, 'Invalid upload',
                content={'errors': form.errors.get_json_data()})

        importer = self.importer_class(import_context(request, course))
        logger.info('imports ({}): POST: {} import for {}'.format(
            importer.context.added_by, importer.csv_type, course))

        try:
            imp = importer.import_content(
                form.content(),
                encoding=form.cleaned_data['encoding'],
                delimiter_name=form.cleaned_data['delimiter_name'])
        except ImportException as err:
            return self.error_response(400, '{}: {}'.format(
                err.__class__.__name__, err))

        return self.json_response({
            'import': imp.json_data(),
            'rows': [result.json_data() for result in importer.results],
            'return_url': reverse(self.return_url_name,
                                  kwargs={'course_id': course.pk}),
        })


class GroupImportView(CourseImportView):
    importer_class = GroupImporter
    return_url_name = 'CourseGroups'


class GroupingImportView(CourseImportView):
    importer_class = GroupingImporter
    return_url_name = 'CourseGroupings'


class ImportView(RESTDispatch):
    """ Retrieves an Import model at /api/v1/import/<import_id>.
        GET returns 200 with Import details and row notifications.
    """
    def get(self, request, *args, **kwargs):
        import_id = kwargs['import_id']
        try:
            imp = Import.objects.get(pk=import_id)
        except Import.DoesNotExist:
            return self.error_response(
                404, 'Import {} not found'.format(import_id))

        json_rep = imp.json_data()
        json_rep['rows'] = imp.get_results()
        return self.json_response(json_rep)
