# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.urls import re_path
from group_importer.views.group import GroupListView, GroupingListView
from group_importer.views.imports import (
    GroupImportView, GroupingImportView, ImportView)

urlpatterns = [
    re_path(r'api/v1/course/(?P<course_id>[0-9]+)/groups$',
            GroupListView.as_view(), name='CourseGroups'),
    re_path(r'api/v1/course/(?P<course_id>[0-9]+)/groupings$',
            GroupingListView.as_view(), name='CourseGroupings'),
    re_path(r'api/v1/course/(?P<course_id>[0-9]+)/groups/import$',
            GroupImportView.as_view(), name='GroupImport'),
    re_path(r'api/v1/course/(?P<course_id>[0-9]+)/groupings/import$',
            GroupingImportView.as_view(), name='GroupingImport'),
    re_path(r'api/v1/import/(?P<import_id>[0-9]+)$',
            ImportView.as_view(), name='ImportInfo'),
]
