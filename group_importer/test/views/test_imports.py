# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.conf import settings
from django.test import TestCase, RequestFactory, override_settings
from django.contrib.auth.models import User as DjangoUser
from django.contrib.sessions.middleware import SessionMiddleware
from django.core.files.uploadedfile import SimpleUploadedFile
from group_importer.models import Import
from group_importer.models.group import Group, Grouping
from group_importer.views.imports import (
    GroupImportView, GroupingImportView, ImportView)
from group_importer.views.group import GroupListView, GroupingListView
from group_importer.test import create_course, create_user, enroll
import json
import mock


@override_settings(
    GROUP_IMPORT_MANAGER_GROUP='u_test_group',
    GROUP_IMPORT_IDNUMBER_GROUP='u_test_group',
    MOCK_SAML_ATTRIBUTES={
        'uwnetid': ['javerage'],
        'isMemberOf': ['u_test_group']})
class ImportViewTest(TestCase):
    def setUp(self):
        self.course = create_course()
        self.user = create_user('bill', idnumber='1000002')
        self.admin = DjangoUser.objects.create_user(username='javerage')
        enroll(self.course, self.user)

    def _request(self, method='post', data=None):
        request = getattr(RequestFactory(), method)('/', data or {})
        get_response = mock.MagicMock()
        middleware = SessionMiddleware(get_response)
        response = middleware(request)
        request.user = self.admin
        request.session['samlUserdata'] = settings.MOCK_SAML_ATTRIBUTES
        request.session.save()
        return request

    def _upload(self, content, **kwargs):
        data = {'userfile': SimpleUploadedFile('groups.csv', content),
                'delimiter_name': 'comma',
                'encoding': 'UTF-8'}
        data.update(kwargs)
        return self._request(data=data)

    def test_group_import(self):
        request = self._upload(
            b'groupname,member,groupingname,groupidnumber\n'
            b'Alpha,bill,G1,A1\n'
            b'Beta,nobody,G1,\n')
        response = GroupImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 200)

        data = json.loads(response.content)
        self.assertEqual(data['import']['type'], 'group')
        self.assertEqual(data['import']['row_count'], 2)
        self.assertEqual(data['return_url'], '/api/v1/course/{}/groups'.format(
            self.course.pk))
        self.assertEqual(
            [n['tag'] for n in data['rows'][0]['notifications']],
            ['group-created', 'membership-added', 'grouping-created',
             'grouping-assigned'])
        self.assertEqual(
            [n['tag'] for n in data['rows'][1]['notifications']],
            ['group-created', 'user-not-found', 'grouping-assigned'])

        self.assertEqual(Group.objects.get(name='Alpha').idnumber, 'A1')
        self.assertEqual(Group.objects.get(name='Alpha').added_by, 'javerage')

    @override_settings(GROUP_IMPORT_IDNUMBER_GROUP='u_idnumber_managers')
    def test_group_import_without_idnumber(self):
        request = self._upload(b'group,groupidnumber\nAlpha,A1\n')
        response = GroupImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(Group.objects.get(name='Alpha').idnumber, '')

    @override_settings(GROUP_IMPORT_MANAGER_GROUP='u_group_managers')
    def test_group_import_no_permission(self):
        request = self._upload(b'group\nAlpha\n')
        response = GroupImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 200)

        data = json.loads(response.content)
        self.assertEqual(data['rows'][0]['notifications'][0]['tag'],
                         'no-permission-for-creation')
        self.assertEqual(Group.objects.count(), 0)

    def test_group_import_semicolon(self):
        request = self._upload(b'Group Name;Username\nAlpha;bill\n',
                               delimiter_name='semicolon')
        response = GroupImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(Group.objects.count(), 1)

    def test_group_import_invalid_file(self):
        request = self._upload(b'groupname,email\nAlpha,a@example.edu\n')
        response = GroupImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(json.loads(response.content)['error'],
                         'InvalidFieldException: email')

        request = self._upload(b'groupname\n')
        response = GroupImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Group.objects.count(), 0)

    def test_group_import_invalid_upload(self):
        request = self._request(data={'delimiter_name': 'comma'})
        response = GroupImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 400)

        data = json.loads(response.content)
        self.assertEqual(data['error'], 'Invalid upload')
        self.assertIn('userfile', data['errors'])

        request = self._upload(b'group\nAlpha\n', delimiter_name='pipe')
        response = GroupImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 400)

    @override_settings(GROUP_IMPORT_MAX_UPLOAD_SIZE=10)
    def test_group_import_too_large(self):
        request = self._upload(b'group\nAlpha\nBeta\nGamma\n')
        response = GroupImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 400)

    def test_unknown_course(self):
        request = self._upload(b'group\nAlpha\n')
        response = GroupImportView.as_view()(request, course_id='9999')
        self.assertEqual(response.status_code, 404)

    def test_grouping_import(self):
        request = self._upload(b'grouping,groupname\nG1,Alpha\nG1,Beta\n')
        response = GroupingImportView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 200)

        data = json.loads(response.content)
        self.assertEqual(data['import']['type'], 'grouping')
        self.assertEqual(data['return_url'],
                         '/api/v1/course/{}/groupings'.format(self.course.pk))
        self.assertEqual(Grouping.objects.get(name='G1').groups.count(), 2)

    def test_import_get(self):
        request = self._upload(b'group\nAlpha\n')
        GroupImportView.as_view()(request, course_id=str(self.course.pk))
        imp = Import.objects.get(course=self.course)

        request = self._request(method='get')
        response = ImportView.as_view()(request, import_id=str(imp.pk))
        self.assertEqual(response.status_code, 200)

        data = json.loads(response.content)
        self.assertEqual(data['import_id'], imp.pk)
        self.assertEqual(data['rows'][0]['notifications'][0]['tag'],
                         'group-created')

        response = ImportView.as_view()(request, import_id='9999')
        self.assertEqual(response.status_code, 404)

    def test_group_list(self):
        request = self._upload(b'group,member,groupingname\nAlpha,bill,G1\n')
        GroupImportView.as_view()(request, course_id=str(self.course.pk))

        request = self._request(method='get')
        response = GroupListView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 200)

        data = json.loads(response.content)
        self.assertEqual(data['course']['short_name'], 'TRAIN 101')
        self.assertEqual(data['groups'][0]['name'], 'Alpha')
        self.assertEqual(data['groups'][0]['members'], ['bill'])

        response = GroupingListView.as_view()(
            request, course_id=str(self.course.pk))
        self.assertEqual(response.status_code, 200)

        data = json.loads(response.content)
        self.assertEqual(data['groupings'][0]['name'], 'G1')
        self.assertEqual(data['groupings'][0]['groups'], ['Alpha'])

        response = GroupListView.as_view()(request, course_id='9999')
        self.assertEqual(response.status_code, 404)
