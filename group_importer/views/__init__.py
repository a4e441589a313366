# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.conf import settings
from django.http import HttpResponse
from django.utils import translation
from django.utils.decorators import method_decorator
from django.views import View
from uw_saml.decorators import group_required
from uw_saml.utils import get_user, is_member_of_group
from group_importer.importers import ImportContext
import json


def can_manage_groups(request):
    return is_member_of_group(
        request, getattr(settings, 'GROUP_IMPORT_MANAGER_GROUP',
                         settings.GROUP_IMPORT_ADMIN_GROUP))


def can_change_idnumber(request):
    return is_member_of_group(
        request, getattr(settings, 'GROUP_IMPORT_IDNUMBER_GROUP',
                         settings.GROUP_IMPORT_ADMIN_GROUP))


def import_context(request, course):
    return ImportContext(
        course, get_user(request),
        can_manage_groups=can_manage_groups(request),
        can_change_idnumber=can_change_idnumber(request),
        language=translation.get_language_from_request(request))


@method_decorator(group_required(settings.GROUP_IMPORT_ADMIN_GROUP),
                  name='dispatch')
class RESTDispatch(View):
    @staticmethod
    def error_response(status, message='', content=None):
        content = dict(content or {})
        content['error'] = '{}'.format(message)
        return HttpResponse(json.dumps(content),
                            status=status,
                            content_type='application/json')

    @staticmethod
    def json_response(content='', status=200):
        return HttpResponse(json.dumps(content, sort_keys=True),
                            status=status,
                            content_type='application/json')
