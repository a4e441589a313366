# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from group_importer.models import Course
from group_importer.models.group import Group, GroupMember, Grouping
from group_importer.views import RESTDispatch


class GroupListView(RESTDispatch):
    """ Performs query of Group models at /api/v1/course/<course_id>/groups.
        GET returns 200 with Group models and their members
    """
    def get(self, request, *args, **kwargs):
        course_id = kwargs['course_id']
        try:
            course = Course.objects.get(pk=course_id)
        except Course.DoesNotExist:
            return self.error_response(
                404, 'Course {} not found'.format(course_id))

        json_rep = {
            'course': course.json_data(),
            'groups': []
        }

        for group in Group.objects.get_active_by_course(course):
            members = GroupMember.objects.get_active_by_group(group)
            data = group.json_data()
            data['members'] = sorted(m.user.username for m in members)
            json_rep['groups'].append(data)

        return self.json_response(json_rep)


class GroupingListView(RESTDispatch):
    """ Performs query of Grouping models at
        /api/v1/course/<course_id>/groupings.
        GET returns 200 with Grouping models
    """
    def get(self, request, *args, **kwargs):
        course_id = kwargs['course_id']
        try:
            course = Course.objects.get(pk=course_id)
        except Course.DoesNotExist:
            return self.error_response(
                404, 'Course {} not found'.format(course_id))

        json_rep = {
            'course': course.json_data(),
            'groupings': [g.json_data() for g in Grouping.objects.filter(
                course=course).order_by('name')]
        }

        return self.json_response(json_rep)
