# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.db import models
from django.utils.timezone import localtime
import json


class Course(models.Model):
    """ Represents a course that groups are imported into.
    """
    short_name = models.CharField(max_length=255, unique=True)
    full_name = models.CharField(max_length=255)
    idnumber = models.CharField(max_length=100, blank=True, default='')
    added_date = models.DateTimeField(auto_now_add=True)

    def json_data(self):
        return {
            'course_id': self.pk,
            'short_name': self.short_name,
            'full_name': self.full_name,
            'idnumber': self.idnumber,
        }

    def __str__(self):
        return self.short_name


class UserManager(models.Manager):
    def find_active(self, **kwargs):
        kwargs['is_deleted'] = False
        return super(UserManager, self).get_queryset().filter(
            **kwargs).order_by('username')


class User(models.Model):
    """ Represents a person who can be added to course groups.
    """
    username = models.CharField(max_length=100, unique=True)
    idnumber = models.CharField(max_length=255, blank=True, default='',
                                db_index=True)
    first_name = models.CharField(max_length=100, blank=True, default='')
    last_name = models.CharField(max_length=100, blank=True, default='')
    email = models.CharField(max_length=100, blank=True, default='')
    is_deleted = models.BooleanField(default=False)

    objects = UserManager()

    def json_data(self):
        return {
            'user_id': self.pk,
            'username': self.username,
            'idnumber': self.idnumber,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
            'is_deleted': self.is_deleted,
        }

    def __str__(self):
        return self.username


class EnrollmentManager(models.Manager):
    def is_enrolled(self, course, user):
        return super(EnrollmentManager, self).get_queryset().filter(
            course=course, user=user, is_active=True).exists()


class Enrollment(models.Model):
    """ Represents a user's enrollment in a course.
    """
    course = models.ForeignKey(Course, on_delete=models.CASCADE)
    user = models.ForeignKey(User, on_delete=models.CASCADE)
    is_active = models.BooleanField(default=True)
    added_date = models.DateTimeField(auto_now_add=True)

    objects = EnrollmentManager()

    class Meta:
        unique_together = ('course', 'user')


class Import(models.Model):
    """ Represents one run of a group or grouping csv import.
    """
    CSV_TYPE_CHOICES = (
        ('group', 'Group'),
        ('grouping', 'Grouping'),
    )

    csv_type = models.SlugField(max_length=20, choices=CSV_TYPE_CHOICES)
    course = models.ForeignKey(Course, on_delete=models.CASCADE)
    added_by = models.CharField(max_length=100)
    added_date = models.DateTimeField(auto_now_add=True)
    delimiter = models.CharField(max_length=20, null=True)
    encoding = models.CharField(max_length=40, null=True)
    row_count = models.IntegerField(default=0)
    results = models.TextField(null=True)
    csv_errors = models.TextField(null=True)

    def set_results(self, rows):
        self.row_count = len(rows)
        self.results = json.dumps([row.json_data() for row in rows])

    def get_results(self):
        return json.loads(self.results) if self.results else []

    def json_data(self):
        return {
            'import_id': self.pk,
            'type': self.csv_type,
            'type_name': self.get_csv_type_display(),
            'course_id': self.course_id,
            'added_by': self.added_by,
            'added_date': localtime(self.added_date).isoformat() if (
                self.added_date is not None) else None,
            'delimiter': self.delimiter,
            'encoding': self.encoding,
            'row_count': self.row_count,
            'csv_errors': self.csv_errors,
        }


from group_importer.models.group import (  # noqa: E402
    Group, GroupMember, Grouping, GroupingGroup)
