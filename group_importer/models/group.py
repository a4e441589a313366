# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.db import models
from django.db.models import Q
from django.utils.timezone import localtime


class GroupManager(models.Manager):
    def find_by_name(self, course, name):
        return super(GroupManager, self).get_queryset().filter(
            course=course, name=name)

    def find_by_idnumber(self, course, idnumber):
        return super(GroupManager, self).get_queryset().filter(
            course=course, idnumber=idnumber).exclude(idnumber='')

    def get_active_by_course(self, course):
        return super(GroupManager, self).get_queryset().filter(
            course=course).order_by('name')


class Group(models.Model):
    """ Represents a named subset of course participants
    """
    course = models.ForeignKey('group_importer.Course',
                               on_delete=models.CASCADE)
    name = models.CharField(max_length=254)
    idnumber = models.CharField(max_length=100, blank=True, default='')
    description = models.TextField(blank=True, default='')
    enrolment_key = models.CharField(max_length=50, blank=True, default='')
    enable_messaging = models.BooleanField(default=False)
    picture = models.IntegerField(default=0)
    hide_picture = models.BooleanField(default=False)
    added_by = models.CharField(max_length=100, blank=True, default='')
    added_date = models.DateTimeField(auto_now_add=True)

    objects = GroupManager()

    def json_data(self):
        return {
            'group_id': self.pk,
            'course_id': self.course_id,
            'name': self.name,
            'idnumber': self.idnumber,
            'description': self.description,
            'enable_messaging': self.enable_messaging,
            'hide_picture': self.hide_picture,
            'added_by': self.added_by,
            'added_date': localtime(self.added_date).isoformat() if (
                self.added_date is not None) else None,
        }

    def __str__(self):
        return self.name

    class Meta:
        unique_together = ('course', 'name')
        constraints = [
            models.UniqueConstraint(
                fields=['course', 'idnumber'],
                condition=~Q(idnumber=''),
                name='unique_course_group_idnumber'),
        ]


class GroupMemberManager(models.Manager):
    def is_member(self, group, user):
        return super(GroupMemberManager, self).get_queryset().filter(
            group=group, user=user).exists()

    def get_active_by_group(self, group):
        return super(GroupMemberManager, self).get_queryset().filter(
            group=group).select_related('user')


class GroupMember(models.Model):
    """ Represents membership of a user in a group
    """
    group = models.ForeignKey(Group, on_delete=models.CASCADE)
    user = models.ForeignKey('group_importer.User', on_delete=models.CASCADE)
    added_date = models.DateTimeField(auto_now_add=True)

    objects = GroupMemberManager()

    class Meta:
        unique_together = ('group', 'user')


class GroupingManager(models.Manager):
    def find_by_name(self, course, name):
        return super(GroupingManager, self).get_queryset().filter(
            course=course, name=name)


class Grouping(models.Model):
    """ Represents a named collection of groups within a course
    """
    course = models.ForeignKey('group_importer.Course',
                               on_delete=models.CASCADE)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    groups = models.ManyToManyField(Group, through='GroupingGroup',
                                    related_name='groupings')
    added_date = models.DateTimeField(auto_now_add=True)

    objects = GroupingManager()

    def json_data(self):
        return {
            'grouping_id': self.pk,
            'course_id': self.course_id,
            'name': self.name,
            'description': self.description,
            'groups': [g.name for g in self.groups.all().order_by('name')],
        }

    def __str__(self):
        return self.name

    class Meta:
        unique_together = ('course', 'name')


class GroupingGroup(models.Model):
    """ Represents the assignment of a group to a grouping
    """
    grouping = models.ForeignKey(Grouping, on_delete=models.CASCADE)
    group = models.ForeignKey(Group, on_delete=models.CASCADE)
    added_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('grouping', 'group')
