# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from group_importer.models import User


def get_users(username=None, idnumber=None):
    """
    Returns the active users matching every identifier passed, or an
    empty list if no identifier is passed.
    """
    kwargs = {}
    if username:
        kwargs['username'] = username
    if idnumber:
        kwargs['idnumber'] = idnumber

    if not len(kwargs):
        return []

    return list(User.objects.find_active(**kwargs))
