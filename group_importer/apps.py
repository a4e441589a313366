# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django.apps import AppConfig


class GroupImporterConfig(AppConfig):
    name = 'group_importer'
    default_auto_field = 'django.db.models.AutoField'
