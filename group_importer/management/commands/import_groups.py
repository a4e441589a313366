# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from group_importer.management.commands import ImportCommand
from group_importer.importers.groups import GroupImporter


class Command(ImportCommand):
    help = 'Imports groups, group members and groupings from a csv file.'
    importer_class = GroupImporter
