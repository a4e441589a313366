# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from group_importer.management.commands import ImportCommand
from group_importer.importers.groupings import GroupingImporter


class Command(ImportCommand):
    help = 'Imports groupings and their groups from a csv file.'
    importer_class = GroupingImporter
