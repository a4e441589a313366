# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from group_importer.importers import Importer
from group_importer.importers.messages import GROUPING_NO_PERMISSION
from group_importer.csv.header import GROUPING_FIELDS


class GroupingImporter(Importer):
    """
    Imports groupings from records with a grouping name, adding the group
    named in 'groupname' to each grouping, creating it if necessary.
    """
    csv_type = 'grouping'
    fields = GROUPING_FIELDS

    def _process(self, result, record):
        grouping_name = record.get('grouping')
        if not grouping_name:
            return

        if not self.context.can_manage_groups:
            result.add(GROUPING_NO_PERMISSION, grouping=grouping_name)
            return

        grouping = self.find_or_create_grouping(result, grouping_name)
        if grouping is None:
            return

        group_name = record.get('groupname')
        if not group_name:
            return

        group = self.find_or_create_group(result, group_name)
        if group is not None:
            self.add_group_to_grouping(result, grouping, group)
