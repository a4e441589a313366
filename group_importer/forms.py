# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0

from django import forms
from django.conf import settings
from group_importer.csv.reader import (
    get_delimiter_list, default_delimiter_name, get_encodings,
    DEFAULT_ENCODING)


class ImportForm(forms.Form):
    """
    Upload form for a group or grouping csv file, with the delimiter and
    character encoding used to read it.
    """
    userfile = forms.FileField()
    delimiter_name = forms.ChoiceField(required=False)
    encoding = forms.ChoiceField(required=False)

    def __init__(self, *args, **kwargs):
        super(ImportForm, self).__init__(*args, **kwargs)
        self.fields['delimiter_name'].choices = [
            (name, name) for name in sorted(get_delimiter_list())]
        self.fields['encoding'].choices = [
            (enc, enc) for enc in get_encodings()]

    def clean_userfile(self):
        userfile = self.cleaned_data['userfile']
        max_size = getattr(settings, 'GROUP_IMPORT_MAX_UPLOAD_SIZE', None)
        if max_size and userfile.size > max_size:
            raise forms.ValidationError(
                'File exceeds the maximum upload size of {} bytes'.format(
                    max_size))
        return userfile

    def clean_delimiter_name(self):
        return self.cleaned_data['delimiter_name'] or default_delimiter_name()

    def clean_encoding(self):
        return self.cleaned_data['encoding'] or DEFAULT_ENCODING

    def content(self):
        userfile = self.cleaned_data['userfile']
        userfile.seek(0)
        return userfile.read()
