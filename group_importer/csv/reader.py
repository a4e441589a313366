# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.conf import settings
from group_importer.exceptions import (
    EmptyFileException, NoDataException, UnreadableContentException)
from logging import getLogger
import codecs
import csv
import io
import re

logger = getLogger(__name__)

DELIMITERS = (
    ('comma', ','),
    ('semicolon', ';'),
    ('colon', ':'),
    ('tab', '\t'),
)

DEFAULT_ENCODINGS = (
    'UTF-8',
    'UTF-16',
    'ASCII',
    'ISO-8859-1',
    'ISO-8859-15',
    'WINDOWS-1250',
    'WINDOWS-1251',
    'WINDOWS-1252',
    'MACROMAN',
    'SHIFT_JIS',
    'GB18030',
    'BIG5',
    'KOI8-R',
)

DEFAULT_ENCODING = 'UTF-8'

RE_LINE_ENDING = re.compile(r'\r\n?')


def get_delimiter_list():
    """
    Returns the available delimiters as a dict of name to character,
    including the configured site delimiter as 'cfg'.
    """
    delimiters = dict(DELIMITERS)
    cfg = getattr(settings, 'GROUP_IMPORT_CSV_DELIMITER', None)
    if cfg:
        delimiters['cfg'] = cfg
    return delimiters


def get_delimiter(name):
    try:
        return get_delimiter_list()[name]
    except KeyError:
        raise UnreadableContentException(
            'Unknown delimiter: {}'.format(name))


def default_delimiter_name():
    return 'cfg' if 'cfg' in get_delimiter_list() else 'comma'


def get_encodings():
    return list(getattr(settings, 'GROUP_IMPORT_ENCODINGS', DEFAULT_ENCODINGS))


def decode_content(content, encoding=DEFAULT_ENCODING):
    if isinstance(content, str):
        text = content
    else:
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise UnreadableContentException(
                'Unknown encoding: {}'.format(encoding))

        try:
            text = content.decode(encoding)
        except UnicodeDecodeError as ex:
            raise UnreadableContentException(
                'Content is not valid {}: {}'.format(encoding, ex))

    if text.startswith(codecs.BOM_UTF8.decode('utf-8')):
        text = text[1:]

    return RE_LINE_ENDING.sub('\n', text)


def read_csv_content(content, encoding=DEFAULT_ENCODING,
                     delimiter_name='comma'):
    """
    Parses uploaded csv content, returning a tuple of (header, lines).
    Blank lines are skipped, and every line must have the same number of
    columns as the header.
    """
    text = decode_content(content, encoding)
    if not text.strip():
        raise EmptyFileException('File is empty')

    delimiter = get_delimiter(delimiter_name)

    rows = []
    try:
        for row in csv.reader(io.StringIO(text), delimiter=delimiter,
                              strict=True):
            if any(value.strip() for value in row):
                rows.append(row)
    except csv.Error as ex:
        raise UnreadableContentException(
            'Unable to parse csv content: {}'.format(ex))

    if not len(rows):
        raise EmptyFileException('File is empty')

    if len(rows) == 1:
        raise NoDataException('File contains a header but no data')

    header = rows[0]
    lines = rows[1:]
    for idx, line in enumerate(lines, start=2):
        if len(line) != len(header):
            raise UnreadableContentException(
                'Line {} has {} columns, expected {}'.format(
                    idx, len(line), len(header)))

    logger.info('Read csv content: {} columns, {} lines'.format(
        len(header), len(lines)))

    return (header, lines)
