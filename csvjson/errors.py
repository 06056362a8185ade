# coding: utf-8
"""
Copyright (c) 2019 The MITRE Corporation.
"""

__all__ = ['CsvJsonError', 'UsageError', 'ValidationError', 'FatalIO', 'MalformedInput',
           'RowSkip', 'PipelineAborted']


class CsvJsonError(Exception):
    pass


class UsageError(CsvJsonError):
    """Missing argument or bad option value; raised before any file I/O."""
    pass


class ValidationError(CsvJsonError):
    """Input file has the wrong extension or does not exist."""
    pass


class FatalIO(CsvJsonError):
    """Unexpected read/write failure. Aborts the conversion."""
    pass


class MalformedInput(FatalIO):
    pass


class RowSkip(CsvJsonError):
    """A data row whose cell count disagrees with the header.

    Only ever raised to the reader loop, which logs it and moves on.
    """
    def __init__(self, row, expected):
        self.row = row
        self.expected = expected
        super(RowSkip, self).__init__("line does not match headers format ({} fields, expected {}). skipping"
                                      .format(len(row), expected))


class PipelineAborted(CsvJsonError):
    pass
