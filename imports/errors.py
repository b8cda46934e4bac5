"""
Exceptions raised inside the CSV import pipeline.

Only :class:`StructuralError` describes a whole-file problem. The others describe a single row or
a single reference and are turned into :class:`~imports.types.ImportResult` messages by the
orchestrator; none of them escapes :func:`~imports.pipeline.bulk_import`.
"""


class CsvImportError(Exception):
    """Base class for every import pipeline error."""


class StructuralError(CsvImportError):
    """The file holds no data rows after tokenizing."""


class RequiredFieldMissing(CsvImportError):
    """A canonical required field is absent after normalization."""


class ReferenceResolutionError(CsvImportError):
    """A named related entity could not be resolved or created."""


class BackendError(CsvImportError):
    """The persistence layer rejected a write or a read for any reason but uniqueness."""


class DuplicateKeyError(BackendError):
    """The persistence layer reported a uniqueness violation."""
