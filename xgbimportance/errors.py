"""Exception hierarchy raised while parsing and aggregating model dumps."""


class ImportanceError(ValueError):
    """Base class for every error raised by the importance computation."""


class FormatError(ImportanceError):
    """Unrecognized or too-short dump, or missing weight marker."""


class MissingStatsError(ImportanceError):
    """A split line lacks the gain/cover annotations (dump made without stats)."""


class StructuralError(ImportanceError):
    """Parent/child linkage of a tree is inconsistent."""


class UnknownFeatureError(ImportanceError):
    """A feature index has no entry in the supplied name table."""


class CountMismatchError(ImportanceError):
    """Number of feature names differs from the number of linear weights."""


class InvalidArgumentError(ImportanceError):
    """Conflicting or wrong-typed inputs from the caller."""
