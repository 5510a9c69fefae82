"""Exception hierarchy for SRI_Generate."""


class IntegrityError(Exception):
    """Base exception."""


class UnsupportedAlgorithmError(IntegrityError, ValueError):
    """Algorithm selector is not one of sha256, sha384, sha512 or all."""


class FetchError(IntegrityError):
    """HTTP transport failed before a response was received."""


class FileOpenError(IntegrityError):
    """A local file could not be opened for reading."""


class StreamReadError(IntegrityError):
    """Reading a byte stream failed part way through hashing."""


class DirectoryListError(IntegrityError):
    """A directory could not be enumerated."""


class EmptyResultError(IntegrityError):
    """A target (or the whole call) produced no digests."""


class ComparisonInputError(IntegrityError, ValueError):
    """Comparison arguments are invalid."""


class OutputWriteError(IntegrityError):
    """The JSON output file could not be written."""


class SettingsError(IntegrityError):
    """The settings file is unreadable or malformed."""
