# Auto-generated __init__.py

from . import errors
from .errors import ComparisonInputError
from .errors import DirectoryListError
from .errors import EmptyResultError
from .errors import FetchError
from .errors import FileOpenError
from .errors import IntegrityError
from .errors import OutputWriteError
from .errors import SettingsError
from .errors import StreamReadError
from .errors import UnsupportedAlgorithmError
from . import models
from .models import Comparison
from .models import IntegrityRecord
from .models import TargetKind
from .models import build_integrity_record
from . import digest
from .digest import ALL
from .digest import SELECTORS
from .digest import compute_integrities
from . import fanout
from .fanout import gather_first_error
from . import targets
from .targets import classify_target
from .targets import handle_target
from . import generate
from .generate import generate_integrities
from . import compare
from .compare import validate_compare

__all__ = [
    "compare",
    "digest",
    "errors",
    "fanout",
    "generate",
    "models",
    "targets",
    "ALL",
    "SELECTORS",
    "Comparison",
    "ComparisonInputError",
    "DirectoryListError",
    "EmptyResultError",
    "FetchError",
    "FileOpenError",
    "IntegrityError",
    "IntegrityRecord",
    "OutputWriteError",
    "SettingsError",
    "StreamReadError",
    "TargetKind",
    "UnsupportedAlgorithmError",
    "build_integrity_record",
    "classify_target",
    "compute_integrities",
    "gather_first_error",
    "generate_integrities",
    "handle_target",
    "validate_compare",
]
