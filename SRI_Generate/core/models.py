from dataclasses import dataclass
from enum import Enum
import os
from typing import NamedTuple
from urllib.parse import urlsplit

from SRI_Generate.output.tags import generate_tag


class TargetKind(Enum):
    REMOTE_RESOURCE = "remote"
    REGULAR_FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class IntegrityRecord:
    """
    One digest of one target, ready to be embedded as SRI markup.

    Records are built once by the digest computer and never mutated.
    `source` is only set for targets fetched over the network.
    """
    digest: str
    file_name: str
    tag: str
    source: str = ""

    @property
    def algorithm(self) -> str:
        return self.digest.split("-", 1)[0]

    @property
    def bits(self) -> int:
        return int(self.algorithm[3:])


class Comparison(NamedTuple):
    equal: bool
    digest_a: str
    digest_b: str


def is_remote_target(target: str) -> bool:
    """
    True for absolute URIs with an authority (scheme://host/...).

    Bare local paths, relative or absolute, never qualify.
    """
    try:
        parts = urlsplit(target)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def target_file_name(target: str) -> str:
    """
    Final path segment of a target.

    For URLs the query and fragment are ignored, and the host is used
    when the URL has no path.
    """
    if is_remote_target(target):
        parts = urlsplit(target)
        name = parts.path.rstrip("/").rsplit("/", 1)[-1]
        return name or parts.netloc

    return os.path.basename(os.path.normpath(target))


def build_integrity_record(target: str, digest: str) -> IntegrityRecord:
    file_name = target_file_name(target)

    return IntegrityRecord(
        digest=digest,
        file_name=file_name,
        tag=generate_tag(target, file_name, digest),
        source=target if is_remote_target(target) else "",
    )
