import json
import logging
from pathlib import Path
from typing import Dict, Iterable

from SRI_Generate.core.errors import OutputWriteError

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "\t"


def build_output(records: Iterable) -> Dict[str, Dict[str, dict]]:
    """
    Group records as {file name: {algorithm: {digest, tag, source?}}}.
    """
    result: Dict[str, Dict[str, dict]] = {}

    for record in records:
        node = {"digest": record.digest, "tag": record.tag}
        if record.source:
            node["source"] = record.source

        result.setdefault(record.file_name, {})[record.algorithm] = node

    return result


def render_output(records: Iterable, indent: str = DEFAULT_INDENT) -> str:
    return json.dumps(build_output(records), indent=indent, ensure_ascii=False)


def write_output(
    records: Iterable,
    path: Path,
    indent: str = DEFAULT_INDENT,
) -> Path:
    path = Path(path)

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(render_output(records, indent))
            f.write("\n")
    except OSError as exc:
        raise OutputWriteError(
            f"Unable to create file at location: {path}. {exc}"
        ) from exc

    logger.info("Wrote integrities to %s", path)
    return path
