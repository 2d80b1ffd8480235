"""Load the names of operations the user already maintains by hand."""

import logging
import re
from pathlib import Path

from .errors import ConfigurationError

log = logging.getLogger(__name__)

OPERATION_PREFIXES = ("query ", "mutation ")


def parse_operation_names(text: str) -> list[str]:
    """Return the operation names declared in a document.

    ``query getUser($id: ID!) {`` and ``mutation rename{`` declare
    ``getUser`` and ``rename``.
    """
    names = []
    for line in text.splitlines():
        line = line.strip()
        if not line.startswith(OPERATION_PREFIXES):
            continue
        rest = line.split(None, 1)[1].lstrip()
        name = re.split(r"[({\s]", rest, 1)[0]
        if name:
            names.append(name)
    return names


def load_customised_operations(path: str | Path | None) -> set[str]:
    """Collect operation names from every file directly under ``path``.

    A missing directory is treated as empty.

    Raises:
        ConfigurationError: If the directory or one of its files cannot be read
    """
    if not path:
        return set()
    directory = Path(path)
    names: set[str] = set()
    try:
        entries = sorted(directory.iterdir())
    except FileNotFoundError:
        log.info("Customised query directory %s not found, nothing excluded", directory)
        return names
    except OSError as e:
        raise ConfigurationError(f"Cannot read customised queries in {directory}: {e}") from e

    for entry in entries:
        if not entry.is_file():
            continue
        try:
            names.update(parse_operation_names(entry.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read customised query file {entry}: {e}") from e
    log.debug("Excluding %d customised operations", len(names))
    return names
