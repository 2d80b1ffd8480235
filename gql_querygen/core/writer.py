"""Write generated documents to disk."""

import logging
import shutil
from pathlib import Path

from .generator import GeneratedDocument

log = logging.getLogger(__name__)


class DocumentWriter:
    """Writes each document to ``<output>/<kind dir>/<name>.<ext>``.

    Call ``prepare`` once before writing: it removes whatever a previous
    run left in the output directory.
    """

    def __init__(self, output_dir: str | Path, file_extension: str = "gql"):
        self.output_dir = Path(output_dir)
        self.file_extension = file_extension

    def prepare(self):
        """Clear and recreate the output directory."""
        if self.output_dir.exists():
            log.debug("Removing %s", self.output_dir)
            shutil.rmtree(self.output_dir)
        self.output_dir.mkdir(parents=True)

    def write(self, document: GeneratedDocument) -> Path:
        """Write one document and return its path."""
        folder = self.output_dir / document.kind.directory
        folder.mkdir(exist_ok=True)
        path = folder / f"{document.name}.{self.file_extension}"
        path.write_text(document.text, encoding="utf-8")
        return path

    def write_all(self, documents) -> list[Path]:
        """Write every document, returning the paths written."""
        return [self.write(document) for document in documents]
