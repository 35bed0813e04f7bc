import os
from collections.abc import Iterator


class SourceUnreadableError(OSError):
    """An input source (document list, noise words or a document) could not be read."""

    kind = "source"

    def __init__(self, path: str):
        super().__init__(f"{self.kind} not found: {path}")
        self.path = path


class DocumentListNotFoundError(SourceUnreadableError):
    kind = "document list"


class NoiseWordsNotFoundError(SourceUnreadableError):
    kind = "noise-word list"


class DocumentNotFoundError(SourceUnreadableError):
    kind = "document"


def _read_text(path: str, error_cls: type[SourceUnreadableError]) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise error_cls(path) from e


def load_noise_words(path: str) -> set[str]:
    """Returns every whitespace separated word in the noise word file"""
    return set(_read_text(path, NoiseWordsNotFoundError).split())


def iter_doc_names(path: str) -> Iterator[str]:
    """Yields document names from the document list, one per line"""
    text = _read_text(path, DocumentListNotFoundError)
    for line in text.splitlines():
        name = line.strip()
        if name:
            yield name


def resolve_doc_path(doc_name: str, base_dir: str | None) -> str:
    if base_dir is None or os.path.isabs(doc_name):
        return doc_name
    return os.path.join(base_dir, doc_name)


def read_document(path: str) -> str:
    return _read_text(path, DocumentNotFoundError)
