import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from kwsearch.doc_loading import (
    iter_doc_names,
    load_noise_words,
    read_document,
    resolve_doc_path,
)
from kwsearch.globals import DEFAULT_WORKERS, TOP_K
from kwsearch.tokenizer import WordClassifier, tokenize


@dataclass
class Occurrence:
    # one keyword's occurrence in a single document
    document: str
    frequency: int

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Moves the last occurrence in occs to its place in descending frequency order.

    occs[0 .. n-2] must already be sorted by descending frequency. The spot for
    occs[n-1] is found with a binary search over that prefix; an occurrence whose
    frequency equals an existing one goes after all of them, so ties keep the
    order they were inserted in.

    Returns the midpoint indexes checked by the search, or None when occs holds
    a single occurrence and there is nothing to search.
    """
    if not occs:
        raise ValueError("cannot insert into an empty occurrence list")
    last = len(occs) - 1
    if last == 0:
        return None

    target = occs[last].frequency
    mids: list[int] = []
    left, right = 0, last - 1
    while left <= right:
        mid = (left + right) // 2
        mids.append(mid)
        if target > occs[mid].frequency:
            right = mid - 1
        else:
            # equal frequencies continue to the right
            left = mid + 1

    if left != last:
        occs.insert(left, occs.pop())
    return mids


@dataclass
class IndexStats:
    num_docs: int
    num_keywords: int
    num_occurrences: int

    def report(self) -> str:
        return (
            f"Index analytics:\n"
            f"  Number of indexed documents: {self.num_docs}\n"
            f"  Number of unique keywords:   {self.num_keywords}\n"
            f"  Number of occurrences:       {self.num_occurrences}\n"
        )


def load_keywords_from_tokens(
    doc_name: str, tokens: Iterable[str], classifier: WordClassifier
) -> dict[str, Occurrence]:
    # count keyword occurrences for one document
    keywords: dict[str, Occurrence] = {}
    for token in tokens:
        keyword = classifier.get_keyword(token)
        if keyword is None:
            continue
        occ = keywords.get(keyword)
        if occ is None:
            keywords[keyword] = Occurrence(doc_name, 1)
        else:
            occ.frequency += 1
    return keywords


class SearchIndex:
    # keyword index: keyword (str) -> occurrences sorted by descending frequency
    def __init__(self, noise_words: Iterable[str] = ()):
        self.keywords_index: dict[str, list[Occurrence]] = {}
        self.noise_words: set[str] = set(noise_words)
        self.classifier = WordClassifier(self.noise_words)
        self.documents: list[str] = []

    def set_noise_words(self, noise_words: Iterable[str]) -> None:
        self.noise_words = set(noise_words)
        self.classifier = WordClassifier(self.noise_words)

    def get_keyword(self, word: str) -> str | None:
        return self.classifier.get_keyword(word)

    def load_keywords(
        self, doc_name: str, base_dir: str | None = None
    ) -> dict[str, Occurrence]:
        # scan one document; raises DocumentNotFoundError if it can't be read
        text = read_document(resolve_doc_path(doc_name, base_dir))
        return load_keywords_from_tokens(doc_name, tokenize(text), self.classifier)

    def merge_keywords(self, kws: dict[str, Occurrence]) -> None:
        # merge one document's keywords into the master index
        for keyword, occ in kws.items():
            occs = self.keywords_index.get(keyword)
            if occs is None:
                self.keywords_index[keyword] = [occ]
                continue
            occs.append(occ)
            insert_last_occurrence(occs)

    def make_index(
        self,
        docs_file: str,
        noise_words_file: str,
        workers: int = DEFAULT_WORKERS,
    ) -> None:
        """Indexes every document named in docs_file, skipping noise words.

        Document names are resolved against the directory of docs_file. With
        workers > 1 the documents are scanned on a thread pool, but merging
        always happens here, one document at a time, in list order.
        """
        self.set_noise_words(load_noise_words(noise_words_file))
        # a document listed twice is indexed once
        doc_names = list(dict.fromkeys(iter_doc_names(docs_file)))
        base_dir = os.path.dirname(docs_file)

        if workers <= 1:
            for doc_name in doc_names:
                self._merge_document(doc_name, self.load_keywords(doc_name, base_dir))
            return

        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = executor.map(
                lambda name: self.load_keywords(name, base_dir), doc_names
            )
            for doc_name, kws in zip(doc_names, results):
                self._merge_document(doc_name, kws)

    def _merge_document(self, doc_name: str, kws: dict[str, Occurrence]) -> None:
        self.merge_keywords(kws)
        self.documents.append(doc_name)

    def get_occurrences(self, keyword: str) -> list[Occurrence]:
        # copy so callers can't reorder the index
        return list(self.keywords_index.get(keyword.lower(), []))

    def top5search(self, kw1: str, kw2: str) -> list[str]:
        """Search result for "kw1 or kw2".

        Documents are ordered by descending frequency of whichever keyword they
        were found with, ties going to kw1. A document appears once and at most
        TOP_K documents are returned. No match gives an empty list.
        """
        occs1 = self.keywords_index.get(kw1.lower(), [])
        occs2 = self.keywords_index.get(kw2.lower(), [])

        results: list[str] = []
        i = j = 0
        while len(results) < TOP_K and (i < len(occs1) or j < len(occs2)):
            if j >= len(occs2) or (
                i < len(occs1) and occs1[i].frequency >= occs2[j].frequency
            ):
                document = occs1[i].document
                i += 1
            else:
                document = occs2[j].document
                j += 1
            # the head is consumed even if its document is already listed
            if document not in results:
                results.append(document)
        return results

    def stats(self) -> IndexStats:
        return IndexStats(
            num_docs=len(self.documents),
            num_keywords=len(self.keywords_index),
            num_occurrences=sum(len(occs) for occs in self.keywords_index.values()),
        )

    def __len__(self) -> int:
        return len(self.keywords_index)

    def __contains__(self, keyword: str) -> bool:
        return keyword.lower() in self.keywords_index
