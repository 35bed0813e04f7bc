import argparse
import sys
from typing import List

from kwsearch.doc_loading import SourceUnreadableError
from kwsearch.globals import DEFAULT_DOCS_FILE, DEFAULT_NOISE_WORDS_FILE, DEFAULT_WORKERS
from kwsearch.index import SearchIndex


def prompt(message: str) -> str:
    print(message)
    return input().strip()


def search(index: SearchIndex, kw1: str, kw2: str) -> List[str]:
    # "kw1 or kw2", top documents by frequency
    return index.top5search(kw1, kw2)


def format_results(results: List[str]) -> List[str]:
    return [f"{rank}. {document}" for rank, document in enumerate(results, start=1)]


def parse_args(args: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Search the keyword index for "kw1 or kw2".')
    parser.add_argument("kw1", nargs="?", help="first keyword, wins frequency ties")
    parser.add_argument("kw2", nargs="?", help="second keyword")
    parser.add_argument("--docs", default=DEFAULT_DOCS_FILE, help="file listing one document per line")
    parser.add_argument("--noise-words", default=DEFAULT_NOISE_WORDS_FILE, help="file of noise words")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS, help="threads used to scan documents")
    return parser.parse_args(args)


def main(args: List[str] | None = None) -> int:
    opts = parse_args(sys.argv[1:] if args is None else args)

    index = SearchIndex()
    try:
        index.make_index(opts.docs, opts.noise_words, workers=opts.workers)
    except SourceUnreadableError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    # ask for whatever keywords weren't given on the command line
    kw1 = opts.kw1 or prompt("Enter keyword 1 to search: ")
    kw2 = opts.kw2 or prompt("Enter keyword 2 to search: ")

    results = search(index, kw1, kw2)
    if not results:
        print(f"No documents contain {kw1!r} or {kw2!r}")
        return 0
    for line in format_results(results):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
