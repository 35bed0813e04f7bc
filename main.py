import argparse
import sys

from kwsearch.doc_loading import SourceUnreadableError
from kwsearch.globals import DEFAULT_DOCS_FILE, DEFAULT_NOISE_WORDS_FILE, DEFAULT_WORKERS
from kwsearch.index import IndexStats, SearchIndex


def _print_sample(index: SearchIndex, limit: int = 3) -> None:
    for keyword in list(index.keywords_index)[:limit]:
        occs = ", ".join(str(o) for o in index.keywords_index[keyword])
        print(f"\t\t{keyword} -> [{occs}]")


def build_index(
    docs_file: str = DEFAULT_DOCS_FILE,
    noise_words_file: str = DEFAULT_NOISE_WORDS_FILE,
    workers: int = DEFAULT_WORKERS,
) -> tuple[SearchIndex, IndexStats]:
    # prints for visiblity
    print("[1/2] Starting index construction...")
    print(f"\tDocument list: {docs_file}")
    print(f"\tNoise words: {noise_words_file}")
    print(f"\tWorkers: {workers}\n")

    index = SearchIndex()
    index.make_index(docs_file, noise_words_file, workers=workers)

    print("[2/2] Computing analytics...")  # prints for visiblity
    stats = index.stats()
    print(f"\tLoaded {len(index.noise_words)} noise words")
    if len(index):
        print("\tSample keywords:")
        _print_sample(index)
    print()
    return index, stats


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a keyword index over a list of documents.")
    parser.add_argument("--docs", default=DEFAULT_DOCS_FILE, help="file listing one document per line")
    parser.add_argument("--noise-words", default=DEFAULT_NOISE_WORDS_FILE, help="file of noise words")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS, help="threads used to scan documents")
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    opts = parse_args(sys.argv[1:] if args is None else args)

    # prints for visiblity
    print("=" * 60)
    print("Keyword Index Builder")
    print("=" * 60 + "\n")

    try:
        _, stats = build_index(opts.docs, opts.noise_words, opts.workers)
    except SourceUnreadableError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print("FINAL RESULTS")
    print("=" * 60)
    print(stats.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
