import os

# Classification
PUNCTUATION = frozenset(".,?:;!")
# Search
TOP_K = 5
# Default input files
DATA_DIR = "data"
DEFAULT_DOCS_FILE = os.path.join(DATA_DIR, "docs.txt")
DEFAULT_NOISE_WORDS_FILE = os.path.join(DATA_DIR, "noisewords.txt")
# Other constants
DEFAULT_WORKERS = 1
