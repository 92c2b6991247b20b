import os
import tempfile

import pytest

# Keep test runs from writing into the project's logs/ directory.
os.environ.setdefault("AC_LOG_FILE", os.path.join(tempfile.mkdtemp(prefix="autocomplete-logs-"), "app.log"))

from src.app.autocomplete import WordAutocomplete
from src.app.index import FrequencyIndex, build_index

SAMPLE_CORPUS = "the cat sat on the mat the cat ran"


@pytest.fixture
def sample_index() -> FrequencyIndex:
    return build_index(SAMPLE_CORPUS)


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text(SAMPLE_CORPUS, encoding="utf-8")
    return path


@pytest.fixture
def loaded_service(corpus_file) -> WordAutocomplete:
    service = WordAutocomplete(corpus_file)
    service.load_corpus()
    return service
