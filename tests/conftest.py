from pathlib import Path

import pytest

from affectscope.lexicon import LexiconStore

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def store() -> LexiconStore:
    return LexiconStore.load(
        DATA_DIR / "lexicon.txt",
        DATA_DIR / "emoticons.txt",
        DATA_DIR / "keywords.json",
    )
