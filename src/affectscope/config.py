import os

# Resource overrides; empty means the copies packaged under affectscope/data
LEXICON_PATH = os.environ.get("AFFECTSCOPE_LEXICON", "")
EMOTICONS_PATH = os.environ.get("AFFECTSCOPE_EMOTICONS", "")
KEYWORDS_PATH = os.environ.get("AFFECTSCOPE_KEYWORDS", "")

LOG_LEVEL = os.environ.get("AFFECTSCOPE_LOG_LEVEL", "WARNING").upper()

DATA_PACKAGE = "affectscope.data"
LEXICON_RESOURCE = "lexicon.txt"
EMOTICONS_RESOURCE = "emoticons.txt"
KEYWORDS_RESOURCE = "keywords.json"

# Heuristic constants
EXCLAMATION_STEP = 0.2
EMOTICON_STEP = 0.2
CAPS_LOCK_COEF = 1.5
MODIFIER_COEF = 1.5
CLAUSE_DELIMITERS = ",.;:-"

# NEUTRAL fallback weight is (NEUTRAL_BASE + general_weight) / NEUTRAL_SCALE
NEUTRAL_BASE = 0.2
NEUTRAL_SCALE = 1.2
