from pydantic import BaseModel, ConfigDict, Field
from typing import List

from .parsing import split_on

WORD_LIST_DELIMITER = ", "


class KeywordLists(BaseModel):
    """Keyword resource: comma-plus-space delimited word lists."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    negations: str
    intensity_modifiers: str = Field(alias="intensity.modifiers")

    def negation_words(self) -> List[str]:
        return _words(self.negations)

    def intensity_modifier_words(self) -> List[str]:
        return _words(self.intensity_modifiers)


def _words(raw: str) -> List[str]:
    return [word.strip().lower() for word in split_on(raw.strip(), WORD_LIST_DELIMITER) if word.strip()]
