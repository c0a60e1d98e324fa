import orjson
import pytest

from affectscope.emotion import Emotion, EmotionalResult, EmotionCategory, rank
from affectscope.entry import AffectEntry, AffectSample


def _result(text: str = "sample", **weights: float) -> EmotionalResult:
    emotions = tuple(Emotion(EmotionCategory[name.upper()], value) for name, value in weights.items())
    return EmotionalResult(text=text, emotions=emotions, general_weight=0.5, valence=1)


def test_ranking_is_descending_by_weight() -> None:
    result = _result(sadness=0.2, happiness=0.9, fear=0.5)
    assert [item.category for item in result.emotions] == [
        EmotionCategory.HAPPINESS,
        EmotionCategory.FEAR,
        EmotionCategory.SADNESS,
    ]


def test_equal_weights_break_ties_by_category_order() -> None:
    ranked = rank(
        [
            Emotion(EmotionCategory.SURPRISE, 0.4),
            Emotion(EmotionCategory.ANGER, 0.4),
            Emotion(EmotionCategory.SADNESS, 0.4),
        ]
    )
    assert [item.category for item in ranked] == [
        EmotionCategory.SADNESS,
        EmotionCategory.ANGER,
        EmotionCategory.SURPRISE,
    ]
    assert len(set(ranked)) == 3


def test_emotion_ordering_is_a_strict_total_order() -> None:
    low = Emotion(EmotionCategory.HAPPINESS, 0.3)
    high = Emotion(EmotionCategory.DISGUST, 0.3)
    assert low < high
    assert not high < low
    assert not low < low


def test_strongest_emotions() -> None:
    result = _result(happiness=0.9, fear=0.5, sadness=0.2)
    assert result.strongest_emotion.category is EmotionCategory.HAPPINESS
    assert [item.category for item in result.strongest_emotions(2)] == [
        EmotionCategory.HAPPINESS,
        EmotionCategory.FEAR,
    ]
    assert result.strongest_emotions(0) == []
    assert len(result.strongest_emotions(10)) == 3


def test_missing_category_weighs_zero() -> None:
    result = _result(happiness=0.9)
    assert result.emotion(EmotionCategory.ANGER) == Emotion(EmotionCategory.ANGER, 0.0)
    assert result.anger_weight == 0.0
    assert result.disgust_weight == 0.0
    assert result.happiness_weight == 0.9


def test_empty_state_is_fully_neutral() -> None:
    result = EmotionalResult.empty()
    assert result.text == ""
    assert result.strongest_emotion == Emotion(EmotionCategory.NEUTRAL, 1.0)
    assert result.valence == 0
    assert result.general_weight == 0.0


def test_previous_links_form_a_history() -> None:
    first = _result("first", happiness=0.4)
    second = _result("second", sadness=0.6)
    third = _result("third", fear=0.7)
    second.previous = first
    third.previous = second
    assert [item.text for item in third.history()] == ["third", "second", "first"]
    assert first.previous is None


def test_to_json_serialises_ranked_emotions() -> None:
    payload = orjson.loads(_result(happiness=0.9, fear=0.5).to_json())
    assert payload["text"] == "sample"
    assert payload["valence"] == 1
    assert payload["general_weight"] == 0.5
    assert payload["emotions"] == [
        {"category": "happiness", "weight": 0.9},
        {"category": "fear", "weight": 0.5},
    ]


def test_str_lists_every_category() -> None:
    text = str(_result(happiness=0.9))
    assert text.splitlines()[0] == "Text: sample"
    assert "Happiness weight: 0.9" in text
    assert "Surprise weight: 0.0" in text


def test_entry_sample_is_a_detached_copy() -> None:
    entry = AffectEntry("happy", 0.7, 0.8)
    sample = entry.sample()
    sample.scale(2.0)
    assert sample.happiness == pytest.approx(1.6)
    assert sample.general == pytest.approx(1.4)
    assert entry.happiness == 0.8
    assert entry.sample(starts_with_emoticon=True).starts_with_emoticon


def test_scale_rejects_non_positive_coefficients() -> None:
    sample = AffectSample("happy", happiness=0.8)
    with pytest.raises(ValueError):
        sample.scale(0.0)
    with pytest.raises(ValueError):
        sample.scale(-1.5)


def test_scale_does_not_clamp() -> None:
    sample = AffectSample("love", general=0.9, happiness=1.0)
    sample.scale(1.5)
    sample.scale(1.5)
    assert sample.happiness == pytest.approx(2.25)


def test_invert_polarity_remaps_weights() -> None:
    sample = AffectSample("happy", general=0.7, happiness=0.8, surprise=0.2)
    assert sample.polarity == pytest.approx(1.0)
    sample.invert_polarity()
    assert sample.happiness == 0.0
    assert sample.sadness == pytest.approx(0.8)
    assert (sample.anger, sample.fear, sample.disgust) == pytest.approx((0.4, 0.4, 0.4))
    assert sample.surprise == pytest.approx(0.2)
    assert sample.general == pytest.approx(0.7)
    assert sample.polarity < 0


def test_invert_polarity_of_negative_word() -> None:
    sample = AffectSample("afraid", general=0.8, sadness=0.2, fear=0.8)
    assert sample.polarity < 0
    sample.invert_polarity()
    assert sample.happiness == pytest.approx(0.8)
    assert sample.fear == 0.0
    assert sample.polarity > 0


def test_surprise_marker() -> None:
    marker = AffectSample.surprise_marker()
    assert marker.word == "?!"
    assert marker.surprise == 1.0
    assert marker.general == 0.0
    assert list(marker.as_vector()) == [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0]
