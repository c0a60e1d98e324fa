from __future__ import annotations

import pytest

pytest.importorskip("gradio")

from app import analyse_turn, reset_history  # noqa: E402


def test_analyse_turn_links_conversation_history() -> None:
    summary, rows, payload, history, first = analyse_turn("I love you so very much", None)
    assert "Happiness" in summary
    assert summary.endswith(", valence: positive")
    assert rows[0][1] == "Happiness"
    assert payload["valence"] == 1
    assert len(history) == 1

    _, _, _, history, second = analyse_turn("I am not happy.", first)
    assert second.previous is first
    assert [row[1] for row in history] == ["I love you so very much", "I am not happy."]
    assert history[-1][4] == "-1"


def test_analyse_turn_rejects_blank_text() -> None:
    import gradio as gr

    with pytest.raises(gr.Error):
        analyse_turn("   ", None)


def test_reset_history_clears_state() -> None:
    assert reset_history()[-1] is None
