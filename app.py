"""Interactive UI made with Gradio

Users type lines of a conversation one at a time; each line is analysed for
emotional content and linked to the previous one so the whole emotional
history can be inspected.
"""
from __future__ import annotations

from typing import Any, List, Optional

import gradio as gr

from affectscope import Empathyscope, EmotionalResult, LexiconStore

EMOTION_HEADERS = ["Rank", "Emotion", "Weight"]
HISTORY_HEADERS = ["Turn", "Text", "Strongest", "Weight", "Valence"]

ENGINE = Empathyscope(LexiconStore.from_defaults())


def _describe(result: EmotionalResult) -> str:
    strongest = result.strongest_emotion
    valence = {1: "positive", 0: "neutral", -1: "negative"}[result.valence]
    return (
        f"**Strongest emotion:** {strongest.category.name.title()} ({strongest.weight:.2f})\n\n"
        f"General weight: {result.general_weight:.2f}, valence: {valence}"
    )


def _emotion_rows(result: EmotionalResult) -> List[List[str]]:
    return [
        [str(idx + 1), item.category.name.title(), f"{item.weight:.3f}"]
        for idx, item in enumerate(result.emotions)
    ]


def _history_rows(result: EmotionalResult) -> List[List[str]]:
    turns = list(result.history())
    turns.reverse()
    rows: List[List[str]] = []
    for idx, turn in enumerate(turns):
        strongest = turn.strongest_emotion
        rows.append(
            [
                str(idx + 1),
                turn.text,
                strongest.category.name.title(),
                f"{strongest.weight:.2f}",
                str(turn.valence),
            ]
        )
    return rows


def analyse_turn(text: str, previous: Optional[EmotionalResult]) -> tuple[Any, ...]:
    if not text.strip():
        raise gr.Error("Please enter some text to analyse.")
    result = ENGINE.feel(text.strip())
    result.previous = previous
    return (
        _describe(result),
        _emotion_rows(result),
        result.to_dict(),
        _history_rows(result),
        result,
    )


def reset_history() -> tuple[Any, ...]:
    return ("", [], {}, [], None)


with gr.Blocks(title="Affectscope") as demo:
    gr.Markdown("## Affectscope\nType a line of conversation to see which emotions it carries.")

    history_state = gr.State(None)
    with gr.Row():
        with gr.Column():
            text_in = gr.Textbox(
                label="Text",
                value="I love you so very much",
                lines=3,
                placeholder="A sentence or two",
            )
            analyse_btn = gr.Button("Analyse", variant="primary")
            reset_btn = gr.Button("Clear History")
        with gr.Column():
            summary_out = gr.Markdown(label="Summary")
            emotions_out = gr.Dataframe(
                headers=EMOTION_HEADERS,
                datatype=["str"] * len(EMOTION_HEADERS),
                row_count=(1, "dynamic"),
                interactive=False,
                label="Ranked Emotions",
            )
            json_out = gr.JSON(label="Result")
    history_out = gr.Dataframe(
        headers=HISTORY_HEADERS,
        datatype=["str"] * len(HISTORY_HEADERS),
        row_count=(1, "dynamic"),
        interactive=False,
        label="Conversation History",
    )

    analyse_btn.click(
        fn=analyse_turn,
        inputs=[text_in, history_state],
        outputs=[summary_out, emotions_out, json_out, history_out, history_state],
    )
    reset_btn.click(
        fn=reset_history,
        inputs=[],
        outputs=[summary_out, emotions_out, json_out, history_out, history_state],
    )

if __name__ == "__main__":
    demo.launch()
