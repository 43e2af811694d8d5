"""Gradio-based diagram preview exposed via FastAPI."""

from __future__ import annotations

from typing import Optional, Tuple

from fastapi import FastAPI
import gradio as gr

from core.diagram import DiagramOptions, build_diagram
from core.show_board import board_to_string
from input.sgf_parser import parse_sgf
from main import parse_range
from monitoring import benchmark


fastapi_app = FastAPI(title="SGF Diagram Dashboard")


@fastapi_app.get("/monitoring/performance")
def monitoring_performance(iterations: int = 3):
    """Run the standard benchmark and return its summary."""
    bench = benchmark.DiagramBenchmark()
    report = bench.run_standard(iterations=iterations, warmup_runs=1)
    return {"summary": report["summary"], "passes_requirement": report["passes_requirement"]}


def render_preview(
    sgf_text: str,
    move_range: str = "",
    move: Optional[float] = None,
    last_move_label: bool = False,
) -> Tuple[str, str]:
    """Return the text diagram and caption for the dashboard inputs."""
    try:
        options = DiagramOptions(
            move_range=parse_range(move_range) if move_range and move_range.strip() else None,
            move=int(move) if move else None,
            last_move_label=last_move_label,
            show_coordinates=True,
        )
        game = parse_sgf(sgf_text, from_string=True)
        diagram = build_diagram(game.board_size, game.moves, options)
    except ValueError as exc:
        return f"Error: {exc}", ""
    text = board_to_string(diagram.board, diagram.labels, diagram.last_move, show_coordinates=True)
    return text, ", ".join(diagram.caption)


def build_ui() -> gr.Blocks:
    """Construct and return the Gradio dashboard UI."""
    with gr.Blocks() as demo:
        gr.Markdown("# SGF Diagram")
        sgf_in = gr.Textbox(label="SGF", lines=6)
        with gr.Row():
            range_in = gr.Textbox(label="Move range (e.g. 1-10)")
            move_in = gr.Number(label="Move", precision=0)
            last_in = gr.Checkbox(label="Mark last move")
        render = gr.Button("Render")
        diagram_box = gr.Code(label="Diagram")
        caption_box = gr.Textbox(label="Overwritten labels")
        render.click(
            render_preview,
            inputs=[sgf_in, range_in, move_in, last_in],
            outputs=[diagram_box, caption_box],
        )
    return demo


demo = build_ui()
app = gr.mount_gradio_app(fastapi_app, demo, path="/")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=7860)
