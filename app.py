import logging

import gradio as gr

from json_batch_csv.constants import DEFAULT_OUTPUT_FILENAME, INPUT_FILE_EXTENSION, STRATEGY_MERGED
from json_batch_csv.handlers import (
    clear_selection,
    convert_files_handler,
    describe_selection,
    strategy_choices,
)

# --- UI Definition ---
with gr.Blocks(title="JSON to CSV") as demo:
    gr.Markdown("# JSON to CSV")
    gr.Markdown(
        "Drop any number of JSON files. Nested keys become dotted columns and "
        "every file becomes one row, with columns ordered the way the files order their keys."
    )

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Add files")
            file_input = gr.File(
                label="JSON files",
                file_count="multiple",
                file_types=[INPUT_FILE_EXTENSION],
                type="filepath",
            )
            count_text = gr.Textbox(label="Selection", value="No files selected yet.", interactive=False)
            file_list = gr.Markdown()

        # Right Panel: Conversion
        with gr.Column(scale=1):
            gr.Markdown("### 2. Convert")
            mode = gr.Radio(choices=strategy_choices(), value=STRATEGY_MERGED, label="Columns")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder=DEFAULT_OUTPUT_FILENAME)
            with gr.Row():
                convert_btn = gr.Button("Convert", variant="primary")
                clear_btn = gr.Button("Clear")
            log_box = gr.Textbox(label="Log", interactive=False)
            download_output = gr.File(label="Download CSV")
            preview = gr.JSON(label="Preview (first 3 rows)")

    file_input.change(
        fn=describe_selection,
        inputs=[file_input],
        outputs=[count_text, file_list],
    )

    convert_btn.click(
        fn=convert_files_handler,
        inputs=[file_input, mode, output_filename],
        outputs=[download_output, log_box, preview],
    )

    clear_btn.click(
        fn=clear_selection,
        inputs=[],
        outputs=[file_input, count_text, file_list, log_box, download_output, preview],
    )

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    demo.launch()
