import gradio as gr
from functools import partial

from json_type_generator.config import get_settings
from json_type_generator.handlers import (
    collapse_all_handler,
    expand_all_handler,
    format_handler,
    generate_code_handler,
    handle_file_upload,
    handle_input_change,
    load_demo_handler,
    minify_handler,
)
from json_type_generator.logging_utils import configure_logging
from json_type_generator.renderers import Language
from json_type_generator.tree_view import build_tree_html

settings = get_settings()
configure_logging(settings.log_level)

# --- UI Definition ---
with gr.Blocks(title="JSON Type Generator") as demo:
    gr.Markdown("# JSON Type Generator")
    gr.Markdown("Paste or upload JSON, browse it as a tree, and generate TypeScript, Kotlin or Java types.")

    # State
    json_data_state = gr.State()
    tree_expanded_state = gr.State(value=settings.tree_expanded)

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### Input")
            with gr.Row():
                format_btn = gr.Button("Format")
                minify_btn = gr.Button("Minify")
                demo_btn = gr.Button("Load Demo", variant="primary")
            json_input = gr.Textbox(
                label="JSON",
                placeholder="Paste or type your JSON here...",
                lines=20,
                max_lines=40,
            )
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)

        # Right Panel: Visualization & Code
        with gr.Column(scale=1):
            gr.Markdown("### Visualization")
            with gr.Row():
                expand_btn = gr.Button("Expand All")
                collapse_btn = gr.Button("Collapse All")
            tree_view = gr.HTML(value=build_tree_html(None))

            gr.Markdown("### Generate Types")
            language_selector = gr.Radio(
                choices=[(lang.display_name, lang.value) for lang in Language],
                value=settings.default_language.value,
                label="Language",
            )
            root_name_input = gr.Textbox(
                label="Root Type Name (optional)",
                placeholder="RootStructure / RootData / RootEntity",
            )
            generate_btn = gr.Button("Generate Code", variant="primary")
            code_output = gr.Code(label="Generated Code", interactive=False)

    json_input.input(
        fn=handle_input_change,
        inputs=[json_input, tree_expanded_state],
        outputs=[json_data_state, status_msg, tree_view],
    )

    file_input.upload(
        fn=handle_file_upload,
        inputs=[file_input, tree_expanded_state],
        outputs=[json_input, json_data_state, status_msg, tree_view],
    )

    format_btn.click(
        fn=partial(format_handler, indent=settings.indent),
        inputs=[json_input, tree_expanded_state],
        outputs=[json_input, json_data_state, status_msg, tree_view],
    )

    minify_btn.click(
        fn=minify_handler,
        inputs=[json_input, tree_expanded_state],
        outputs=[json_input, json_data_state, status_msg, tree_view],
    )

    demo_btn.click(
        fn=partial(load_demo_handler, indent=settings.indent),
        inputs=[tree_expanded_state],
        outputs=[json_input, json_data_state, status_msg, tree_view],
    )

    expand_btn.click(
        fn=expand_all_handler,
        inputs=[json_data_state],
        outputs=[tree_view, tree_expanded_state],
    )

    collapse_btn.click(
        fn=collapse_all_handler,
        inputs=[json_data_state],
        outputs=[tree_view, tree_expanded_state],
    )

    generate_btn.click(
        fn=generate_code_handler,
        inputs=[json_data_state, language_selector, root_name_input],
        outputs=[code_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch(server_name=settings.host, server_port=settings.port)
