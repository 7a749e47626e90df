from functools import partial

import gradio as gr

from json_field_builder import log
from json_field_builder.config import load_settings
from json_field_builder.fields import FIELD_TYPE_CHOICES
from json_field_builder.handlers import (
    handle_add_field,
    handle_delete,
    handle_rename,
    handle_retype,
    render_preview,
    submit_handler,
)
from json_field_builder.paths import child_path

settings = load_settings()

CSS = """
.nested-fields { padding-left: 2rem; }
"""

# --- UI Definition ---
with gr.Blocks(title="JSON Field Builder", css=CSS) as demo:
    gr.Markdown("# JSON Field Builder")
    gr.Markdown("Describe fields and their types, then download a sample JSON document built from them.")

    # State
    tree_state = gr.State(value=())

    with gr.Row():
        # Left Panel: Field Builder
        with gr.Column(scale=1):
            gr.Markdown("### 🛠️ Field Builder")

            @gr.render(inputs=[tree_state], triggers=[tree_state.change, demo.load])
            def render_fields(tree):
                def recursive_ui(fields, path=()):
                    for index, field in enumerate(fields):
                        current = child_path(path, index)
                        with gr.Row():
                            name_box = gr.Textbox(value=field.name, placeholder="Field Name", show_label=False, scale=2)
                            type_dropdown = gr.Dropdown(
                                choices=FIELD_TYPE_CHOICES,
                                value=field.type.value,
                                show_label=False,
                                interactive=True,
                                scale=2,
                            )
                            delete_btn = gr.Button("🗑 Delete", variant="stop", scale=0, min_width=110)

                        # Re-rendering on every keystroke would steal focus, so names commit on blur/enter.
                        name_box.blur(fn=partial(handle_rename, current), inputs=[tree_state, name_box], outputs=[tree_state, preview])
                        name_box.submit(fn=partial(handle_rename, current), inputs=[tree_state, name_box], outputs=[tree_state, preview])
                        type_dropdown.input(fn=partial(handle_retype, current), inputs=[tree_state, type_dropdown], outputs=[tree_state, preview])
                        delete_btn.click(fn=partial(handle_delete, current), inputs=[tree_state], outputs=[tree_state, preview])

                        if field.type.is_container:
                            with gr.Column(elem_classes=["nested-fields"]):
                                recursive_ui(field.children or (), current)
                                add_nested_btn = gr.Button("➕ Add Nested Field", size="sm")
                                add_nested_btn.click(fn=partial(handle_add_field, current), inputs=[tree_state], outputs=[tree_state, preview])

                recursive_ui(tree or ())

            add_field_btn = gr.Button("+ Add Field", variant="primary")
            submit_btn = gr.Button("Submit JSON")
            status_msg = gr.Textbox(label="Status", interactive=False)
            download_output = gr.File(label="Download schema.json")

        # Right Panel: Live Preview
        with gr.Column(scale=1):
            gr.Markdown("### 📄 Live JSON Preview")
            preview = gr.Code(value=render_preview(()), language="json", interactive=False, label="Preview")

    add_field_btn.click(
        fn=partial(handle_add_field, ()),
        inputs=[tree_state],
        outputs=[tree_state, preview],
    )

    submit_btn.click(
        fn=partial(submit_handler, file_name=settings.export_filename, directory=settings.export_dir),
        inputs=[tree_state],
        outputs=[download_output, status_msg],
    )

    # Date fields embed the current time, so the preview is rebuilt on load too.
    demo.load(fn=render_preview, inputs=[tree_state], outputs=[preview])

if __name__ == "__main__":
    log.setup(settings.log_file, settings.log_level)
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
