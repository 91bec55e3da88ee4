from horizontal_tabs.form.builder import FormBuilder, html_id, input_name

__all__ = ["FormBuilder", "html_id", "input_name"]
