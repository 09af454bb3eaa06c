from .render import render_document, render_row, render_rows, review_url, status_label
from .template import TEMPLATE

__all__ = ["render_document", "render_row", "render_rows", "review_url", "status_label", "TEMPLATE"]
