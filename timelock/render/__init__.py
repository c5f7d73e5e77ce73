from .renderer import render_json, render_table, TABLE_HEADERS, NO_RESULTS_MESSAGE

__all__ = ["render_json", "render_table", "TABLE_HEADERS", "NO_RESULTS_MESSAGE"]
