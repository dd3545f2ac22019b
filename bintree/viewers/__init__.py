"""Concrete drawing backends for rendering trees."""

from .pdf import PdfTreeDocument


def __getattr__(name: str):
    # tkinter is only imported when the interactive viewer is requested
    if name == "TkTreeViewer":
        from .tk import TkTreeViewer

        return TkTreeViewer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["PdfTreeDocument", "TkTreeViewer"]
