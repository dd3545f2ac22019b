from .document import PdfTreeDocument

__all__ = ["PdfTreeDocument"]
