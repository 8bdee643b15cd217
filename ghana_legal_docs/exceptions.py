"""Exceptions raised at the rendering and storage boundaries"""


class DocumentGenerationError(Exception):
    """A renderer failed to produce its output (packing, PDF build, print view)"""

    def __init__(self, message: str, fmt: str = ""):
        super().__init__(message)
        self.format = fmt


class DraftStorageError(Exception):
    """A draft could not be saved, loaded or cleared"""
