from .file_index import FileIndex, IndexedFile, IndexNotFoundError, build_index

__all__ = ["FileIndex", "IndexedFile", "IndexNotFoundError", "build_index"]
