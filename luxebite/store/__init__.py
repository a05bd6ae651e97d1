from .documents import DocumentNotFound, InMemoryDocumentStore

__all__ = ["DocumentNotFound", "InMemoryDocumentStore"]
