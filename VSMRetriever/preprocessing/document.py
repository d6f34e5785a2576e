import copy
from typing import Any, Dict, Mapping, Optional


class RawDocument:
    """
    A document as supplied by the caller: its text and optional metadata.
    The model never mutates raw documents.
    """

    __slots__ = ("content", "meta")

    def __init__(self, content: str = "", meta: Optional[Mapping[str, Any]] = None):
        self.content = content
        self.meta = meta

    @classmethod
    def coerce(cls, document) -> "RawDocument":
        """
        Accept a RawDocument, a plain string or a dictionary with
        "content" (or "text") and "meta" keys.
        """
        if isinstance(document, RawDocument):
            return document
        if isinstance(document, str):
            return cls(document)
        if isinstance(document, Mapping):
            return cls(
                document.get("content", document.get("text", "")),
                document.get("meta"),
            )
        raise TypeError(f"Cannot build a document from {type(document).__name__}")

    def __eq__(self, other):
        if not isinstance(other, RawDocument):
            return NotImplemented
        return self.content == other.content and (self.meta or {}) == (other.meta or {})

    def __repr__(self):
        return f"RawDocument(content={self.content!r}, meta={self.meta!r})"


class VectorizedDocument:
    """
    A document represented as a vector. Dimensions have no natural order,
    so the vector is a mapping from term to weight.

    Both the vector and the metadata are copied whenever they are assigned,
    metadata deeply, so that a vectorized document never aliases structures
    owned by the caller.
    """

    def __init__(self, vector: Mapping[str, float], content: str, meta: Optional[Mapping[str, Any]] = None):
        """
        Initialize a vectorized document.

        Args:
            vector: Mapping from term to weight (raw counts before weighing)
            content: Original text of the document
            meta: Arbitrary metadata attached by the caller
        """
        self.vector = vector
        self.meta = meta
        self.content = content

    @property
    def vector(self) -> Dict[str, float]:
        return self._vector

    @vector.setter
    def vector(self, vector: Mapping[str, float]):
        self._vector = dict(vector)

    @property
    def meta(self) -> Dict[str, Any]:
        return self._meta

    @meta.setter
    def meta(self, meta: Optional[Mapping[str, Any]]):
        self._meta = copy.deepcopy(dict(meta)) if meta else {}

    def with_vector(self, vector: Mapping[str, float]) -> "VectorizedDocument":
        """Return a copy of this document carrying a different vector."""
        return VectorizedDocument(vector, self.content, self._meta)

    def to_raw(self) -> RawDocument:
        return RawDocument(self.content, copy.deepcopy(self._meta))

    def __repr__(self):
        return f"VectorizedDocument(terms={len(self._vector)}, content={self.content!r})"
