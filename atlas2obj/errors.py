# atlas2obj/errors.py


class AtlasError(ValueError):
    """Base class: the export could not be converted. Fatal for the whole file."""


class MissingMetadataError(AtlasError):
    """The meta block or its size entry is absent or unusable."""


class MalformedArrayError(AtlasError):
    """A vertices / verticesUV / triangles line holds a non-integer token or is missing."""


class StructuralDecodeError(AtlasError):
    """A reassembled shape block is not valid JSON or lacks frame fields."""


class TriangleIndexError(AtlasError):
    """A triangle references a vertex that does not exist."""
