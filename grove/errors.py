"""Error types raised by Grove."""


class GroveError(Exception):
    """Base class for all Grove errors."""


class ObjectFormatError(GroveError, ValueError):
    """Stored bytes do not form a valid object."""


class MalformedHeaderError(ObjectFormatError):
    pass


class LengthMismatchError(ObjectFormatError):
    pass


class UnknownObjectTypeError(ObjectFormatError):
    pass


class MalformedTreeEntryError(ObjectFormatError):
    pass


class InvalidUtf8Error(ObjectFormatError):
    pass


class MalformedCommitLineError(ObjectFormatError):
    pass


class ObjectNotFoundError(GroveError, LookupError):
    pass


class AmbiguousReferenceError(GroveError, LookupError):
    """More than one stored object matches a short identifier."""

    def __init__(self, candidates: list[str]):
        self.candidates = sorted(candidates)
        super().__init__(f"Ambiguous reference: {self.candidates}")


class ReferenceNotFoundError(GroveError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Reference not found: {name}")


class ReferenceCycleError(GroveError):
    """A chain of symbolic references loops or is too deep."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Reference cycle: {' -> '.join(chain)}")


class StorageError(GroveError):
    """Underlying filesystem or compression failure."""


class RepositoryNotFoundError(GroveError):
    pass
