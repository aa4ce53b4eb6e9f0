class AsciiArtError(Exception):
    """Base class for errors that end a conversion run."""

    exit_code = 1


class InvalidAlphabetName(AsciiArtError, ValueError):
    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"no such alphabet {name!r} (recognized alphabets: {', '.join(known)})")


UnknownAlphabet = InvalidAlphabetName


class AcquisitionError(AsciiArtError):
    """The input image could not be obtained or decoded."""


class ResourceFetchError(AcquisitionError):
    exit_code = 1

    def __init__(self, url: str, status: int | None = None, cause: Exception | None = None):
        self.url = url
        self.status = status
        self.cause = cause
        if status is not None:
            message = f"No such location {url} ({status})"
        else:
            message = f"Could not fetch HTTP resource {url}: {cause}"
        super().__init__(message)


class InputOpenError(AcquisitionError):
    exit_code = 4

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not open input file {path}: {cause}")


class DecodeError(AcquisitionError):
    exit_code = 3

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Could not decode input image: {cause}")


class OutputOpenError(AsciiArtError):
    exit_code = 2

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not open output file {path}: {cause}")
