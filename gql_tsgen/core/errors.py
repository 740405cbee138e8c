"""Exceptions raised during a generation run.

Every error is fatal to the run: nothing is written once one is raised.
"""


class TsGenError(Exception):
    """Base class for generation errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DocumentReadError(TsGenError):
    """A schema file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"could not read file {path}: {reason}")


class DocumentParseError(TsGenError):
    """The SDL parser rejected a schema file."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"error parsing schema in file {path}: {reason}")


class DefinitionConflictError(TsGenError):
    """Two documents declare the same type or enum with different shapes."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} {name} has conflicting definitions")


class OutputWriteError(TsGenError):
    """The generated file could not be created or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"could not write file {path}: {reason}")
