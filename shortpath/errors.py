"""Error taxonomy. Every failure carries a code and a one-line message."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    NO_MEMORY = "no_memory"
    INVALID_NODE_FILE = "invalid_node_file"
    INVALID_EDGE_FILE = "invalid_edge_file"
    INVALID_SOURCE_NODE = "invalid_source_node"
    INVALID_DEST_NODE = "invalid_dest_node"
    INVALID_PARAMETERS = "invalid_parameters"
    NO_PATH = "no_path"
    CANNOT_CREATE_FILE = "cannot_create_file"


class ShortPathError(Exception):
    """Base class for errors surfaced to the CLI as exit code 1."""

    code: ErrorCode
    default_message: str = "Unexpected error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AllocationFailure(ShortPathError):
    code = ErrorCode.NO_MEMORY
    default_message = "Cannot allocate new memory."


class InvalidNodeFile(ShortPathError):
    code = ErrorCode.INVALID_NODE_FILE
    default_message = "Cannot open nodes file. No such file or directory."


class InvalidEdgeFile(ShortPathError):
    code = ErrorCode.INVALID_EDGE_FILE
    default_message = "Cannot open edges file. No such file or directory."


class InvalidSourceNode(ShortPathError):
    code = ErrorCode.INVALID_SOURCE_NODE
    default_message = "Invalid source node id."


class InvalidDestinationNode(ShortPathError):
    code = ErrorCode.INVALID_DEST_NODE
    default_message = "Invalid destination node id."


class InvalidArguments(ShortPathError):
    code = ErrorCode.INVALID_PARAMETERS
    default_message = "Invalid number of parameters."


class NoPathExists(ShortPathError):
    code = ErrorCode.NO_PATH
    default_message = "No path exists between these two nodes."


class OutputCreationFailure(ShortPathError):
    code = ErrorCode.CANNOT_CREATE_FILE
    default_message = "Cannot create new file to print data in."
