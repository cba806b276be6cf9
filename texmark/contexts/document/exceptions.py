"""Custom exceptions for the document context."""


class InvalidDocumentStructureError(ValueError):
    """
    Exception raised when a document description is malformed.

    This is raised when the YAML file doesn't conform to the expected document
    schema (e.g., missing 'nodes', unknown node types, missing node fields).
    """

    pass
