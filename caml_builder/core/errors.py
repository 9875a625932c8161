"""
Exception taxonomy for the CAML query builder.

Every error here is a caller-input validation failure. They are raised
synchronously, before any XML is produced.
"""


class CamlBuilderError(ValueError):
    """Base class for all query-building errors."""


class UnknownFieldError(CamlBuilderError):
    """A field is not defined on the model and is not the identity field."""

    def __init__(self, field_name: str, model_name: str):
        self.field_name = field_name
        self.model_name = model_name
        super().__init__(
            f"Property {field_name} is not defined for type {model_name}."
        )


class InvalidOperandError(CamlBuilderError):
    """An operator was given a value of the wrong shape."""


class MalformedClauseError(CamlBuilderError):
    """A where clause does not follow the single-key object grammar."""


class UnknownOperatorError(MalformedClauseError):
    """A condition uses an operator with no CAML counterpart."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Unsupported operator '{operator}'.")


class InvalidOrderError(CamlBuilderError):
    """An order expression is not 'field' or 'field ASC|DESC'."""


class ModelDefinitionError(CamlBuilderError):
    """A model definition cannot be turned into model metadata."""
