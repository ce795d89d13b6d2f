from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from balance_schema.types.violations import Violation


class BalanceSchemaException(Exception): ...


class InvalidConfigException(BalanceSchemaException): ...


class ParseError(BalanceSchemaException):
    """
    The input is not syntactically valid JSON. Raised before any schema
    validation is attempted.
    """

    ...


class UnknownSchema(BalanceSchemaException):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown schema: '{self.name}'"


class InvalidDocument(BalanceSchemaException):
    """
    The document does not match its schema. Only raised by the validator
    when the caller explicitly asked for an exception, see `SchemaValidator.load`.
    """

    def __init__(self, violations: List[Violation]):
        super().__init__(violations)
        self.violations = violations

    def __str__(self):
        return "; ".join(str(violation) for violation in self.violations)
