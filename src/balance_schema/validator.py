"""
Validation of JSON documents against the response schemas.

Malformed documents are a normal outcome of validation: the validator reports
them as a list of violations instead of raising. Only malformed JSON syntax,
detected before validation, is reported with an exception (`ParseError`).
"""

import logging
from typing import Any, Generic, Type

from pydantic import ValidationError

import balance_schema.toolkit.json as balance_json
from balance_schema.exceptions import InvalidDocument, ParseError
from balance_schema.schemas.balances import BalanceResponse
from balance_schema.toolkit.json import SerializedJsonInput
from balance_schema.types.violations import ModelType, ValidationResult, Violation

logger = logging.getLogger(__name__)


def parse_document(raw: SerializedJsonInput) -> Any:
    try:
        return balance_json.loads(raw)
    except (balance_json.DecodeError, ValueError) as e:
        raise ParseError(f"Document is not valid JSON: {e}") from e


class SchemaValidator(Generic[ModelType]):
    """
    Checks parsed JSON values against one schema. Validators hold no state
    besides their schema and can be shared freely between threads.
    """

    def __init__(self, schema: Type[ModelType]):
        self.schema = schema

    def __repr__(self):
        return f"{self.__class__.__name__}({self.schema.__name__})"

    def validate(self, document: Any) -> ValidationResult[ModelType]:
        try:
            model = self.schema.model_validate(document)
        except ValidationError as e:
            violations = [Violation.from_pydantic_error(error) for error in e.errors()]
            logger.debug(
                "Document does not match %s: %s",
                self.schema.__name__,
                ", ".join(str(violation) for violation in violations),
            )
            return ValidationResult(violations=violations)

        return ValidationResult(document=model)

    def validate_json(self, raw: SerializedJsonInput) -> ValidationResult[ModelType]:
        return self.validate(parse_document(raw))

    def load(self, document: Any) -> ModelType:
        """
        Same as `validate`, for callers that expect an exception on
        invalid documents.

        :raises InvalidDocument: if the document does not match the schema.
        """
        result = self.validate(document)
        if result.document is None:
            raise InvalidDocument(result.violations)
        return result.document


balance_response_validator = SchemaValidator(BalanceResponse)


def validate(document: Any) -> ValidationResult[BalanceResponse]:
    return balance_response_validator.validate(document)


def validate_json(raw: SerializedJsonInput) -> ValidationResult[BalanceResponse]:
    return balance_response_validator.validate_json(raw)
