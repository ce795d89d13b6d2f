from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar, Union

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)

# Maps pydantic error types to the reasons reported to users. Custom errors
# raised by our own validators already carry the final message.
REASONS: Dict[str, str] = {
    "missing": "missing required field",
    "model_type": "expected an object",
    "model_attributes_type": "expected an object",
    "dict_type": "expected an object",
    "list_type": "expected an array",
    "string_type": "expected a string",
    "string_unicode": "expected a string",
}


def to_json_pointer(location: Sequence[Union[str, int]]) -> str:
    """
    Formats a pydantic error location as a JSON pointer (RFC 6901).
    The empty location, i.e. the document itself, is the empty string.
    """

    return "".join(
        "/" + str(token).replace("~", "~0").replace("/", "~1") for token in location
    )


@dataclass(frozen=True)
class Violation:
    path: str
    reason: str

    def __str__(self):
        return f"{self.path or '/'}: {self.reason}"

    @classmethod
    def from_pydantic_error(cls, error: Dict[str, Any]) -> "Violation":
        reason = REASONS.get(error["type"], error["msg"])
        return cls(path=to_json_pointer(error["loc"]), reason=reason)

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "reason": self.reason}


@dataclass(frozen=True)
class ValidationResult(Generic[ModelType]):
    violations: List[Violation] = field(default_factory=list)
    document: Optional[ModelType] = None

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def __bool__(self):
        return self.is_valid

    def details(self) -> Optional[Dict[str, Any]]:
        """
        Return the violations in a JSON serializable format, or None if the
        document is valid.
        """
        if self.is_valid:
            return None
        return {"errors": [violation.to_dict() for violation in self.violations]}
