"""Per-element validators for custom form responses.

Each interactive element carries one validator describing which raw values
the client may send back for it. A validator is a kind plus its parameters.
"""

from enum import Enum

from pydantic import BaseModel

# A single raw value returned by the client for one element.
FormValue = None | bool | int | float | str


class ValidatorKind(str, Enum):
    """Kinds of value checks an element can apply."""

    EXACTLY_NULL = "exactly_null"  # readonly elements
    IS_BOOL = "is_bool"  # toggle
    NUMERIC_RANGE = "numeric_range"  # slider
    INDEX_IN_RANGE = "index_in_range"  # step_slider, dropdown
    IS_STRING = "is_string"  # input


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a valid number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ElementValidator(BaseModel):
    """Validator for a single form element.

    Attributes:
        kind: Which check to apply.
        minimum: Lower bound for NUMERIC_RANGE (inclusive).
        maximum: Upper bound for NUMERIC_RANGE (inclusive).
        size: Number of choices for INDEX_IN_RANGE.
    """

    kind: ValidatorKind
    minimum: int | float | None = None
    maximum: int | float | None = None
    size: int | None = None

    model_config = {"frozen": True}

    @classmethod
    def exactly_null(cls) -> "ElementValidator":
        return cls(kind=ValidatorKind.EXACTLY_NULL)

    @classmethod
    def is_bool(cls) -> "ElementValidator":
        return cls(kind=ValidatorKind.IS_BOOL)

    @classmethod
    def numeric_range(cls, minimum: int | float, maximum: int | float) -> "ElementValidator":
        # bounds come straight from the caller and are kept uncoerced
        return cls.model_construct(
            kind=ValidatorKind.NUMERIC_RANGE,
            minimum=minimum,
            maximum=maximum,
        )

    @classmethod
    def index_in_range(cls, size: int) -> "ElementValidator":
        return cls(kind=ValidatorKind.INDEX_IN_RANGE, size=size)

    @classmethod
    def is_string(cls) -> "ElementValidator":
        return cls(kind=ValidatorKind.IS_STRING)

    def accepts(self, value: FormValue) -> bool:
        """Check whether a raw client value is acceptable for this element.

        Args:
            value: The value the client sent for the element.

        Returns:
            True if the value passes the check, False otherwise.
        """
        if self.kind == ValidatorKind.EXACTLY_NULL:
            return value is None

        if self.kind == ValidatorKind.IS_BOOL:
            return isinstance(value, bool)

        if self.kind == ValidatorKind.NUMERIC_RANGE:
            if not _is_number(value):
                return False
            try:
                return self.minimum <= value <= self.maximum
            except TypeError:
                # non-numeric bounds accept nothing
                return False

        if self.kind == ValidatorKind.INDEX_IN_RANGE:
            if not _is_index(value):
                return False
            return 0 <= value < self.size

        # IS_STRING
        return isinstance(value, str)

    def __call__(self, value: FormValue) -> bool:
        return self.accepts(value)
