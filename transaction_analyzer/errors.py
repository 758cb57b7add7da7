"""Validation errors raised when appending transactions."""


class TransactionValidationError(ValueError):
    """Base class for rejected transaction candidates."""

    kind = "invalid_transaction"

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class MissingFieldError(TransactionValidationError):
    """Raised when a required field is absent from the candidate."""

    kind = "missing_field"

    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}", field)


class InvalidTypeError(TransactionValidationError):
    """Raised when the transaction type is not debit or credit."""

    kind = "invalid_type"

    def __init__(self, value: object):
        super().__init__(
            f"Invalid transaction type: {value!r} (expected 'debit' or 'credit')",
            "type",
        )
        self.value = value


class InvalidAmountError(TransactionValidationError):
    """Raised when the amount is not a non-negative number."""

    kind = "invalid_amount"

    def __init__(self, value: object):
        super().__init__(
            f"Transaction amount must be a non-negative number, got {value!r}",
            "amount",
        )
        self.value = value
