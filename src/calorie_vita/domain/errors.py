"""Domain error types."""


class InvalidInputError(ValueError):
    """Raised when a calculator precondition is violated."""


class ProfileIncompleteError(LookupError):
    """Raised when a user profile lacks the metrics a report needs."""

    def __init__(self, user_id: object, missing: str) -> None:
        super().__init__(f"Profile for user {user_id} is missing {missing}")
        self.user_id = user_id
        self.missing = missing
