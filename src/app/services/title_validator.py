from typing import Optional
from libs.result import Result, Error, Return
from src.domain import TitleCheck, TITLE_MIN_LENGTH


class TitleValidator:
    """Service for validating task titles on create and update"""

    def check(self, title: Optional[str]) -> TitleCheck:
        """
        Classify a title against the task title rules

        Args:
            title: Title as decoded from the request, possibly None

        Returns:
            TitleCheck: ok, empty (missing or "") or too_short
        """
        if not title:
            return TitleCheck.empty
        if len(title) < TITLE_MIN_LENGTH:
            return TitleCheck.too_short
        return TitleCheck.ok

    def validate(self, title: Optional[str]) -> Result[str]:
        """
        Validate a title and wrap the outcome in a Result

        Returns:
            Result[str]: The title if valid, TITLE_EMPTY or TITLE_TOO_SHORT error otherwise
        """
        check = self.check(title)

        if check == TitleCheck.empty:
            return Return.err(Error(code="TITLE_EMPTY", message="Title cannot be empty"))

        if check == TitleCheck.too_short:
            return Return.err(
                Error(
                    code="TITLE_TOO_SHORT",
                    message=f"Title length must be at least {TITLE_MIN_LENGTH}",
                )
            )

        return Return.ok(title)
