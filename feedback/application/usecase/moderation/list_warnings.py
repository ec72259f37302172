"""List warnings use case."""

from pydantic import BaseModel

from feedback.application.usecase.view import WarningItem
from feedback.domain.service import WarningService


class ListWarningsResponse(BaseModel):
    """List warnings response."""

    warnings: list[WarningItem]
    total: int


class ListWarningsUseCase:
    """Use case for the moderator's warning log, newest first."""

    def __init__(self, warning_service: WarningService) -> None:
        self.warning_service = warning_service

    async def execute(self) -> ListWarningsResponse:
        """Execute list warnings flow."""
        warnings = await self.warning_service.list_warnings()
        items = [WarningItem.from_warning(w) for w in warnings]
        return ListWarningsResponse(warnings=items, total=len(items))
