"""
P4 Warehouse PickTicket Schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Any, Iterable, List, Optional


class PickTicket(BaseModel):
    """A P4 Warehouse pick ticket waiting for a carrier booking."""
    id: str = Field(alias="Id")
    pick_ticket_number: str = Field(default="", alias="PickTicketNumber")
    pro_number: Optional[str] = Field(default=None, alias="ProNumber")
    carrier: str = Field(default="", alias="Carrier")
    pick_ticket_state: str = Field(default="", alias="PickTicketState")

    class Config:
        populate_by_name = True

    @field_validator("pick_ticket_number", "carrier", "pick_ticket_state", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        # P4W sends null for unset text fields
        return "" if value is None else value

    @property
    def has_pro_number(self) -> bool:
        return bool(self.pro_number)

    def is_eligible(self, carrier: str, states: Iterable[str]) -> bool:
        """True while the ticket has no ProNumber and matches carrier and state."""
        return (
            not self.has_pro_number
            and self.carrier.casefold() == carrier.casefold()
            and self.pick_ticket_state in set(states)
        )


class PickTicketUpdateRequest(BaseModel):
    """Body for P4W's CreateOrUpdate call after a BOL was created."""
    id: str = Field(alias="Id")
    pro_number: str = Field(alias="ProNumber")

    class Config:
        populate_by_name = True


class ODataResponse(BaseModel):
    """
    OData collection envelope returned by P4W queries.

    Records are left raw so one unreadable ticket can be skipped without
    losing the rest of the batch.
    """
    value: List[Any] = Field(default_factory=list)
