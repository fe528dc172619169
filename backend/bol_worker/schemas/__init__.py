"""
Pydantic Schemas for the P4W and R&L APIs
"""
from bol_worker.schemas.pick_ticket import PickTicket, PickTicketUpdateRequest, ODataResponse
from bol_worker.schemas.bill_of_lading import (
    BillOfLading,
    BillOfLadingRequest,
    BillOfLadingResponse,
    BolItem,
    Consignee,
    Shipper,
)

__all__ = [
    # P4 Warehouse
    "PickTicket",
    "PickTicketUpdateRequest",
    "ODataResponse",
    # R&L Carriers
    "BillOfLading",
    "BillOfLadingRequest",
    "BillOfLadingResponse",
    "BolItem",
    "Consignee",
    "Shipper",
]
