"""
Outbound API clients for P4 Warehouse and R&L Carriers
"""
from bol_worker.clients.base import BaseApiClient
from bol_worker.clients.pick_ticket_client import PickTicketClient, build_filter
from bol_worker.clients.carrier_client import RLCarrierClient, build_bill_of_lading

__all__ = [
    "BaseApiClient",
    "PickTicketClient",
    "RLCarrierClient",
    "build_filter",
    "build_bill_of_lading",
]
