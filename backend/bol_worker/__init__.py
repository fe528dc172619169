"""
R&L Carrier BOL Integration Worker

Bridges P4 Warehouse and the R&L Carriers BillOfLading API:
- PickTicketClient: finds pick tickets needing a BOL, saves ProNumbers
- RLCarrierClient: creates BOLs and returns the carrier's ProNumber
- BolWorker: the polling loop tying the two together

Workflow: Fetch -> Book -> Write back -> Wait
"""

__version__ = "1.0.0"
