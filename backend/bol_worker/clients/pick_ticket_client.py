"""
P4 Warehouse PickTicket Client

Reads pick tickets that still need an R&L BOL and writes the resulting
ProNumber back. Failures are logged and absorbed: an empty fetch or a
False update simply means the ticket is picked up again next cycle.
"""
from typing import Iterable, List, Optional
from urllib.parse import quote
import httpx
import structlog

from bol_worker.clients.base import BaseApiClient
from bol_worker.config import ServiceSettings
from bol_worker.schemas import ODataResponse, PickTicket, PickTicketUpdateRequest

logger = structlog.get_logger()

PICK_TICKET_QUERY_PATH = "odata/PickTicket"
PICK_TICKET_UPDATE_PATH = "api/PickTicketApi/CreateOrUpdate"
PICK_TICKET_FIELDS = ["Id", "PickTicketNumber", "ProNumber", "Carrier", "PickTicketState"]


def _odata_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def build_filter(carrier: str, states: Iterable[str]) -> str:
    """
    Build the OData $filter selecting tickets that need a BOL.

    Example:
        Carrier eq 'R&L CARRIERS' and (PickTicketState eq 'ReadyToPick'
        or PickTicketState eq 'Waved') and (ProNumber eq null or
        length(ProNumber) eq 0)
    """
    state_clause = " or ".join(
        f"PickTicketState eq {_odata_literal(state)}" for state in states
    )
    return (
        f"Carrier eq {_odata_literal(carrier)}"
        f" and ({state_clause})"
        " and (ProNumber eq null or length(ProNumber) eq 0)"
    )


class PickTicketClient(BaseApiClient):
    """Client for the P4 Warehouse OData and PickTicket APIs."""

    system_name = "P4W"
    api_key_header = "ApiKey"

    def __init__(
        self,
        settings: ServiceSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        super().__init__(
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout=settings.timeout_seconds,
            transport=transport,
        )
        self.settings = settings

    def build_request_uri(self) -> str:
        select = "$select=" + ",".join(PICK_TICKET_FIELDS)
        odata_filter = "$filter=" + quote(
            build_filter(self.settings.carrier_name, self.settings.pick_ticket_states),
            safe=""
        )
        top = f"$top={self.settings.max_records_per_check}"
        return f"{PICK_TICKET_QUERY_PATH}?{select}&{odata_filter}&{top}"

    async def get_eligible_pick_tickets(self) -> List[PickTicket]:
        """
        Fetch pick tickets eligible for BOL creation.

        Returns:
            Tickets in the order P4W returned them, at most
            max_records_per_check. Empty on any failure.
        """
        request_uri = self.build_request_uri()
        logger.debug("Fetching eligible PickTickets", request_uri=request_uri)

        try:
            response = await self.client.get(request_uri)

            if not response.is_success:
                logger.error(
                    "P4W API returned an error",
                    status_code=response.status_code,
                    body=response.text
                )
                return []

            odata_response = ODataResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            logger.error("Error fetching eligible PickTickets", error=str(e))
            return []
        except ValueError as e:
            # Covers both invalid JSON and pydantic validation errors
            logger.error("Unreadable PickTicket response from P4W", error=str(e))
            return []
        except Exception as e:
            logger.exception("Unexpected error fetching eligible PickTickets", error=str(e))
            return []

        pick_tickets = []
        dropped = 0
        for record in odata_response.value:
            try:
                ticket = PickTicket.model_validate(record)
            except ValueError as e:
                logger.warning("Skipped unreadable PickTicket record", error=str(e))
                continue

            if ticket.is_eligible(self.settings.carrier_name, self.settings.pick_ticket_states):
                pick_tickets.append(ticket)
            else:
                dropped += 1

        if dropped:
            logger.warning(
                "Dropped PickTickets not matching the eligibility filter",
                count=dropped
            )

        logger.info("Retrieved eligible PickTickets", count=len(pick_tickets))
        return pick_tickets[:self.settings.max_records_per_check]

    async def update_pro_number(self, pick_ticket_id: str, pro_number: str) -> bool:
        """
        Save a ProNumber on a pick ticket via CreateOrUpdate.

        Returns:
            True on a 2xx response, False otherwise. Never retries.
        """
        update_request = PickTicketUpdateRequest(id=pick_ticket_id, pro_number=pro_number)

        logger.debug(
            "Updating PickTicket",
            pick_ticket_id=pick_ticket_id,
            pro_number=pro_number
        )

        try:
            response = await self.client.post(
                PICK_TICKET_UPDATE_PATH,
                json=update_request.model_dump(by_alias=True)
            )
        except httpx.HTTPError as e:
            logger.error(
                "Error updating PickTicket",
                pick_ticket_id=pick_ticket_id,
                pro_number=pro_number,
                error=str(e)
            )
            return False
        except Exception as e:
            logger.exception(
                "Unexpected error updating PickTicket",
                pick_ticket_id=pick_ticket_id,
                pro_number=pro_number,
                error=str(e)
            )
            return False

        if not response.is_success:
            logger.error(
                "P4W rejected PickTicket update",
                pick_ticket_id=pick_ticket_id,
                pro_number=pro_number,
                status_code=response.status_code,
                body=response.text
            )
            return False

        logger.info(
            "Updated PickTicket",
            pick_ticket_id=pick_ticket_id,
            pro_number=pro_number
        )
        return True
