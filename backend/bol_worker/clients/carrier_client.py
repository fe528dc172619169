"""
R&L Carriers BOL Client

Creates a Bill of Lading with R&L for a pick ticket and returns the
ProNumber the carrier assigns.
"""
from typing import Optional
from datetime import date
import httpx
import structlog

from bol_worker.clients.base import BaseApiClient
from bol_worker.config import CarrierSettings
from bol_worker.schemas import (
    BillOfLading,
    BillOfLadingRequest,
    BillOfLadingResponse,
    BolItem,
    Consignee,
    PickTicket,
    Shipper,
)

logger = structlog.get_logger()

BOL_DATE_FORMAT = "%m/%d/%Y"

# Placeholder shipment data. These are not yet derived from the pick
# ticket; every BOL carries the same shipper, consignee and freight line.
DEFAULT_SHIPPER = Shipper(
    company_name="P4 Software Inc.",
    address_line1="3755 Breakthrough Way",
    city="Las Vegas",
    state_or_province="NV",
    zip_or_postal_code="89135",
    country_code="USA",
    phone_number="702-555-0101",
)

DEFAULT_CONSIGNEE = Consignee(
    company_name="Evergreen Logistics",
    address_line1="8400 NW 25th St",
    city="Doral",
    state_or_province="FL",
    zip_or_postal_code="33198",
    country_code="USA",
)

DEFAULT_ITEMS = [
    BolItem(
        freight_class="70",
        pieces=8,
        weight=960,
        package_type="PLT",
        description="Zebra Barcode Scanners and Mobile Computers",
    ),
]


def build_bill_of_lading(
    pick_ticket: PickTicket,
    bol_date: Optional[date] = None
) -> BillOfLadingRequest:
    """Build the BOL request for a pick ticket, dated today unless given."""
    bol_date = bol_date or date.today()

    return BillOfLadingRequest(
        bill_of_lading=BillOfLading(
            bol_date=bol_date.strftime(BOL_DATE_FORMAT),
            shipper=DEFAULT_SHIPPER.model_copy(),
            consignee=DEFAULT_CONSIGNEE.model_copy(),
            items=[item.model_copy() for item in DEFAULT_ITEMS],
        )
    )


class RLCarrierClient(BaseApiClient):
    """Client for the R&L Carriers BillOfLading API."""

    system_name = "R&L"
    api_key_header = "apiKey"

    def __init__(
        self,
        settings: CarrierSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        super().__init__(
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout=settings.timeout_seconds,
            transport=transport,
        )
        self.settings = settings

    async def create_bill_of_lading(self, pick_ticket: PickTicket) -> Optional[str]:
        """
        Create a BOL with R&L for one pick ticket.

        Args:
            pick_ticket: The ticket being shipped

        Returns:
            The ProNumber, or None when the carrier call failed, returned a
            nonzero Code, or returned no ProNumber.
        """
        bol_request = build_bill_of_lading(pick_ticket)

        logger.debug(
            "Sending BOL request to R&L",
            pick_ticket_number=pick_ticket.pick_ticket_number
        )

        try:
            response = await self.client.post(
                self.settings.endpoint,
                json=bol_request.model_dump(by_alias=True)
            )
        except httpx.HTTPError as e:
            logger.error(
                "Error creating BOL",
                pick_ticket_number=pick_ticket.pick_ticket_number,
                error=str(e)
            )
            return None
        except Exception as e:
            logger.exception(
                "Unexpected error creating BOL",
                pick_ticket_number=pick_ticket.pick_ticket_number,
                error=str(e)
            )
            return None

        if not response.is_success:
            logger.error(
                "R&L API returned an error",
                pick_ticket_number=pick_ticket.pick_ticket_number,
                status_code=response.status_code,
                body=response.text
            )
            return None

        try:
            bol_response = BillOfLadingResponse.model_validate(response.json())
        except ValueError as e:
            logger.error(
                "Unreadable BOL response from R&L",
                pick_ticket_number=pick_ticket.pick_ticket_number,
                error=str(e)
            )
            return None

        if not bol_response.is_success:
            logger.warning(
                "R&L API returned no ProNumber",
                pick_ticket_number=pick_ticket.pick_ticket_number,
                code=bol_response.code,
                pro_number=bol_response.pro_number
            )
            return None

        logger.info(
            "Created BOL",
            pick_ticket_number=pick_ticket.pick_ticket_number,
            pro_number=bol_response.pro_number
        )
        return bol_response.pro_number
