"""
BOL Worker Processing Loop

Polls P4 Warehouse for pick tickets that need an R&L Bill of Lading,
creates the BOL and writes the ProNumber back:

    fetch eligible -> for each ticket: create BOL -> update ProNumber
    -> wait interval -> repeat

Tickets are processed one at a time. A failure on one ticket never stops
the batch and a failure of a whole cycle never stops the loop; only the
stop event does.
"""
from typing import List
from dataclasses import dataclass, asdict
from enum import Enum
import asyncio
import structlog

from bol_worker.clients.carrier_client import RLCarrierClient
from bol_worker.clients.pick_ticket_client import PickTicketClient
from bol_worker.config import ServiceSettings
from bol_worker.schemas import PickTicket

logger = structlog.get_logger()


class WorkerState(str, Enum):
    """States the worker can be in."""
    IDLE = "IDLE"
    PROCESSING = "PROCESSING"
    STOPPED = "STOPPED"


@dataclass
class CycleResult:
    """Counters for one processing cycle."""
    fetched: int = 0
    booked: int = 0
    updated: int = 0
    booking_failed: int = 0
    update_failed: int = 0
    errored: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


class BolWorker:
    """
    Sequential P4W -> R&L -> P4W processing loop.

    Note that a BOL created with R&L whose ProNumber cannot be written back
    leaves the ticket eligible, so it will be booked again next cycle.
    """

    def __init__(
        self,
        pick_ticket_client: PickTicketClient,
        carrier_client: RLCarrierClient,
        settings: ServiceSettings
    ):
        self.pick_ticket_client = pick_ticket_client
        self.carrier_client = carrier_client
        self.settings = settings
        self.state = WorkerState.IDLE
        self.cycle_count = 0

    async def run(self, stop_event: asyncio.Event) -> None:
        """
        Run cycles until stop_event is set.

        The first cycle starts immediately. Setting the event interrupts the
        interval wait but not a cycle in progress.
        """
        logger.info(
            "R&L Carrier BOL integration worker started",
            check_interval_seconds=self.settings.check_interval_seconds
        )

        while not stop_event.is_set():
            try:
                await self.run_cycle()
            except Exception as e:
                logger.exception(
                    "Unhandled error in processing cycle",
                    cycle=self.cycle_count,
                    error=str(e)
                )

            self.state = WorkerState.IDLE
            await self._wait_for_next_cycle(stop_event)

        self.state = WorkerState.STOPPED
        logger.info("R&L Carrier BOL integration worker stopped", cycles=self.cycle_count)

    async def _wait_for_next_cycle(self, stop_event: asyncio.Event) -> None:
        try:
            await asyncio.wait_for(
                stop_event.wait(),
                timeout=self.settings.check_interval_seconds
            )
        except asyncio.TimeoutError:
            pass

    async def run_cycle(self) -> CycleResult:
        """Fetch one batch of eligible pick tickets and process it."""
        self.state = WorkerState.PROCESSING
        self.cycle_count += 1
        result = CycleResult()

        logger.debug("Starting PickTicket processing cycle", cycle=self.cycle_count)

        pick_tickets: List[PickTicket] = await self.pick_ticket_client.get_eligible_pick_tickets()
        result.fetched = len(pick_tickets)

        if not pick_tickets:
            logger.debug("No eligible PickTickets found", cycle=self.cycle_count)
            self.state = WorkerState.IDLE
            return result

        logger.info(
            "Processing eligible PickTickets",
            cycle=self.cycle_count,
            count=len(pick_tickets)
        )

        for index, pick_ticket in enumerate(pick_tickets):
            if index:
                # Smooth the outbound request rate
                await asyncio.sleep(self.settings.record_delay_seconds)
            await self._process_pick_ticket(pick_ticket, result)

        logger.info(
            "Completed PickTicket processing cycle",
            cycle=self.cycle_count,
            **result.to_dict()
        )
        self.state = WorkerState.IDLE
        return result

    async def _process_pick_ticket(self, pick_ticket: PickTicket, result: CycleResult) -> None:
        try:
            pro_number = await self.carrier_client.create_bill_of_lading(pick_ticket)

            if not pro_number:
                result.booking_failed += 1
                logger.warning(
                    "Failed to create BOL for PickTicket",
                    pick_ticket_number=pick_ticket.pick_ticket_number
                )
                return

            result.booked += 1
            updated = await self.pick_ticket_client.update_pro_number(pick_ticket.id, pro_number)

            if updated:
                result.updated += 1
                logger.info(
                    "Successfully processed PickTicket",
                    pick_ticket_number=pick_ticket.pick_ticket_number,
                    pro_number=pro_number
                )
            else:
                # BOL exists at R&L but P4W does not know it; needs attention
                result.update_failed += 1
                logger.error(
                    "Failed to update PickTicket with ProNumber",
                    pick_ticket_number=pick_ticket.pick_ticket_number,
                    pro_number=pro_number
                )
        except Exception as e:
            result.errored += 1
            logger.exception(
                "Error processing PickTicket",
                pick_ticket_number=pick_ticket.pick_ticket_number,
                error=str(e)
            )
