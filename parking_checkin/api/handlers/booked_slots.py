"""
In-memory ``bookedSlots`` resource.

Stands in for the json-server mock the check-in UI talks to during
development: list, create and delete on a single collection.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, HTTPException, status

from ...core.models import new_booking_id
from ...utils.logging import get_logger

logger = get_logger("parking.booked_slots")


class BookedSlotsHandler:
    """Serves ``/bookedSlots`` from a process-local list."""

    def __init__(self):
        self.router = APIRouter()
        self.records: List[Dict[str, Any]] = []
        self._setup_routes()

    def _setup_routes(self):

        @self.router.get("/bookedSlots")
        async def list_booked_slots() -> List[Dict[str, Any]]:
            return self.records

        @self.router.post("/bookedSlots", status_code=status.HTTP_201_CREATED)
        async def create_booked_slot(record: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
            record = dict(record)
            record["id"] = str(record.get("id") or new_booking_id())
            if any(r["id"] == record["id"] for r in self.records):
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"Duplicate id {record['id']}",
                )
            self.records.append(record)
            logger.info(f"stored booked slot {record['id']}")
            return record

        @self.router.delete("/bookedSlots/{record_id}")
        async def delete_booked_slot(record_id: str) -> Dict[str, Any]:
            for i, r in enumerate(self.records):
                if r["id"] == record_id:
                    del self.records[i]
                    logger.info(f"removed booked slot {record_id}")
                    return {}
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
