"""
Check-in page handler: slot grid, summary and the check-in modal.
"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from ...core.enums import FormField, SlotClickOutcome
from ...core.exceptions import BookingValidationError, CapacityExceededError
from ...services.booking import CheckinService
from ...utils.logging import get_logger

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"

logger = get_logger("parking.api")


class FieldChange(BaseModel):
    """A single form field edit sent from the modal."""
    name: str
    value: str = ""


class CheckinHandler:
    """Routes behind the single check-in page."""

    def __init__(self, checkin_service: CheckinService):
        self.service = checkin_service
        self.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
        self.router = APIRouter()

        # One pending alert, shown on the next page render
        self._alert: Optional[str] = None

        self._setup_routes()

    def _redirect_home(self) -> RedirectResponse:
        return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)

    def _setup_routes(self):

        @self.router.get("/")
        async def checkin_page(request: Request):
            await self.service.ensure_loaded()
            alert, self._alert = self._alert, None
            settings = self.service.settings
            return self.templates.TemplateResponse(
                request,
                "checkin.html",
                {
                    "app_name": settings.app_name,
                    "rate_per_hour": self.service.rate_per_hour,
                    "currency": settings.currency,
                    "summary": self.service.summary(),
                    "slots": self.service.slot_views(),
                    "form": self.service.form,
                    "form_open": self.service.form_open,
                    "fields": FormField,
                    "alert": alert,
                },
            )

        @self.router.post("/slots/{slot_index}")
        async def click_slot(slot_index: int):
            await self.service.ensure_loaded()
            try:
                outcome = await self.service.click_slot(slot_index)
            except BookingValidationError as e:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
            if outcome is SlotClickOutcome.CLEARED:
                logger.info(f"slot {slot_index} cleared")
            return self._redirect_home()

        @self.router.post("/checkin/open")
        async def open_form():
            self.service.open_form()
            return self._redirect_home()

        @self.router.post("/checkin/close")
        async def close_form():
            self.service.close_form()
            return self._redirect_home()

        @self.router.post("/checkin/field")
        async def change_field(change: FieldChange):
            try:
                form = self.service.update_field(change.name, change.value)
            except BookingValidationError as e:
                raise HTTPException(status_code=422, detail=str(e))
            return form.totals()

        @self.router.post("/checkin")
        async def submit_checkin(
            userName: str = Form(""),
            carNumber: str = Form(""),
            checkInTime: str = Form(""),
            checkOutTime: str = Form(""),
        ):
            await self.service.ensure_loaded()
            submitted = {
                FormField.USER_NAME: userName,
                FormField.CAR_NUMBER: carNumber,
                FormField.CHECK_IN_TIME: checkInTime,
                FormField.CHECK_OUT_TIME: checkOutTime,
            }
            for field, value in submitted.items():
                self.service.update_field(field.value, value)

            try:
                await self.service.check_in()
            except CapacityExceededError as e:
                self._alert = str(e)
            return self._redirect_home()
