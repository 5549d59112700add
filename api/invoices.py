"""POST routes for the invoice create, edit and delete forms."""

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse, RedirectResponse, Response

from core.actions import InvoiceActions
from core.config import InvoicesConfig
from core.models import ActionState, Redirect


def create_invoices_router(actions: InvoiceActions, config: InvoicesConfig) -> APIRouter:
    router = APIRouter()
    listing = config.listing_path.rstrip("/")

    def respond(result: ActionState | Redirect) -> Response:
        if isinstance(result, Redirect):
            return RedirectResponse(result.location, status_code=config.redirect_status_code)
        return JSONResponse(result.model_dump(mode="json", exclude_none=True))

    @router.post(f"{listing}/create")
    async def create_invoice(request: Request):
        form = await request.form()
        return respond(actions.create_invoice(ActionState(), form))

    @router.post(listing + "/{invoice_id}/edit")
    async def update_invoice(request: Request, invoice_id: str):
        form = await request.form()
        return respond(actions.update_invoice(ActionState(), form, invoice_id))

    @router.post(listing + "/{invoice_id}/delete")
    async def delete_invoice(request: Request, invoice_id: str):
        return respond(actions.delete_invoice_by_id(invoice_id))

    return router
