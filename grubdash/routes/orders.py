from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from grubdash import orders
from grubdash.models import RequestBody
from grubdash.pipeline import PipelineContext, run_pipeline
from grubdash.store import RecordStore

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_store(request: Request) -> RecordStore:
    return request.app.state.order_store


@router.get("")
async def list_orders(store: RecordStore = Depends(get_order_store)) -> dict:
    ctx = PipelineContext(store=store)
    records = run_pipeline([], ctx, orders.list_orders)
    return {"data": [order.model_dump() for order in records]}


@router.post("")
async def create_order(body: RequestBody, store: RecordStore = Depends(get_order_store)) -> JSONResponse:
    """
    Create an order. status is stored as given (it is only checked on update).
    New order -> 201 with the assigned id.
    """
    ctx = PipelineContext(store=store, data=body.data)
    order = run_pipeline(orders.CREATE, ctx, orders.create)
    return JSONResponse(status_code=201, content={"data": order.model_dump()})


@router.get("/{order_id}")
async def read_order(order_id: str, store: RecordStore = Depends(get_order_store)) -> dict:
    ctx = PipelineContext(store=store, route_id=order_id)
    order = run_pipeline(orders.READ, ctx, orders.read)
    return {"data": order.model_dump()}


@router.put("/{order_id}")
async def update_order(
    order_id: str,
    body: RequestBody,
    store: RecordStore = Depends(get_order_store),
) -> dict:
    """Replace deliverTo, mobileNumber, status and dishes. Delivered orders -> 400."""
    ctx = PipelineContext(store=store, data=body.data, route_id=order_id)
    order = run_pipeline(orders.UPDATE, ctx, orders.update)
    return {"data": order.model_dump()}


@router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: str, store: RecordStore = Depends(get_order_store)) -> Response:
    """Remove a pending order. 204, no body."""
    ctx = PipelineContext(store=store, route_id=order_id)
    run_pipeline(orders.DELETE, ctx, orders.destroy)
    return Response(status_code=204)
