from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from grubdash import dishes
from grubdash.models import RequestBody
from grubdash.pipeline import PipelineContext, run_pipeline
from grubdash.store import RecordStore

router = APIRouter(prefix="/dishes", tags=["dishes"])


def get_dish_store(request: Request) -> RecordStore:
    return request.app.state.dish_store


@router.get("")
async def list_dishes(store: RecordStore = Depends(get_dish_store)) -> dict:
    ctx = PipelineContext(store=store)
    records = run_pipeline([], ctx, dishes.list_dishes)
    return {"data": [dish.model_dump() for dish in records]}


@router.post("")
async def create_dish(body: RequestBody, store: RecordStore = Depends(get_dish_store)) -> JSONResponse:
    """Validate the payload, assign an id and append. 201 with the new dish."""
    ctx = PipelineContext(store=store, data=body.data)
    dish = run_pipeline(dishes.CREATE, ctx, dishes.create)
    return JSONResponse(status_code=201, content={"data": dish.model_dump()})


@router.get("/{dish_id}")
async def read_dish(dish_id: str, store: RecordStore = Depends(get_dish_store)) -> dict:
    ctx = PipelineContext(store=store, route_id=dish_id)
    dish = run_pipeline(dishes.READ, ctx, dishes.read)
    return {"data": dish.model_dump()}


@router.put("/{dish_id}")
async def update_dish(
    dish_id: str,
    body: RequestBody,
    store: RecordStore = Depends(get_dish_store),
) -> dict:
    """
    Overwrite name, description, price and image_url in place.
    A payload id, when given, must match the route id; the stored id never changes.
    """
    ctx = PipelineContext(store=store, data=body.data, route_id=dish_id)
    dish = run_pipeline(dishes.UPDATE, ctx, dishes.update)
    return {"data": dish.model_dump()}
