"""
Dish validators and terminal handlers. Create, read and update each run a fixed validator list;
dishes are never deleted.
"""
import logging

from grubdash.errors import IdMismatch, InvalidValue, MissingField, NotFound
from grubdash.metrics import records_created_total, records_updated_total
from grubdash.models import Dish
from grubdash.pipeline import PipelineContext, is_non_empty_string, is_present, is_positive_integer
from grubdash.store import parse_id

logger = logging.getLogger(__name__)

RESOURCE = "Dish"


def dish_exists(ctx: PipelineContext):
    dish = ctx.store.find_by_id(ctx.route_id)
    if dish is None:
        return NotFound(ctx.route_id, RESOURCE)
    ctx.record = dish
    return None


def name_is_valid(ctx: PipelineContext):
    if is_non_empty_string(ctx.data.get("name")):
        return None
    return MissingField("name", "Dish must include a name")


def description_is_valid(ctx: PipelineContext):
    if is_non_empty_string(ctx.data.get("description")):
        return None
    return MissingField("description", "Dish must include a description")


def has_price(ctx: PipelineContext):
    if is_present(ctx.data.get("price")):
        return None
    return MissingField("price", "Dish must include a price")


def price_is_valid(ctx: PipelineContext):
    if is_positive_integer(ctx.data.get("price")):
        return None
    return InvalidValue("price", "Dish must have a price that is an integer greater than 0")


def image_url_is_valid(ctx: PipelineContext):
    if is_non_empty_string(ctx.data.get("image_url")):
        return None
    return MissingField("image_url", "Dish must include a image_url")


def dish_id_matches(ctx: PipelineContext):
    payload_id = ctx.data.get("id")
    if not payload_id or parse_id(payload_id) == parse_id(ctx.route_id):
        return None
    return IdMismatch(payload_id, ctx.route_id, RESOURCE)


FIELD_VALIDATORS = [
    name_is_valid,
    description_is_valid,
    has_price,
    price_is_valid,
    image_url_is_valid,
]

CREATE = FIELD_VALIDATORS
READ = [dish_exists]
UPDATE = [dish_exists, *FIELD_VALIDATORS, dish_id_matches]


def _fields(data: dict) -> dict:
    return {
        "name": data["name"],
        "description": data["description"],
        "price": int(data["price"]),
        "image_url": data["image_url"],
    }


def list_dishes(ctx: PipelineContext) -> list[Dish]:
    return ctx.store.list()


def create(ctx: PipelineContext) -> Dish:
    dish = ctx.store.append(**_fields(ctx.data))
    records_created_total.labels(resource=RESOURCE).inc()
    logger.info("Created dish id=%s name=%r", dish.id, dish.name)
    return dish


def read(ctx: PipelineContext) -> Dish:
    return ctx.record


def update(ctx: PipelineContext) -> Dish:
    dish: Dish = ctx.record
    for key, value in _fields(ctx.data).items():
        setattr(dish, key, value)
    records_updated_total.labels(resource=RESOURCE).inc()
    logger.info("Updated dish id=%s", dish.id)
    return dish
