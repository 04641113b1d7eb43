"""
Order validators and terminal handlers. On top of the field checks, update and delete
consult the status state machine: delivered orders are frozen, only pending orders can go.
"""
import logging

from grubdash import order_state
from grubdash.errors import IdMismatch, InvalidTransition, InvalidValue, MissingField, NotFound
from grubdash.metrics import records_created_total, records_deleted_total, records_updated_total
from grubdash.models import Order
from grubdash.pipeline import PipelineContext, is_non_empty_string, is_present, is_positive_integer
from grubdash.store import parse_id

logger = logging.getLogger(__name__)

RESOURCE = "Order"


def order_exists(ctx: PipelineContext):
    order = ctx.store.find_by_id(ctx.route_id)
    if order is None:
        return NotFound(ctx.route_id, RESOURCE)
    ctx.record = order
    return None


def deliver_to_is_valid(ctx: PipelineContext):
    if is_non_empty_string(ctx.data.get("deliverTo")):
        return None
    return MissingField("deliverTo", "Order must include a deliverTo")


def mobile_number_is_valid(ctx: PipelineContext):
    if is_non_empty_string(ctx.data.get("mobileNumber")):
        return None
    return MissingField("mobileNumber", "Order must include a mobileNumber")


def has_dishes(ctx: PipelineContext):
    if is_present(ctx.data.get("dishes")):
        return None
    return MissingField("dishes", "Order must include a dish")


def dishes_is_valid(ctx: PipelineContext):
    dishes = ctx.data.get("dishes")
    if isinstance(dishes, list) and len(dishes) > 0:
        return None
    return InvalidValue("dishes", "Order must include at least one dish.")


def dishes_have_valid_quantity(ctx: PipelineContext):
    for index, line in enumerate(ctx.data["dishes"]):
        quantity = line.get("quantity") if isinstance(line, dict) else None
        if not is_positive_integer(quantity):
            return InvalidValue(
                f"dishes[{index}].quantity",
                f"Dish {index} must have a quantity that is an integer greater than 0",
            )
    return None


def status_is_valid(ctx: PipelineContext):
    if order_state.is_valid_status(ctx.data.get("status")):
        return None
    return InvalidValue(
        "status",
        "Order must have a status of " + ", ".join(order_state.VALID_STATUSES),
    )


def order_id_matches(ctx: PipelineContext):
    payload_id = ctx.data.get("id")
    if not payload_id or parse_id(payload_id) == parse_id(ctx.route_id):
        return None
    return IdMismatch(payload_id, ctx.route_id, RESOURCE)


def order_is_not_delivered(ctx: PipelineContext):
    if order_state.can_update(ctx.record.status):
        return None
    return InvalidTransition("A delivered order cannot be changed")


def order_is_pending(ctx: PipelineContext):
    if order_state.can_delete(ctx.record.status):
        return None
    return InvalidTransition("An order cannot be deleted unless it is pending")


FIELD_VALIDATORS = [
    deliver_to_is_valid,
    mobile_number_is_valid,
    has_dishes,
    dishes_is_valid,
    dishes_have_valid_quantity,
]

CREATE = FIELD_VALIDATORS
READ = [order_exists]
UPDATE = [
    order_exists,
    *FIELD_VALIDATORS,
    status_is_valid,
    order_id_matches,
    order_is_not_delivered,
]
DELETE = [order_exists, order_is_pending]


def list_orders(ctx: PipelineContext) -> list[Order]:
    return ctx.store.list()


def create(ctx: PipelineContext) -> Order:
    data = ctx.data
    order = ctx.store.append(
        deliverTo=data["deliverTo"],
        mobileNumber=data["mobileNumber"],
        status=data.get("status"),
        dishes=data["dishes"],
    )
    records_created_total.labels(resource=RESOURCE).inc()
    logger.info("Created order id=%s status=%s dishes=%d", order.id, order.status, len(order.dishes))
    return order


def read(ctx: PipelineContext) -> Order:
    return ctx.record


def update(ctx: PipelineContext) -> Order:
    order: Order = ctx.record
    data = ctx.data
    previous_status = order.status
    order.deliverTo = data["deliverTo"]
    order.mobileNumber = data["mobileNumber"]
    order.status = data["status"]
    order.dishes = data["dishes"]
    records_updated_total.labels(resource=RESOURCE).inc()
    logger.info("Updated order id=%s status %s -> %s", order.id, previous_status, order.status)
    return order


def destroy(ctx: PipelineContext) -> None:
    removed = ctx.store.remove(ctx.record.id)
    records_deleted_total.labels(resource=RESOURCE).inc()
    logger.info("Deleted order id=%s", removed.id)
