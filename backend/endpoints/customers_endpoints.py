from fastapi import APIRouter, Query, Depends, HTTPException
from pydantic import BaseModel
from simpleorm import Collection, Condition, Direction
from models import Customer, CUSTOMER_ORDERS
from deps import get_engine

router = APIRouter()


class CustomerCreate(BaseModel):
    name: str
    email: str | None = None


def as_list(result):
    if result is None:
        return []
    if isinstance(result, Collection):
        return result.attributes_to_list()
    return [result.attributes_to_dict()]


def _get_customer(customer_id, engine):
    customer = Customer.find_by_id(customer_id, engine=engine)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.post("/api/customers")
def register_customer(customer: CustomerCreate, engine=Depends(get_engine)):
    new_customer = Customer()
    new_customer.name = customer.name
    new_customer.email = customer.email
    saved = new_customer.save_if_not_exists(engine=engine)
    return Customer.find_by_id(saved.id, engine=engine).attributes_to_dict()


@router.get("/api/customers")
def get_customers(
    engine=Depends(get_engine),
    page: int = Query(None),
    order_dir: str = Query("ASC"),
):
    try:
        direction = Direction.parse(order_dir)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "pages": Customer.total_pages(engine=engine),
        "customers": as_list(Customer.all(page=page, direction=direction, engine=engine)),
    }


@router.get("/api/customers/{customer_id}")
def get_customer(customer_id: int, engine=Depends(get_engine)):
    return _get_customer(customer_id, engine).attributes_to_dict()


@router.get("/api/customers/{customer_id}/orders")
def get_customer_orders(
    customer_id: int,
    engine=Depends(get_engine),
    page: int = Query(None),
    status: str = Query(None),
):
    customer = _get_customer(customer_id, engine)
    conditions = [Condition("status", status)] if status else None
    orders = customer.find_children(
        CUSTOMER_ORDERS, page=page, conditions=conditions, direction=Direction.ASC, engine=engine
    )
    return as_list(orders)


@router.get("/api/customers/{customer_id}/totals")
def get_customer_totals(customer_id: int, engine=Depends(get_engine)):
    customer = _get_customer(customer_id, engine)
    totals = customer.find_children(
        CUSTOMER_ORDERS,
        direction=Direction.ASC,
        group_by=["status"],
        aggregates={"total": "sum"},
        engine=engine,
    )
    return {row["status"]: row["total"] for row in as_list(totals)}
