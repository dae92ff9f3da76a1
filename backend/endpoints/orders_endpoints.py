from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from models import Customer, Order, CUSTOMER_ORDERS
from deps import get_engine

router = APIRouter()


class OrderCreate(BaseModel):
    customer_id: int
    status: str = "open"
    total: int = 0


class OrderUpdate(BaseModel):
    status: str | None = None
    total: int | None = None


def _get_order(order_id, engine):
    order = Order.find_by_id(order_id, engine=engine)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.post("/api/orders")
def add_order(order: OrderCreate, engine=Depends(get_engine)):
    if not Customer.find_by_id(order.customer_id, engine=engine):
        raise HTTPException(status_code=404, detail="Customer not found")
    new_order = Order()
    new_order.customer_id = order.customer_id
    new_order.status = order.status
    new_order.total = order.total
    new_order.save(engine=engine)
    return Order.find_by_id(new_order.id, engine=engine).attributes_to_dict()


@router.get("/api/orders/{order_id}")
def get_order(order_id: int, engine=Depends(get_engine)):
    return _get_order(order_id, engine).attributes_to_dict()


@router.put("/api/orders/{order_id}")
def update_order(order_id: int, order: OrderUpdate, engine=Depends(get_engine)):
    existing = _get_order(order_id, engine)
    if order.status is not None:
        existing.status = order.status
    if order.total is not None:
        existing.total = order.total
    existing.save(engine=engine)
    return existing.attributes_to_dict()


@router.get("/api/orders/{order_id}/customer")
def get_order_customer(order_id: int, engine=Depends(get_engine)):
    customer = _get_order(order_id, engine).find_parent(CUSTOMER_ORDERS, engine=engine)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer.attributes_to_dict()
