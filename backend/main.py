from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from simpleorm import get_engine

from models import create_tables
from endpoints.customers_endpoints import router as customers_router
from endpoints.orders_endpoints import router as orders_router


def create_app(engine=None):
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    engine = engine if engine is not None else get_engine()
    create_tables(engine)
    app.state.engine = engine

    app.include_router(customers_router)
    app.include_router(orders_router)
    return app
