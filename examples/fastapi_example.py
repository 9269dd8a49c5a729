"""Example FastAPI application with request-scoped Cloud Logging output.

Run with:
    uvicorn examples.fastapi_example:app --reload

Every request gets a logger carrying ``request_id``, ``method`` and ``path``.
Endpoints log through ``gcplog.from_context()`` or the ``*_context``
functions and inherit those attributes.
"""

import asyncio
import time
from datetime import timedelta

from fastapi import FastAPI, HTTPException

import gcplog

gcplog.new_logger("debug")
gcplog.merge_global_extra_fields({"service": "orders-api", "version": "1.4.0"})

api = FastAPI(title="gcplog Example")


@api.get("/")
async def root() -> dict[str, str]:
    """Root endpoint; logs at info without a source location."""
    gcplog.info_context("root requested")
    return {"message": "Hello, World!"}


@api.get("/orders/{order_id}")
async def get_order(order_id: int) -> dict[str, int | str]:
    """Looks up an order and logs how long it took."""
    logger = gcplog.from_context().with_(order_id=order_id)
    start = time.perf_counter()
    await asyncio.sleep(0.02)
    if order_id <= 0:
        error = ValueError(f"invalid order id {order_id}")
        # error level: source location included, error rendered as text
        logger.error("order lookup failed", err=error)
        raise HTTPException(status_code=404, detail=str(error))
    logger.info(
        "order loaded",
        took=timedelta(seconds=time.perf_counter() - start),
    )
    return {"order_id": order_id, "status": "shipped"}


app = gcplog.RequestLoggerMiddleware(api)
