import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from sales_analytics.config import Settings
from sales_analytics.engine import analyze_sales_data
from sales_analytics.logging_config import setup_logging
from sales_analytics.models import AnalysisOptions, SalesData
from sales_analytics.seed_data import seed
from sales_analytics.store import store

logger = logging.getLogger(__name__)
settings = Settings.from_env()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    # Auto-seed on startup so the service is immediately usable
    store.clear()
    seed(store, settings.seed)
    logger.info("Seeded %d sellers, %d products, %d receipts",
                len(store.sellers), len(store.products), len(store.purchase_records))
    yield


app = FastAPI(
    title="Seller Sales Analytics",
    version="1.0.0",
    description="Revenue, profit, top products and bonus ranking per seller",
    lifespan=lifespan,
)


def _run(data) -> list:
    try:
        return analyze_sales_data(
            data, AnalysisOptions.default(), top_products_limit=settings.top_products_limit
        )
    except ValueError as exc:
        raise HTTPException(422, str(exc))


# ── Sellers ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/sellers/{seller_id}", summary="Get seller details")
def get_seller(seller_id: str):
    seller = store.get_seller(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return seller.model_dump()


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/report", summary="Sales report for the loaded dataset")
def get_report():
    report = _run(store.as_sales_data())
    return {"report": [row.model_dump() for row in report]}


@app.get("/api/v1/report/{seller_id}", summary="Report row and rank of one seller")
def get_seller_report(seller_id: str):
    if store.get_seller(seller_id) is None:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    report = _run(store.as_sales_data())
    for rank, row in enumerate(report):
        if row.seller_id == seller_id:
            return {"rank": rank + 1, "total": len(report), **row.model_dump()}
    raise HTTPException(404, f"Seller '{seller_id}' not found")


@app.post("/api/v1/report", summary="Sales report for a posted dataset")
def post_report(data: SalesData):
    report = _run(data)
    return {"report": [row.model_dump() for row in report]}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed demo data")
def reseed():
    store.clear()
    seed(store, settings.seed)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
