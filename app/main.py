import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from app.config import get_settings
from app.engine import analyze_sales_data
from app.errors import SalesAnalysisError
from app.models import SalesDataset
from app.store import store

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Auto-seed on startup so the service is immediately usable
    if settings.seed_on_startup:
        from scripts.seed_data import seed
        store.clear()
        seed(store)
        logger.info("Seeded store with %d sellers, %d records",
                    len(store.sellers), len(store.purchase_records))
    yield


app = FastAPI(
    title="Sales Report Service",
    version="1.0.0",
    description="Seller revenue, profit, ranking and bonus reports",
    lifespan=lifespan,
)


def _run_report(data) -> list[dict]:
    try:
        reports = analyze_sales_data(data, top_products_limit=settings.top_products_limit)
    except SalesAnalysisError as exc:
        raise HTTPException(422, str(exc))
    return [r.model_dump(mode="json") for r in reports]


# ── Catalog ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/products", summary="List the product catalog")
def list_products():
    return {"products": [p.model_dump(mode="json") for p in store.list_products()]}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.post("/api/v1/reports/sales", summary="Analyse a posted sales dataset")
def analyze_posted(dataset: SalesDataset):
    return {"report": _run_report(dataset)}


@app.get("/api/v1/reports/sales", summary="Analyse the stored sales dataset")
def analyze_stored():
    return {"report": _run_report(store.dataset())}


@app.get("/api/v1/reports/sales/{seller_id}", summary="Report row for one seller")
def get_seller_report(seller_id: str):
    if store.get_seller(seller_id) is None:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    for row in _run_report(store.dataset()):
        if row["seller_id"] == seller_id:
            return row
    raise HTTPException(404, f"Seller '{seller_id}' not found")


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed demo data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
