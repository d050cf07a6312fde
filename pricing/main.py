"""
Competitive Pricing — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pricing.data.store import DataStore
from pricing.api.dependencies import set_store
from pricing.api.router_meta import router as meta_router
from pricing.api.router_dashboard import router as dashboard_router
from pricing.api.router_reports import router as reports_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Parse the dataset once at startup."""
    from pricing.config import DATA_FILE, REPORTS_FOLDER
    REPORTS_FOLDER.mkdir(parents=True, exist_ok=True)

    print(f"  PRICING_DATA_FILE = {os.environ.get('PRICING_DATA_FILE', '(not set)')}")

    store = DataStore().load(DATA_FILE)
    set_store(store)

    if store.row_count() > 0:
        print(f"\nCompetitive Pricing ready — {store.row_count():,} rows, "
              f"{len(store.countries())} countries, {len(store.competitors())} competitors\n")
    else:
        print("\nCompetitive Pricing ready — no data yet. Set PRICING_DATA_FILE and restart.\n")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Competitive Pricing API",
        description="Competitor pricing analytics — cascading filters, box-plots, promotion analysis",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(dashboard_router)
    app.include_router(reports_router)
    return app


app = create_app()
