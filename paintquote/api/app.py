"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paintquote.api.routes import cart, drafts, estimates, services
from paintquote.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Paint Quote",
    description="Painting estimate calculator and booking cart",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(services.router)
app.include_router(estimates.router)
app.include_router(cart.router)
app.include_router(drafts.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
