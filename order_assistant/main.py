"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from order_assistant.core.logging import setup_logging
from order_assistant.db.database import init_db
from order_assistant.api import auth, chat, health, menu, orders, profile


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    setup_logging()
    await init_db()
    yield


app = FastAPI(
    title="Order Assistant",
    description="Chat ordering assistant for Outta Sight Pizza",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, tags=["auth"])
app.include_router(menu.router, tags=["menu"])
app.include_router(chat.router, tags=["chat"])
app.include_router(profile.router, tags=["profile"])
app.include_router(orders.router, tags=["orders"])


@app.get("/")
async def root():
    """Service banner."""
    return {
        "message": "Order Assistant API",
        "version": "0.1.0",
    }
