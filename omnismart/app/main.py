#!/usr/bin/env python3
"""
Main FastAPI application for the OmniSmart assistant.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from typing import Any, Dict, List
import uuid

from .config import Config
from .controller import Controller
from .errors import CartError, InvalidQueryError, SessionNotFoundError, UnsupportedActionError
from .search import SearchService
from .session import SessionManager
from ..data.catalog import get_catalog_store
from ..data.sectors import SECTORS, sector_content, welcome_message
from ..schemas.io_models import (
    ActionRequest,
    CartItem,
    CartResponse,
    CatalogResponse,
    CheckoutRequest,
    QRReceipt,
    QuantityUpdate,
    QueryRequest,
    QueryResponse,
    SearchRequest,
    SearchResponse,
    Sector,
    SectorInfo,
    SessionCreateRequest,
    SessionCreateResponse,
    WelcomeResponse,
)
from ..utils.logger import get_logger

logger = get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="OmniSmart Assistant API",
    description="Rule-based multi-sector shopping and services assistant",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize components
session_manager = SessionManager()
controller = Controller(session_manager)
catalog = get_catalog_store()
search_service = SearchService(catalog)


def _cart_response(session_id: str) -> CartResponse:
    cart = session_manager.get_cart(session_id)
    return CartResponse(session_id=session_id, items=cart.items, total=round(cart.get_total(), 2))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/sectors", response_model=List[SectorInfo])
async def list_sectors():
    return SECTORS


@app.get("/sectors/{sector}/welcome", response_model=WelcomeResponse)
async def get_welcome(sector: Sector):
    return WelcomeResponse(sector=sector, message=welcome_message(sector))


@app.get("/sectors/{sector}/content", response_model=List[Dict[str, Any]])
async def get_sector_content(sector: Sector):
    return sector_content(sector)


@app.post("/session", response_model=SessionCreateResponse)
async def create_session(request: SessionCreateRequest):
    """
    Create a new chat session.

    Args:
        request: Session creation request; a sector adds its welcome message

    Returns:
        Session creation response
    """
    # Generate session ID if not provided
    session_id = request.session_id or str(uuid.uuid4())
    created = session_manager.create_session(session_id)
    logger.info(f"[SESSION] Session {session_id} created={created}")

    welcome = controller.welcome(session_id, request.sector) if created and request.sector else None
    return SessionCreateResponse(session_id=session_id, created=created, welcome=welcome)


@app.post("/query", response_model=QueryResponse)
async def query_assistant(request: QueryRequest):
    """
    Process a chat query; the sector is guessed from the text when omitted.
    """
    if not request.query.strip():
        raise HTTPException(status_code=400, detail="Query must not be empty")
    message = controller.handle_query(request.session_id, request.query, request.sector)
    return QueryResponse(session_id=request.session_id, message=message)


@app.post("/action", response_model=QueryResponse)
async def run_action(request: ActionRequest):
    try:
        message = controller.handle_action(request.session_id, request.kind, request.payload, request.sector)
    except (CartError, UnsupportedActionError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return QueryResponse(session_id=request.session_id, message=message)


@app.get("/catalog", response_model=CatalogResponse)
async def get_catalog():
    return CatalogResponse(stores=catalog.initial_stores(), products=catalog.initial_products())


@app.post("/search", response_model=SearchResponse)
async def search(request: SearchRequest):
    try:
        result = search_service.search(request.query, request.location)
    except InvalidQueryError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if request.session_id:
        session_manager.record_search(request.session_id, request.query,
                                      len(result.stores) + len(result.products))
    return result


@app.get("/cart/{session_id}", response_model=CartResponse)
async def get_cart(session_id: str):
    try:
        session_manager.require_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _cart_response(session_id)


@app.post("/cart/{session_id}/items", response_model=CartResponse)
async def add_cart_item(session_id: str, item: CartItem):
    try:
        session_manager.require_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    controller.add_to_cart(session_id, [item])
    return _cart_response(session_id)


@app.patch("/cart/{session_id}/items/{item_id}", response_model=CartResponse)
async def update_cart_item(session_id: str, item_id: str, update: QuantityUpdate):
    try:
        session_manager.require_session(session_id)
        cart = session_manager.get_cart(session_id)
        cart.update_quantity(item_id, update.quantity)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    session_manager.save_cart(session_id, cart)
    return _cart_response(session_id)


@app.delete("/cart/{session_id}/items/{item_id}", response_model=CartResponse)
async def remove_cart_item(session_id: str, item_id: str):
    try:
        session_manager.require_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    cart = session_manager.get_cart(session_id)
    if not cart.remove_item(item_id):
        raise HTTPException(status_code=404, detail=f"Item '{item_id}' is not in the cart")
    session_manager.save_cart(session_id, cart)
    return _cart_response(session_id)


@app.post("/cart/{session_id}/checkout", response_model=QRReceipt)
async def checkout_cart(session_id: str, request: CheckoutRequest):
    try:
        session_manager.require_session(session_id)
        return controller.checkout(session_id, request.payment_method, request.sector)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CartError as e:
        raise HTTPException(status_code=400, detail=str(e))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
