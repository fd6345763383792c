"""Pydantic models for API I/O and assistant contracts.

Sector and catalog types are shared by the response generator, the relevance
scorer, the cart and the FastAPI layer.
"""
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional


class Sector(str, Enum):
    retail = "retail"
    education = "education"
    healthcare = "healthcare"
    general = "general"


class SuggestedAction(BaseModel):
    label: str
    kind: str
    payload: Dict[str, Any] = Field(default_factory=dict)


class ResponseMetadata(BaseModel):
    location: Optional[str] = None
    products: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class AssistantResponse(BaseModel):
    sector: Sector
    rule: str
    text: str
    metadata: Optional[ResponseMetadata] = None
    actions: List[SuggestedAction] = Field(default_factory=list)


class GeoPoint(BaseModel):
    lat: float
    lon: float


class Store(BaseModel):
    id: str
    name: str
    address: str = ""
    city: str = ""
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    services: List[Any] = Field(default_factory=list)
    offers: List[Any] = Field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Product(BaseModel):
    id: str
    name: str
    brand: Optional[str] = None
    category: str
    description: Optional[str] = None
    price: float
    discount: Optional[float] = None
    image_url: Optional[str] = None
    sustainability_score: Optional[float] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)
    store_id: Optional[str] = None


class PriceInfo(BaseModel):
    original: str
    final: str
    has_discount: bool


class ScoredStore(BaseModel):
    store: Store
    relevance_score: int


class ScoredProduct(BaseModel):
    product: Product
    relevance_score: int
    pricing: PriceInfo


class PaymentMethod(str, Enum):
    online = "online"
    cash = "cash"


class PaymentStatus(str, Enum):
    completed = "completed"
    pending = "pending"


class CartItem(BaseModel):
    id: str
    name: str
    price: float = Field(ge=0)
    quantity: int = Field(default=1, ge=1)
    location: str = ""


class QRReceipt(BaseModel):
    id: str
    items: List[CartItem]
    total_amount: float
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    timestamp: datetime
    sector: Sector


class ChatMessage(BaseModel):
    id: str
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime
    sector: Optional[Sector] = None
    metadata: Optional[ResponseMetadata] = None
    actions: List[SuggestedAction] = Field(default_factory=list)


class SectorInfo(BaseModel):
    id: Sector
    name: str
    description: str


# ---------------------------------------------------------------------------
# HTTP request / response bodies
# ---------------------------------------------------------------------------

class SessionCreateRequest(BaseModel):
    session_id: Optional[str] = None
    sector: Optional[Sector] = None


class SessionCreateResponse(BaseModel):
    session_id: str
    created: bool
    welcome: Optional[ChatMessage] = None


class QueryRequest(BaseModel):
    session_id: str
    query: str
    sector: Optional[Sector] = None


class QueryResponse(BaseModel):
    session_id: str
    message: ChatMessage


class ActionRequest(BaseModel):
    session_id: str
    kind: str
    payload: Dict[str, Any] = Field(default_factory=dict)
    sector: Sector = Sector.general


class WelcomeResponse(BaseModel):
    sector: Sector
    message: str


class SearchRequest(BaseModel):
    query: str
    location: Optional[GeoPoint] = None
    session_id: Optional[str] = None


class SearchResponse(BaseModel):
    query: str
    stores: List[ScoredStore] = Field(default_factory=list)
    products: List[ScoredProduct] = Field(default_factory=list)
    message: str = ""


class CatalogResponse(BaseModel):
    stores: List[Store]
    products: List[Product]


class QuantityUpdate(BaseModel):
    quantity: int


class CartResponse(BaseModel):
    session_id: str
    items: List[CartItem]
    total: float


class CheckoutRequest(BaseModel):
    payment_method: PaymentMethod
    sector: Sector = Sector.retail
