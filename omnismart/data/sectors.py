"""Sector descriptors, welcome messages and featured listings."""
from typing import Any, Dict, List, Optional
import json

from ..app.config import Config
from ..schemas.io_models import Sector, SectorInfo
from ..utils.logger import get_logger

logger = get_logger()

SECTORS: List[SectorInfo] = [
    SectorInfo(id=Sector.retail, name="Shopping & Retail",
               description="Malls, stores, groceries, and shopping centers"),
    SectorInfo(id=Sector.education, name="Education",
               description="Schools, colleges, and educational institutions"),
    SectorInfo(id=Sector.healthcare, name="Healthcare",
               description="Hospitals, clinics, and medical services"),
    SectorInfo(id=Sector.general, name="General Services",
               description="Other services and facilities"),
]

WELCOME_MESSAGES: Dict[Sector, str] = {
    Sector.retail: (
        "Hi! I'm your shopping assistant. I can help you find products, get store directions, "
        "locate items within stores (like '2nd floor, column 3, line 2'), and assist with cart "
        "management and payments. What are you looking for today?"
    ),
    Sector.education: (
        "Hello! I'm your education assistant. I can help you find schools, colleges, admission "
        "requirements, fees, and application processes. I'll recommend top institutions and help "
        "with admissions. What educational service do you need?"
    ),
    Sector.healthcare: (
        "Hi there! I'm your healthcare assistant. I can help you find hospitals, clinics, medicines, "
        "book appointments, and assist with medical payments. What healthcare service are you looking for?"
    ),
    Sector.general: (
        "Hello! I'm your AI assistant. I can help you find various services and facilities in your "
        "area. How can I assist you today?"
    ),
}


def welcome_message(sector: Optional[Sector]) -> str:
    return WELCOME_MESSAGES[Sector(sector) if sector else Sector.general]


_content: Optional[Dict[str, List[Dict[str, Any]]]] = None


def load_sector_content(path: Optional[str] = None) -> Dict[str, List[Dict[str, Any]]]:
    path = path or Config.SECTOR_CONTENT_PATH
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning(f"[CATALOG] Sector content file not found: {path}")
        return {}


def sector_content(sector: Sector) -> List[Dict[str, Any]]:
    """Featured listings shown next to the assistant for ``sector``."""
    global _content
    if _content is None:
        _content = load_sector_content()
    return list(_content.get(Sector(sector).value, []))
