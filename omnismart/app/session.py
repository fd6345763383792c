#!/usr/bin/env python3
"""
Session management module for the OmniSmart assistant.

This module stores chat history, the shopping cart and search history per
session using Redis, with an in-memory fallback.
"""

import json
import redis
from typing import Dict, List, Any, Optional
from datetime import datetime

from .cart import ShoppingCart
from .config import Config
from .errors import SessionNotFoundError
from ..utils.logger import get_logger

logger = get_logger()


class SessionManager:
    """Manages user sessions, carts and conversation context."""

    def __init__(self, use_redis: Optional[bool] = None):
        """Initialize the session manager with Redis connection or fallback to in-memory."""
        self.use_redis = Config.USE_REDIS if use_redis is None else use_redis
        self.memory_sessions: Dict[str, Dict[str, Any]] = {}  # Fallback in-memory storage
        self.redis_client = None

        if not self.use_redis:
            logger.info("[SESSION] Redis disabled, using in-memory session storage")
            return

        try:
            self.redis_client = redis.Redis(
                host=Config.REDIS_HOST,
                port=Config.REDIS_PORT,
                db=Config.REDIS_DB,
                decode_responses=True
            )
            # Test Redis connection
            self.redis_client.ping()
            logger.info("[SESSION] Using Redis for session storage")
        except redis.RedisError as e:
            logger.warning(f"[SESSION] Redis not available ({e}), using in-memory session storage")
            self.use_redis = False
            self.redis_client = None

    def _get_session_key(self, session_id: str) -> str:
        """
        Generate Redis key for a session.

        Args:
            session_id: Unique session identifier

        Returns:
            Redis key for the session
        """
        return f"session:{session_id}"

    @staticmethod
    def _new_session_data() -> Dict[str, Any]:
        now = datetime.now().isoformat()
        return {
            "messages": [],
            "cart": {"items": []},
            "searches": [],
            "created_at": now,
            "last_updated": now,
        }

    def _save(self, session_id: str, session_data: Dict[str, Any]):
        session_data["last_updated"] = datetime.now().isoformat()
        if self.use_redis:
            self.redis_client.set(self._get_session_key(session_id), json.dumps(session_data))
        else:
            self.memory_sessions[session_id] = session_data

    def _get_or_create(self, session_id: str) -> Dict[str, Any]:
        session_data = self.get_session(session_id)
        if session_data is None:
            # Auto-create session if it doesn't exist
            self.create_session(session_id)
            session_data = self.get_session(session_id)
        return session_data

    def create_session(self, session_id: str) -> bool:
        """
        Create a new session.

        Args:
            session_id: Unique session identifier

        Returns:
            True if session was created, False if it already exists
        """
        if self.has_session(session_id):
            return False
        self._save(session_id, self._new_session_data())
        logger.debug(f"[SESSION] Created session {session_id}")
        return True

    def has_session(self, session_id: str) -> bool:
        if self.use_redis:
            return bool(self.redis_client.exists(self._get_session_key(session_id)))
        return session_id in self.memory_sessions

    def require_session(self, session_id: str) -> Dict[str, Any]:
        session_data = self.get_session(session_id)
        if session_data is None:
            raise SessionNotFoundError(f"Unknown session '{session_id}'")
        return session_data

    def get_session(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Retrieve session data.

        Args:
            session_id: Unique session identifier

        Returns:
            Session data or None if not found
        """
        if self.use_redis:
            session_data = self.redis_client.get(self._get_session_key(session_id))
            if session_data:
                return json.loads(session_data)
            return None
        # In-memory fallback
        return self.memory_sessions.get(session_id)

    def add_message(self, session_id: str, message: Dict[str, Any]) -> bool:
        """
        Add a message to the session conversation history.

        Args:
            session_id: Unique session identifier
            message: JSON-serializable chat message (role, content, timestamp, ...)

        Returns:
            True if successful
        """
        session_data = self._get_or_create(session_id)
        session_data["messages"].append(message)
        self._save(session_id, session_data)
        return True

    def get_recent_messages(self, session_id: str, max_messages: int = 5) -> List[Dict[str, Any]]:
        """
        Get recent messages from the conversation history.

        Args:
            session_id: Unique session identifier
            max_messages: Maximum number of recent messages to return

        Returns:
            List of recent messages
        """
        session_data = self.get_session(session_id)
        if not session_data:
            return []

        messages = session_data.get("messages", [])
        return messages[-max_messages:] if messages else []

    def get_conversation_context(self, session_id: str) -> List[Dict[str, str]]:
        """
        Get conversation context as a list of {'role', 'message'} dictionaries.
        """
        messages = self.get_recent_messages(session_id, Config.MAX_CONVERSATION_TURNS)
        logger.debug(f"[SESSION] Retrieved {len(messages)} recent messages for {session_id}")
        return [{"role": m["role"], "message": m["content"]} for m in messages]

    def get_cart(self, session_id: str) -> ShoppingCart:
        session_data = self.get_session(session_id) or {}
        return ShoppingCart.from_dict(session_data.get("cart"))

    def save_cart(self, session_id: str, cart: ShoppingCart) -> bool:
        session_data = self._get_or_create(session_id)
        session_data["cart"] = cart.to_dict()
        self._save(session_id, session_data)
        return True

    def record_search(self, session_id: str, query: str, results_count: int) -> bool:
        """Append a search to the session history, keeping the most recent ones."""
        session_data = self._get_or_create(session_id)
        searches = session_data.setdefault("searches", [])
        searches.append({
            "query": query,
            "search_type": "text",
            "results_count": results_count,
            "timestamp": datetime.now().isoformat(),
        })
        session_data["searches"] = searches[-Config.MAX_SEARCH_HISTORY:]
        self._save(session_id, session_data)
        return True

    def get_search_history(self, session_id: str) -> List[Dict[str, Any]]:
        session_data = self.get_session(session_id)
        if not session_data:
            return []
        return list(session_data.get("searches", []))

    def clear_session(self, session_id: str) -> bool:
        """
        Clear session data.

        Args:
            session_id: Unique session identifier

        Returns:
            True if a session was removed
        """
        if self.use_redis:
            return bool(self.redis_client.delete(self._get_session_key(session_id)))
        return self.memory_sessions.pop(session_id, None) is not None
