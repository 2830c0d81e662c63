from .auth_controller import router as auth_router
from .room_controller import router as room_router
from .image_controller import router as image_router
from .message_controller import router as message_router
from .cors import CORS_POLICIES, CorsPolicy, RouteCorsMiddleware


__all__ = [
    "auth_router",
    "room_router",
    "image_router",
    "message_router",
    "CORS_POLICIES",
    "CorsPolicy",
    "RouteCorsMiddleware",
]
