from fastapi import APIRouter

from ewaste_api.api.v1.endpoints import users, disposals, requests, notifications

# Auth routes live at the site root
auth_router = APIRouter()
auth_router.include_router(users.router, tags=["authentication"])

api_router = APIRouter()

# Include listing endpoints
api_router.include_router(disposals.router, tags=["disposals"])

# Include request lifecycle endpoints
api_router.include_router(requests.router, tags=["requests"])

# Include notification endpoints
api_router.include_router(notifications.router, tags=["notifications"])
