from fastapi import APIRouter

from goraeph.api.v1.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"])
