from fastapi import Depends
from app.middleware.auth import get_current_user
from app.model.user import UserModel
from app.utility.response import api_response
from app.utility.serializer import serialize_user
from app.api.router_base import router_users as router


@router.get("/current-user")
async def current_user(user: UserModel = Depends(get_current_user)):
    return api_response(serialize_user(user), "Current user fetched successfully")
