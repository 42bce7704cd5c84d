from fastapi import APIRouter

from doga_server.routers.admin_pages import router as admin_pages_router
from doga_server.routers.auth import router as auth_router
from doga_server.routers.gallery import router as gallery_router
from doga_server.routers.import_rooms import router as import_rooms_router
from doga_server.routers.pages import router as pages_router
from doga_server.routers.public_rooms import router as public_rooms_router
from doga_server.routers.room_types import router as room_types_router
from doga_server.routers.rooms import router as rooms_router
from doga_server.routers.services import router as services_router
from doga_server.routers.slider import router as slider_router
from doga_server.routers.upload import router as upload_router

# JSON API; registered before the pages so /api/... never matches /{lang}/...
api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(rooms_router)
api_router.include_router(public_rooms_router)
api_router.include_router(room_types_router)
api_router.include_router(slider_router)
api_router.include_router(services_router)
api_router.include_router(gallery_router)
api_router.include_router(upload_router)
api_router.include_router(import_rooms_router)

page_router = APIRouter()
page_router.include_router(admin_pages_router)
page_router.include_router(pages_router)
