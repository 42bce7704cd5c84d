from doga_server.models.gallery import GalleryItem
from doga_server.models.room_types import RoomType
from doga_server.models.rooms import Room, RoomGallery
from doga_server.models.services import Service, ServiceGallery
from doga_server.models.slider import SliderItem

__all__ = [
    "GalleryItem",
    "Room",
    "RoomGallery",
    "RoomType",
    "Service",
    "ServiceGallery",
    "SliderItem",
]
