"""Seed data for the four rooms the hotel offers."""

import logging
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from doga_server.models.rooms import Room, RoomGallery
from doga_server.services.room_ids import STATIC_ROOM_IDS

logger = logging.getLogger(__name__)

SHARED_IMAGE_URL = (
    "https://s3.tebi.io/dogahotelfethiye/rooms/43c7e499-ba30-40a9-a010-79902cd38558/"
    "23197252-a34c-475f-8875-27ce32b5e1a6.jpg"
)

BASE_FEATURES_TR = ["Klima", "Saç Kurutma Makinası", "LCD TV", "WC & Duşa Kabin", "Balkon", "Dağ yada Havuz Manzarası"]
BASE_FEATURES_EN = ["Air Conditioning", "Hair Dryer", "LCD TV", "WC & Shower Cabin", "Balcony", "Mountain or Pool View"]

SEED_ROOMS: list[dict[str, Any]] = [
    {
        "name_tr": "Standart Oda",
        "name_en": "Standard Room",
        "description_tr": (
            "26 m2 olup, çift kişilik yatak mevcuttur. Odalarda; konforlu bir konaklama için "
            "ihtiyacınız olan tüm olanaklar bulunmaktadır."
        ),
        "description_en": "26 m² with a double bed. The rooms include all the amenities you need for a comfortable stay.",
        "price_tr": "1.500 ₺",
        "price_en": "€50",
        "capacity": 2,
        "size": 26,
        "features_tr": BASE_FEATURES_TR,
        "features_en": BASE_FEATURES_EN,
        "type": "standard",
    },
    {
        "name_tr": "Triple Oda",
        "name_en": "Triple Room",
        "description_tr": (
            "26 m2 olup, Odalarda 1 adet çift kişilik 1 adet tek kişilik yatak mevcuttur. "
            "Aile ve arkadaş grupları için ideal konaklama seçeneği."
        ),
        "description_en": (
            "26 m² with one double bed and one single bed. "
            "An ideal accommodation option for families and groups of friends."
        ),
        "price_tr": "2.000 ₺",
        "price_en": "€70",
        "capacity": 3,
        "size": 26,
        "features_tr": BASE_FEATURES_TR,
        "features_en": BASE_FEATURES_EN,
        "type": "triple",
    },
    {
        "name_tr": "Suite Oda",
        "name_en": "Suite Room",
        "description_tr": (
            "40 m2 olup, 1 adet çift kişilik Yatak ve 3 adet tek kişilik yatak mevcuttur. "
            "Tek duşlu olup seramik zeminden oluşmaktadır. Geniş aileler için ideal."
        ),
        "description_en": (
            "40 m² with one double bed and three single beds. "
            "It has a single shower and ceramic flooring. Ideal for large families."
        ),
        "price_tr": "3.000 ₺",
        "price_en": "€100",
        "capacity": 5,
        "size": 40,
        "features_tr": [
            "Klima",
            "Saç Kurutma Makinası",
            "LCD TV",
            "Mini-Bar",
            "WC & Duşa Kabin",
            "Balkon",
            "Güvenlik Kasası",
            "Dağ yada Havuz Manzarası",
        ],
        "features_en": [
            "Air Conditioning",
            "Hair Dryer",
            "LCD TV",
            "Mini-Bar",
            "WC & Shower Cabin",
            "Balcony",
            "Safe Box",
            "Mountain or Pool View",
        ],
        "type": "suite",
    },
    {
        "name_tr": "Apart Oda",
        "name_en": "Apart Room",
        "description_tr": "30 m2 olup, tek duşlu olup seramik zeminden oluşmaktadır. Uzun süreli konaklamalar için ideal.",
        "description_en": "30 m² with a single shower and ceramic flooring. Ideal for long-term stays.",
        "price_tr": "2.500 ₺",
        "price_en": "€80",
        "capacity": 2,
        "size": 30,
        "features_tr": [
            "Klima",
            "Saç Kurutma Makinası",
            "Uydu TV",
            "WC & Duşa Kabin",
            "Balkon",
            "Dağ yada Havuz Manzarası",
        ],
        "features_en": [
            "Air Conditioning",
            "Hair Dryer",
            "Satellite TV",
            "WC & Shower Cabin",
            "Balcony",
            "Mountain or Pool View",
        ],
        "type": "apart",
    },
]

SEED_GALLERY_SIZE = 3


async def import_seed_rooms(session: AsyncSession) -> list[Room]:
    """Replace every room and room gallery row with the seed rooms.

    Runs inside the caller's session so the whole import commits or rolls
    back together. Seed rooms reuse the ids behind the legacy slugs.
    """
    await session.execute(delete(RoomGallery))
    await session.execute(delete(Room))
    logger.info("Removed existing rooms before import")

    rooms: list[Room] = []
    for position, data in enumerate(SEED_ROOMS, start=1):
        room = Room(
            id=STATIC_ROOM_IDS[f"{data['type']}-room"],
            main_image_url=SHARED_IMAGE_URL,
            active=True,
            order_number=position,
            **{**data, "features_tr": list(data["features_tr"]), "features_en": list(data["features_en"])},
        )
        session.add(room)
        rooms.append(room)
    await session.flush()

    for room in rooms:
        for position in range(1, SEED_GALLERY_SIZE + 1):
            session.add(RoomGallery(room_id=room.id, image_url=SHARED_IMAGE_URL, order_number=position))
        logger.info(f"Imported room {room.id} ({room.name_tr})")
    await session.flush()
    return rooms
