"""Interface strings for the Turkish and English site."""

SUPPORTED_LANGUAGES = ("tr", "en")

TRANSLATIONS: dict[str, dict[str, str]] = {
    "tr": {
        "home": "Ana Sayfa",
        "rooms": "Odalar",
        "services": "Hizmetler",
        "gallery": "Galeri",
        "admin": "Yönetim",
        "our_rooms": "Odalarımız",
        "our_services": "Hizmetlerimiz",
        "view_details": "Detayları Gör",
        "all_rooms": "Tüm Odalar",
        "all_types": "Tüm Tipler",
        "search": "Ara",
        "search_placeholder": "Oda ara...",
        "no_rooms": "Aradığınız kriterlere uygun oda bulunamadı.",
        "capacity": "Kapasite",
        "persons": "Kişi",
        "size": "Büyüklük",
        "price": "Fiyat",
        "features": "Özellikler",
        "bed": "Yatak",
        "back_to_rooms": "Odalara Dön",
        "room_not_found": "Oda bulunamadı",
        "room_not_found_text": "Aradığınız oda mevcut değil veya kaldırılmış olabilir.",
        "invalid_room_id": "Geçersiz oda kimliği",
        "service_not_found": "Hizmet bulunamadı",
        "page_not_found": "Sayfa bulunamadı",
        "error": "Bir hata oluştu",
        "photos": "Fotoğraflar",
        "videos": "Videolar",
        "login": "Giriş Yap",
        "logout": "Çıkış Yap",
        "username": "Kullanıcı adı",
        "password": "Şifre",
        "invalid_credentials": "Geçersiz kullanıcı adı veya şifre",
        "save": "Kaydet",
        "delete": "Sil",
        "edit": "Düzenle",
        "create": "Yeni",
        "slider": "Slider",
        "import_rooms": "Odaları İçe Aktar",
        "active": "Aktif",
        "inactive": "Pasif",
        "bed_double": "1 Çift Kişilik Yatak",
        "bed_double_single": "1 Çift Kişilik + 1 Tek Kişilik Yatak",
        "bed_multiple": "Çoklu Yatak Seçenekleri",
    },
    "en": {
        "home": "Home",
        "rooms": "Rooms",
        "services": "Services",
        "gallery": "Gallery",
        "admin": "Admin",
        "our_rooms": "Our Rooms",
        "our_services": "Our Services",
        "view_details": "View Details",
        "all_rooms": "All Rooms",
        "all_types": "All Types",
        "search": "Search",
        "search_placeholder": "Search rooms...",
        "no_rooms": "No rooms match your search.",
        "capacity": "Capacity",
        "persons": "Persons",
        "size": "Size",
        "price": "Price",
        "features": "Features",
        "bed": "Bed",
        "back_to_rooms": "Back to Rooms",
        "room_not_found": "Room not found",
        "room_not_found_text": "The room you are looking for does not exist or may have been removed.",
        "invalid_room_id": "Invalid room id",
        "service_not_found": "Service not found",
        "page_not_found": "Page not found",
        "error": "Something went wrong",
        "photos": "Photos",
        "videos": "Videos",
        "login": "Log in",
        "logout": "Log out",
        "username": "Username",
        "password": "Password",
        "invalid_credentials": "Invalid username or password",
        "save": "Save",
        "delete": "Delete",
        "edit": "Edit",
        "create": "New",
        "slider": "Slider",
        "import_rooms": "Import Rooms",
        "active": "Active",
        "inactive": "Inactive",
        "bed_double": "1 Double Bed",
        "bed_double_single": "1 Double + 1 Single Bed",
        "bed_multiple": "Multiple Bed Options",
    },
}


def normalize_language(lang: str | None, default: str = "tr") -> str:
    if lang and lang.lower() in SUPPORTED_LANGUAGES:
        return lang.lower()
    return default


def t(lang: str, key: str) -> str:
    return TRANSLATIONS.get(lang, TRANSLATIONS["tr"]).get(key, key)


def bed_info(capacity: int, lang: str) -> str:
    if capacity <= 2:
        return t(lang, "bed_double")
    if capacity == 3:
        return t(lang, "bed_double_single")
    return t(lang, "bed_multiple")


def other_language(lang: str) -> str:
    return "en" if lang == "tr" else "tr"
