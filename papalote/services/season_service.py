"""
Season Service - seasonal merchandising themes

Theme windows are MM-DD strings compared lexically; a window whose start
is after its end (Año Nuevo, 12-26 to 01-15) wraps around the new year.
Themes are checked in list order, so overlapping windows resolve to the
first one listed.
"""
from datetime import date
from typing import List, Optional

from papalote.core.dates import utc_now
from papalote.domain.product import Product, SeasonalTheme


SEASONAL_PRODUCTS_LIMIT = 8

SEASONAL_THEMES: List[SeasonalTheme] = [
    SeasonalTheme(
        id="halloween",
        name="Halloween",
        description="Decoraciones y disfraces únicos para una celebración especial",
        start_date="10-01",
        end_date="10-31",
        categories=["Decoración del Hogar", "Arte", "Ropa"],
        keywords=["halloween", "calabaza", "disfraz", "decoración"],
        icon="🎃",
    ),
    SeasonalTheme(
        id="dia-muertos",
        name="Día de Muertos",
        description="Celebra las tradiciones mexicanas con ofrendas y decoraciones únicas",
        start_date="10-15",
        end_date="11-02",
        categories=["Decoración del Hogar", "Arte"],
        keywords=["calavera", "ofrenda", "tradicional", "altar", "muertos"],
        icon="💀",
    ),
    SeasonalTheme(
        id="navidad",
        name="Navidad",
        description="Regalos únicos hechos a mano para esta temporada especial",
        start_date="11-15",
        end_date="12-25",
        categories=["Decoración del Hogar", "Ropa", "Joyería"],
        keywords=["navidad", "regalo", "decoración", "christmas"],
        icon="🎄",
    ),
    SeasonalTheme(
        id="año-nuevo",
        name="Año Nuevo",
        description="Empieza el año con productos únicos hechos en México",
        start_date="12-26",
        end_date="01-15",
        categories=["Joyería", "Ropa", "Decoración del Hogar"],
        keywords=["nuevo", "celebración"],
        icon="🎉",
    ),
    SeasonalTheme(
        id="amor-amistad",
        name="Amor y Amistad",
        description="Regalos especiales para demostrar tu cariño",
        start_date="02-01",
        end_date="02-14",
        categories=["Joyería", "Ropa", "Arte"],
        keywords=["amor", "regalo", "romántico"],
        icon="💝",
    ),
    SeasonalTheme(
        id="primavera",
        name="Primavera",
        description="Renueva tu hogar con artesanías coloridas y frescas",
        start_date="03-21",
        end_date="06-20",
        categories=["Decoración del Hogar", "Arte", "Textiles"],
        keywords=["floral", "colorido", "fresco"],
        icon="🌸",
    ),
    SeasonalTheme(
        id="verano",
        name="Verano Mexicano",
        description="Productos perfectos para la temporada de calor",
        start_date="06-21",
        end_date="09-22",
        categories=["Ropa", "Calzado", "Textiles"],
        keywords=["verano", "playa", "ligero"],
        icon="☀️",
    ),
    SeasonalTheme(
        id="otoño",
        name="Otoño",
        description="Artesanías cálidas para la temporada de cosecha",
        start_date="09-23",
        end_date="11-14",
        categories=["Decoración del Hogar", "Textiles", "Ropa"],
        keywords=["otoño", "cálido", "acogedor"],
        icon="🍂",
    ),
]


def _month_day(today: Optional[date]) -> str:
    today = today or utc_now().date()
    return f"{today.month:02d}-{today.day:02d}"


def is_theme_active(theme: SeasonalTheme, today: Optional[date] = None) -> bool:
    current = _month_day(today)
    if theme.start_date > theme.end_date:
        return current >= theme.start_date or current <= theme.end_date
    return theme.start_date <= current <= theme.end_date


class SeasonService:
    """Seasonal theme lookups"""

    @staticmethod
    def current_theme(today: Optional[date] = None) -> Optional[SeasonalTheme]:
        for theme in SEASONAL_THEMES:
            if is_theme_active(theme, today):
                return theme
        return None

    @staticmethod
    def upcoming_theme(today: Optional[date] = None) -> SeasonalTheme:
        """First theme starting after today, else the first theme of next year"""
        current = _month_day(today)
        for theme in SEASONAL_THEMES:
            if theme.start_date > current:
                return theme
        return SEASONAL_THEMES[0]

    @staticmethod
    def products_for_theme(
        theme: SeasonalTheme,
        products: List[Product],
        limit: int = SEASONAL_PRODUCTS_LIMIT,
    ) -> List[Product]:
        """In-stock products in one of the theme's categories or mentioning a keyword"""
        keywords = [k.lower() for k in theme.keywords]
        matches = []
        for product in products:
            if not product.in_stock:
                continue
            text = " ".join([product.name, product.description, *product.tags]).lower()
            if product.category in theme.categories or any(k in text for k in keywords):
                matches.append(product)
        return matches[:limit]
