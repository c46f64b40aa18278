"""Static service catalog and promotion bundles."""

from decimal import Decimal

from paintquote.models.services import Promotion, Service, ServiceCategory, ServiceType

_CALC = ServiceType.CALCULATED
_FLAT = ServiceType.FLAT_RATE
_CUSTOM = ServiceType.CUSTOM_QUOTE

SERVICES: tuple[Service, ...] = (
    Service(
        "emergency-247", "24/7 Emergency",
        "Same-day patches, compliance repaints, and urgent touch-ups for inspections and move-ins.",
        _CUSTOM, ServiceCategory.EMERGENCY,
    ),
    # Interior, calculated
    Service("accent-wall", "Accent Wall",
            "Colour consultation & feature wall repainting for instant impact.",
            _CALC, ServiceCategory.INTERIOR),
    Service("ceiling", "Ceiling",
            "Roll-perfect ceilings with stain-blocking where needed.",
            _CALC, ServiceCategory.INTERIOR),
    Service("small-bathroom", "Small Bathroom Painting",
            "Moisture-tolerant finishes, clean cut lines, and quick turnarounds.",
            _CALC, ServiceCategory.INTERIOR),
    Service("foyer-entryway", "Foyer/Entryway",
            "High-traffic walls & trim refreshed quickly with durable scuff-resistant paints.",
            _CALC, ServiceCategory.INTERIOR),
    Service("bedrooms", "Bedroom Painting",
            "One or more bedrooms with optional ceilings, trim, closets and ensuite.",
            _CALC, ServiceCategory.INTERIOR),
    Service("trimming-baseboards", "Trimming & Baseboards",
            "Gap-free caulking and tough enamel finishes where scuffs happen most.",
            _CALC, ServiceCategory.INTERIOR),
    Service("staircase-railings", "Staircase Railings",
            "Hand-sand, prime, and repaint/clear-coat for durability and safety.",
            _CALC, ServiceCategory.INTERIOR),
    Service("kitchen-cabinets", "Kitchen Cabinet Painting",
            "Doors, frames and drawer fronts sprayed in a durable cabinet enamel.",
            _CALC, ServiceCategory.INTERIOR),
    Service("interior-door", "Interior Door",
            "Priced per door, with optional frames and hardware.",
            _CALC, ServiceCategory.INTERIOR),
    # Interior, flat rate
    Service("small-closet", "Small Closet Interior",
            "Clean, bright closet interiors with durable, scuff-resistant finishes.",
            _FLAT, ServiceCategory.INTERIOR, Decimal("150")),
    # Exterior
    Service("front-door", "Front Door",
            "Front entry repaints with premium exterior enamel for a flawless finish.",
            _CALC, ServiceCategory.EXTERIOR),
    Service("mailbox-post", "Mailbox and Post",
            "Quick refresh for mailbox posts & boxes to sharpen first impressions.",
            _FLAT, ServiceCategory.EXTERIOR, Decimal("100")),
    Service("shutters", "Shutters",
            "UV-resistant coatings and secure refitting for lasting curb appeal.",
            _FLAT, ServiceCategory.EXTERIOR, Decimal("120")),
    Service("small-fence", "Small Fence",
            "Spot repairs and repaint/stain for compact fence sections.",
            _FLAT, ServiceCategory.EXTERIOR, Decimal("250")),
    Service("fence", "Fence Painting",
            "Paint or stain by the linear foot, one or both sides.",
            _CALC, ServiceCategory.EXTERIOR),
    Service("small-porch", "Small Porch",
            "Rails, posts, ceilings & doors refreshed with weather-tough systems.",
            _CALC, ServiceCategory.EXTERIOR),
    Service("deck-railings", "Deck Railings",
            "Prep & repaint for wood/metal rails to resist weathering.",
            _CALC, ServiceCategory.EXTERIOR),
    Service("garage-door", "Garage Door",
            "Clean prep, smooth spray/roll, and durable exterior finish.",
            _CUSTOM, ServiceCategory.EXTERIOR),
    # Specialty, priced by a person
    Service("cabinet-touchups", "Touch-Ups on Kitchen Cabinets",
            "Colour-matched cabinet fixes, scratch and chip repair, and sheen blending.",
            _CUSTOM, ServiceCategory.SPECIALTY),
    Service("fireplace-mantel", "Fire Place Mantel",
            "Crisp lines & smooth enamel finishes to make your mantel a focal point again.",
            _CUSTOM, ServiceCategory.SPECIALTY),
    Service("builtin-shelving", "Built-in Shelving",
            "Priming, caulking, and fine-finish spraying or rolling for built-ins.",
            _CUSTOM, ServiceCategory.SPECIALTY),
)

PROMOTIONS: tuple[Promotion, ...] = (
    Promotion(
        "january-jumpstart", "Spring Refresh", "3-Room Bundle",
        Decimal("1000"), Decimal("1850"),
        (
            "Any 3 standard rooms (up to 12'x12' each)",
            "Walls painted (2 coats) in each room",
            "Minor wall patching included",
            "Full prep & cleanup included",
        ),
    ),
    Promotion(
        "first-impressions", "Fresh Start Package", "Entryway & Powder Room",
        Decimal("700"), Decimal("850"),
        (
            "Foyer/Hallway walls painted (2 coats)",
            "Powder Room walls painted (2 coats)",
            "Baseboard painting included",
            "Minor wall patching included",
        ),
    ),
    Promotion(
        "holiday-feast", "Kitchen & Dining Refresh", "Kitchen & Dining Room",
        Decimal("750"), Decimal("1250"),
        (
            "Kitchen walls painted (2 coats)",
            "Dining Room walls painted (2 coats)",
            "Premium washable/scrubbable paint included",
            "Minor wall patching included",
        ),
    ),
    Promotion(
        "guest-suite", "Guest Room Refresh", "Bedroom with Free Trim",
        Decimal("500"), Decimal("950"),
        (
            "Bedroom walls painted (2 coats)",
            "Up to 12'x12' room size",
            "Baseboards painted (2 coats)",
            "Window casings painted (2 coats)",
        ),
    ),
    Promotion(
        "master-suite", "Master Suite Bundle", "Bedroom + Ensuite",
        Decimal("800"), Decimal("1050"),
        (
            "Master bedroom walls painted (2 coats)",
            "Ensuite bathroom walls painted (2 coats)",
            "Premium moisture-resistant paint in bathroom",
            "Minor wall patching included",
        ),
    ),
    Promotion(
        "living-space", "Living Space Bundle", "Living Room + Hallway",
        Decimal("1100"), Decimal("1550"),
        (
            "Living room walls painted (2 coats)",
            "Hallway/foyer walls painted (2 coats)",
            "Baseboard painting included (2 coats)",
            "Minor wall patching included",
        ),
    ),
)

_SERVICES_BY_ID = {s.id: s for s in SERVICES}
_PROMOTIONS_BY_ID = {p.id: p for p in PROMOTIONS}


def get_service(service_id: str) -> Service | None:
    return _SERVICES_BY_ID.get(service_id)


def get_promotion(promotion_id: str) -> Promotion | None:
    return _PROMOTIONS_BY_ID.get(promotion_id)


def services_by_category(category: ServiceCategory) -> list[Service]:
    return [s for s in SERVICES if s.category == category]


def services_by_type(service_type: ServiceType) -> list[Service]:
    return [s for s in SERVICES if s.type == service_type]
