# optyshop_admin/seeds.py
import copy

SEED_TS = "2024-01-01T00:00:00+00:00"


def _stamp(rows):
    for r in rows:
        r.setdefault("created_at", SEED_TS)
        r.setdefault("updated_at", SEED_TS)
    return rows


LENS_COLORS = _stamp([
    {"id": 1, "name": "Grey", "slug": "grey", "hex_code": "#808080", "description": "Neutral grey tint", "is_active": True, "sort_order": 1},
    {"id": 2, "name": "Brown", "slug": "brown", "hex_code": "#8B4513", "description": "Warm brown tint", "is_active": True, "sort_order": 2},
    {"id": 3, "name": "Green", "slug": "green", "hex_code": "#2E8B57", "description": "G-15 style green", "is_active": True, "sort_order": 3},
    {"id": 4, "name": "Blue", "slug": "blue", "hex_code": "#1E90FF", "description": "Fashion blue tint", "is_active": True, "sort_order": 4},
    {"id": 5, "name": "Rose", "slug": "rose", "hex_code": "#FF66CC", "description": "Rose contrast tint", "is_active": True, "sort_order": 5},
    {"id": 6, "name": "Yellow", "slug": "yellow", "hex_code": "#FFD700", "description": "Low-light contrast", "is_active": False, "sort_order": 6},
])

LENS_FINISHES = _stamp([
    {"id": 1, "name": "Standard", "slug": "standard", "price": 0.0, "description": "Plain finish", "is_active": True, "sort_order": 1},
    {"id": 2, "name": "Mirror", "slug": "mirror", "price": 29.0, "description": "Reflective mirror coating", "is_active": True, "sort_order": 2},
    {"id": 3, "name": "Gradient", "slug": "gradient", "price": 19.0, "description": "Top-to-bottom tint fade", "is_active": True, "sort_order": 3},
    {"id": 4, "name": "Polarized", "slug": "polarized", "price": 49.0, "description": "Glare-cutting polarized film", "is_active": True, "sort_order": 4},
    {"id": 5, "name": "Matte", "slug": "matte", "price": 9.0, "description": "Non-reflective matte edge", "is_active": False, "sort_order": 5},
])

PRESCRIPTION_SUN_LENSES = _stamp([
    {"id": 1, "name": "Polarized", "slug": "polarized", "display_name": "Polarized Lenses", "type": "polarized", "base_price": 79.0, "description": None, "is_active": True, "sort_order": 1},
    {"id": 2, "name": "Classic Tint", "slug": "classic-tint", "display_name": "Classic Tinted", "type": "classic", "base_price": 49.0, "description": None, "is_active": True, "sort_order": 2},
    {"id": 3, "name": "Mirrored", "slug": "mirrored", "display_name": "Mirrored Lenses", "type": "mirrored", "base_price": 89.0, "description": None, "is_active": True, "sort_order": 3},
    {"id": 4, "name": "Gradient", "slug": "gradient", "display_name": "Gradient Tint", "type": "classic", "base_price": 59.0, "description": None, "is_active": False, "sort_order": 4},
])

LENS_COATINGS = _stamp([
    {"id": 1, "name": "Anti-Reflective", "slug": "anti-reflective", "type": "ar", "price": 25.0, "is_active": True},
    {"id": 2, "name": "Blue Light Filter", "slug": "blue-light-filter", "type": "blue_light", "price": 35.0, "is_active": True},
    {"id": 3, "name": "Scratch Resistant", "slug": "scratch-resistant", "type": "scratch", "price": 15.0, "is_active": True},
])

COUPONS = _stamp([
    {"id": 1, "code": "WELCOME10", "description": "10% off first order", "discount_type": "percentage", "discount_value": 10, "min_order_amount": 0, "is_active": True},
    {"id": 2, "code": "FREESHIP", "description": "Free standard shipping", "discount_type": "free_shipping", "discount_value": 0, "min_order_amount": 50, "is_active": True},
    {"id": 3, "code": "SUMMER25", "description": "Seasonal sunglasses offer", "discount_type": "fixed", "discount_value": 25, "min_order_amount": 150, "is_active": False},
])

CAMPAIGNS = _stamp([
    {"id": 1, "name": "Summer Sun Sale", "slug": "summer-sun-sale", "campaign_type": "seasonal", "starts_at": "2024-06-01T00:00:00+00:00", "ends_at": "2024-08-31T23:59:59+00:00", "is_active": True},
    {"id": 2, "name": "Back to School", "slug": "back-to-school", "campaign_type": "seasonal", "starts_at": "2024-08-15T00:00:00+00:00", "ends_at": "2024-09-30T23:59:59+00:00", "is_active": False},
])

JOBS = _stamp([
    {"id": 1, "title": "Optician", "slug": "optician", "department": "Retail", "location": "Store", "employment_type": "full_time", "is_active": True},
    {"id": 2, "title": "Customer Support Agent", "slug": "customer-support-agent", "department": "Support", "location": "Remote", "employment_type": "full_time", "is_active": True},
    {"id": 3, "title": "Lab Technician", "slug": "lab-technician", "department": "Lab", "location": "Workshop", "employment_type": "part_time", "is_active": False},
])

# resource name -> default records
SEEDS = {
    "lens_colors": LENS_COLORS,
    "lens_finishes": LENS_FINISHES,
    "prescription_sun_lenses": PRESCRIPTION_SUN_LENSES,
    "lens_coatings": LENS_COATINGS,
    "coupons": COUPONS,
    "campaigns": CAMPAIGNS,
    "jobs": JOBS,
}


def get_defaults(resource: str):
    # deep copy so callers can mutate freely
    return copy.deepcopy(SEEDS.get(resource, []))
