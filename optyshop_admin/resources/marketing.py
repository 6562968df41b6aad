# optyshop_admin/resources/marketing.py
# Marketing and site-content resources
from optyshop_admin.resources.descriptor import ResourceDescriptor

COUPONS = ResourceDescriptor(
    name="coupons", label="Coupon", path="/admin/coupons",
    list_key="coupons", bulk_key="coupons", slug_field=None,
)
CAMPAIGNS = ResourceDescriptor(
    name="campaigns", label="Campaign", path="/admin/campaigns",
    list_key="campaigns", bulk_key="campaigns", filters=("is_active", "campaign_type"),
)
FLASH_OFFERS = ResourceDescriptor(
    name="flash_offers", label="Flash offer", path="/admin/flash-offers",
    list_key="flashOffers", bulk_key="offers", slug_field=None,
)
FREE_GIFTS = ResourceDescriptor(
    name="free_gifts", label="Free gift", path="/admin/free-gifts",
    list_key="freeGifts", bulk_key="gifts", slug_field=None,
)
JOBS = ResourceDescriptor(
    name="jobs", label="Job", path="/admin/jobs",
    list_key="jobs", bulk_key="jobs", filters=("is_active", "department"),
)
FAQS = ResourceDescriptor(
    name="faqs", label="FAQ", path="/admin/faqs",
    list_key="faqs", bulk_key="faqs", slug_field=None,
)
TESTIMONIALS = ResourceDescriptor(
    name="testimonials", label="Testimonial", path="/admin/testimonials",
    list_key="testimonials", bulk_key="testimonials", slug_field=None,
)
BANNERS = ResourceDescriptor(
    name="banners", label="Banner", path="/admin/banners",
    list_key="banners", bulk_key="banners", slug_field=None,
)
SHIPPING_METHODS = ResourceDescriptor(
    name="shipping_methods", label="Shipping method", path="/admin/shipping-methods",
    list_key="shippingMethods", bulk_key="methods",
)

MARKETING_RESOURCES = (
    COUPONS, CAMPAIGNS, FLASH_OFFERS, FREE_GIFTS, JOBS, FAQS, TESTIMONIALS, BANNERS, SHIPPING_METHODS,
)
