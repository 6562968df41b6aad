# optyshop_admin/resources/catalog.py
from optyshop_admin.fallback import FallbackPolicy
from optyshop_admin.resources.descriptor import ResourceDescriptor

LENS_COLORS = ResourceDescriptor(
    name="lens_colors", label="Lens color", path="/admin/lens-colors",
    list_key="lensColors", bulk_key="colors",
)
LENS_FINISHES = ResourceDescriptor(
    name="lens_finishes", label="Lens finish", path="/admin/lens-finishes",
    list_key="lensFinishes", bulk_key="finishes",
)
LENS_COATINGS = ResourceDescriptor(
    name="lens_coatings", label="Lens coating", path="/admin/lens-coatings",
    list_key="lensCoatings", bulk_key="coatings", filters=("is_active", "type"),
)
LENS_TREATMENTS = ResourceDescriptor(
    name="lens_treatments", label="Lens treatment", path="/admin/lens-treatments",
    list_key="lensTreatments", bulk_key="treatments",
)
LENS_TYPES = ResourceDescriptor(
    name="lens_types", label="Lens type", path="/admin/lens-types",
    list_key="lensTypes", bulk_key="lensTypes",
)
LENS_THICKNESS_MATERIALS = ResourceDescriptor(
    name="lens_thickness_materials", label="Lens thickness material", path="/admin/lens-thickness-materials",
    list_key="materials", bulk_key="materials",
)
LENS_THICKNESS_OPTIONS = ResourceDescriptor(
    name="lens_thickness_options", label="Lens thickness option", path="/admin/lens-thickness-options",
    list_key="options", bulk_key="options",
)
PHOTOCHROMIC_LENSES = ResourceDescriptor(
    name="photochromic_lenses", label="Photochromic lens", path="/admin/photochromic-lenses",
    list_key="photochromicLenses", bulk_key="lenses", policy=FallbackPolicy.widened,
)
PRESCRIPTION_SUN_LENSES = ResourceDescriptor(
    name="prescription_sun_lenses", label="Prescription sun lens", path="/admin/prescription-sun-lenses",
    list_key="prescriptionSunLenses", bulk_key="lenses", filters=("is_active", "type"),
    policy=FallbackPolicy.widened,
)
PRESCRIPTION_LENS_TYPES = ResourceDescriptor(
    name="prescription_lens_types", label="Prescription lens type", path="/admin/prescription-lens-types",
    list_key="prescriptionLensTypes", bulk_key="prescriptionLensTypes",
)
FRAME_SIZES = ResourceDescriptor(
    name="frame_sizes", label="Frame size", path="/admin/frame-sizes",
    list_key="frameSizes", bulk_key="frameSizes", slug_field=None,
    filters=("is_active", "product_id"), policy=FallbackPolicy.widened,
)
BRANDS = ResourceDescriptor(
    name="brands", label="Brand", path="/admin/brands",
    list_key="brands", bulk_key="brands",
)
CATEGORIES = ResourceDescriptor(
    name="categories", label="Category", path="/admin/categories",
    list_key="categories", bulk_key="categories", filters=("is_active", "section"),
)
LENS_OPTIONS = ResourceDescriptor(
    name="lens_options", label="Lens option", path="/admin/lens-options",
    list_key="lensOptions", bulk_key="options", filters=("is_active", "type"),
)
PRESCRIPTION_LENS_VARIANTS = ResourceDescriptor(
    name="prescription_lens_variants", label="Prescription lens variant", path="/admin/prescription-lens-variants",
    list_key="variants", bulk_key="variants",
    filters=("is_active", "isRecommended", "prescriptionLensTypeId"),
)
# ordered by sort_order on the backend, no slugs
PRESCRIPTION_FORM_DROPDOWN_VALUES = ResourceDescriptor(
    name="prescription_form_dropdown_values", label="Dropdown value",
    path="/admin/prescription-forms/dropdown-values", list_key="values",
    bulk_key="values", bulk_path="bulk-order", slug_field=None,
    filters=("field_type", "eye_type", "form_type"),
)
SUBCATEGORIES = ResourceDescriptor(
    name="subcategories", label="Subcategory", path="/admin/subcategories",
    list_key="subcategories", bulk_key="subcategories", filters=("is_active", "category_id"),
)

CATALOG_RESOURCES = (
    LENS_COLORS, LENS_FINISHES, LENS_COATINGS, LENS_TREATMENTS, LENS_TYPES,
    LENS_THICKNESS_MATERIALS, LENS_THICKNESS_OPTIONS, LENS_OPTIONS, PHOTOCHROMIC_LENSES,
    PRESCRIPTION_SUN_LENSES, PRESCRIPTION_LENS_TYPES, PRESCRIPTION_LENS_VARIANTS,
    PRESCRIPTION_FORM_DROPDOWN_VALUES, FRAME_SIZES, BRANDS, CATEGORIES, SUBCATEGORIES,
)
