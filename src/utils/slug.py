import re
import unicodedata

DEFAULT_SLUG = "campground"
MAX_SLUG_LENGTH = 80
# "new" would shadow GET /campgrounds/new
RESERVED_SLUGS = frozenset({"new"})

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name):
    """
    Turn a campground name into a lowercase, hyphen-separated ASCII slug.

    "Tent Valley" -> "tent-valley", "Crème Brûlée Camp!" -> "creme-brulee-camp".
    Names with nothing usable fall back to DEFAULT_SLUG.
    """
    normalized = unicodedata.normalize("NFKD", name or "")
    ascii_name = normalized.encode("ascii", "ignore").decode("ascii").lower()
    slug = _NON_ALNUM.sub("-", ascii_name).strip("-")
    slug = slug[:MAX_SLUG_LENGTH].rstrip("-")
    return slug or DEFAULT_SLUG


def unique_slug(base, taken):
    """
    Return `base` if free, otherwise the first free `base-2`, `base-3`, ...

    `taken` is any container of slugs already in use. Reserved slugs are
    never returned.
    """
    def is_free(slug):
        return slug not in taken and slug not in RESERVED_SLUGS

    if is_free(base):
        return base
    suffix = 2
    while not is_free(f"{base}-{suffix}"):
        suffix += 1
    return f"{base}-{suffix}"
