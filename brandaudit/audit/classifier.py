"""Control classification for a single search listing."""

from brandaudit.audit.domain import normalize_domain
from brandaudit.audit.models import ControlType

# Third-party platforms where a business can claim a profile but not own the page.
PARTIAL_CONTROL_SITES: tuple[str, ...] = (
    "facebook.com",
    "instagram.com",
    "linkedin.com",
    "twitter.com",
    "x.com",
    "youtube.com",
    "yelp.com",
    "google.com",
    "maps.google.com",
    "bbb.org",
    "yellowpages.com",
    "tripadvisor.com",
    "chamberofcommerce.com",
    "clutch.co",
    "designrush.com",
)


def classify(
    title: str | None,
    snippet: str | None,
    link: str | None,
    business_name: str | None,
    official_site: str | None,
) -> ControlType:
    """Return the control category of one listing; the first matching rule wins."""
    domain = normalize_domain(link or "")
    official = normalize_domain(official_site or "")

    if official and official in domain:
        return "FullControl"

    if any(site in domain for site in PARTIAL_CONTROL_SITES):
        return "PartialControl"

    name = (business_name or "").lower()
    if name.strip() and (name in (title or "").lower() or name in (snippet or "").lower()):
        return "NoControl"

    return "MissedOpportunity"
