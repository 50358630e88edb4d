from __future__ import annotations
import re
from ..base import PiiCategory, PiiDetector

# State code + RTO code + year + serial (MH12 2011 0062821), or the compact 15-char form
DRIVERS_LICENSE_RE = re.compile(
    r"\b[A-Z]{2}[0-9]{1,2}[\s-]?[0-9]{4}[\s-]?[0-9]{5,7}\b|\b[A-Z]{2}[0-9]{11,13}\b"
)

class DriversLicenseDetector(PiiDetector):
    category = PiiCategory.DRIVERS_LICENSE
    pattern = DRIVERS_LICENSE_RE
    keywords = ("license", "dl", "driver's license", "driving license")
    requires_context = True
