from __future__ import annotations
import re
from ..base import PiiCategory, PiiDetector

# dd/mm/yyyy, "Mon d, yyyy" or yyyy-mm-dd (separators / - .)
BIRTHDAY_RE = re.compile(
    r"\b(?:"
    r"(?:(?:0?[1-9]|[12]\d|3[01])[/\-.](?:0?[1-9]|1[0-2])[/\-.]\d{4})"
    r"|(?:(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s+\d{1,2},\s+\d{4})"
    r"|(?:\d{4}[/\-.](?:0?[1-9]|1[0-2])[/\-.](?:0?[1-9]|[12]\d|3[01]))"
    r")\b"
)

class BirthdayDetector(PiiDetector):
    category = PiiCategory.BIRTHDAY
    pattern = BIRTHDAY_RE
    keywords = ("birthday", "dob", "date of birth")
    requires_context = True
