"""Receipt identifiers for transport fee payments."""

import random
from typing import Optional

from school_admin.config.settings import settings
from school_admin.core.constants import RECEIPT_ID_ALPHABET


def generate_receipt_id(length: Optional[int] = None, rng: Optional[random.Random] = None) -> str:
    """Random upper-case alphanumeric id; not suitable as a secret."""
    length = length or settings.RECEIPT_ID_LENGTH
    chooser = rng or random
    return "".join(chooser.choices(RECEIPT_ID_ALPHABET, k=length))
