"""
Upload option validation.

Checks description, password and expiration in that order and stops at the
first invalid field.
"""
import math
import re
import time
from datetime import datetime
from numbers import Real
from typing import Optional, Union

from .models import UploadOptions, ValidatedOptions
from ..exceptions import InvalidOptionError

MAX_DESCRIPTION_LENGTH = 1000
PASSWORD_PATTERN = re.compile(r'^[a-zA-Z0-9]{6,20}$')

# Epoch values above this are milliseconds, at or below it seconds.
EXPIRE_MILLISECONDS_THRESHOLD = 10_000_000_000
MILLISECONDS_PER_SECOND = 1000


def normalize_expire(value: Union[int, float, str, datetime]) -> float:
    """
    Resolve an expiration value to epoch seconds.

    Two branches:
    - value > EXPIRE_MILLISECONDS_THRESHOLD: milliseconds, divided by 1000
    - value <= EXPIRE_MILLISECONDS_THRESHOLD: already seconds

    A datetime carries its own unit and is converted through its timestamp.
    Numeric strings are parsed first.

    Raises:
        InvalidOptionError: If the value is not a finite number or a datetime
    """
    if isinstance(value, datetime):
        return value.timestamp()

    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            raise InvalidOptionError('expire', value) from None

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidOptionError('expire', value)

    if not math.isfinite(value):
        raise InvalidOptionError('expire', value)

    if value > EXPIRE_MILLISECONDS_THRESHOLD:
        return value / MILLISECONDS_PER_SECOND
    return float(value)


class OptionValidator:
    """
    Validates optional upload parameters before they are sent.

    Empty fields are skipped and never sent.
    """

    def validate(
        self,
        options: Optional[UploadOptions],
        now: Optional[float] = None
    ) -> ValidatedOptions:
        """
        Validate upload options.

        Args:
            options: Options to check (None means no options)
            now: Current epoch seconds (defaults to time.time())

        Returns:
            ValidatedOptions ready to be sent

        Raises:
            InvalidOptionError: On the first invalid field
        """
        if options is None:
            return ValidatedOptions()

        description = self.validate_description(options.description)
        password = self.validate_password(options.password)
        expire = self.validate_expire(options.expire, now)

        return ValidatedOptions(
            description=description,
            password=password,
            expire=expire
        )

    def validate_description(self, description: Optional[str]) -> Optional[str]:
        if not description:
            return None
        if not isinstance(description, str) or len(description) > MAX_DESCRIPTION_LENGTH:
            raise InvalidOptionError('description', description)
        return description

    def validate_password(self, password: Optional[str]) -> Optional[str]:
        if not password:
            return None
        if not isinstance(password, str) or not PASSWORD_PATTERN.fullmatch(password):
            raise InvalidOptionError('password')
        return password

    def validate_expire(
        self,
        expire: Optional[Union[int, float, str, datetime]],
        now: Optional[float] = None
    ) -> Optional[int]:
        """Normalize expiration to whole seconds; it must lie in the future."""
        if expire is None or (not isinstance(expire, datetime) and not expire):
            return None

        seconds = normalize_expire(expire)
        current = time.time() if now is None else now

        if not seconds > current:
            raise InvalidOptionError('expire', expire)
        return round(seconds)
