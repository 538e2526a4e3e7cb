"""Domain value objects."""

from clean_auth.domain.value_objects.credentials import Credentials

__all__ = ["Credentials"]
