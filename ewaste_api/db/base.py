from sqlmodel import SQLModel

# Import all models here to ensure they are registered with SQLModel
from ewaste_api.models.user import User  # noqa
from ewaste_api.models.listing import Listing  # noqa
from ewaste_api.models.request import DisposalRequest  # noqa
from ewaste_api.models.notification import Notification  # noqa

__all__ = ["SQLModel"]
