"""UserEntity — presenter for the users resource."""

from crudkit.presenters.base import Presenter
from crudkit.schemas.user import UserFull, UserSummary


class UserEntity(Presenter):
    views = {"summary": UserSummary, "full": UserFull}
    default_view = "summary"
