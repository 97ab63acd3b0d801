from app.models.user import User
from app.repositories.base import SqlRepository


class UserRepository(SqlRepository[User]):
    model = User
    resource = "User"
