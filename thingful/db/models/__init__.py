from thingful.db.models.user import User

__all__ = ["User"]
