from pydantic import BaseModel, ConfigDict, Field


LOCAL_USER_ID = "local_user"
DEFAULT_USER_NAME = "Joe Doe"
DEFAULT_USER_EMAIL = "joe@example.com"


# Note: This model is in sync with the web client's user object
class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default=LOCAL_USER_ID, alias="_id")
    name: str = DEFAULT_USER_NAME
    email: str = DEFAULT_USER_EMAIL


def default_user() -> User:
    return User()
