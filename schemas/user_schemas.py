from typing import Annotated

from pydantic import EmailStr, StringConstraints

from .base import BodySchema, RequiredStr


class SignUpSchema(BodySchema):
    email: EmailStr
    password: Annotated[str, StringConstraints(min_length=6)]


class SignInSchema(BodySchema):
    email: EmailStr
    password: RequiredStr
