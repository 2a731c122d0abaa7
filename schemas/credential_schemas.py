from .base import BodySchema, RequiredStr


class NewCredentialSchema(BodySchema):
    title: RequiredStr
    url: RequiredStr
    username: RequiredStr
    password: RequiredStr
