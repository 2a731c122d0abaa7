from .base import BodySchema, RequiredStr


class NewNetworkSchema(BodySchema):
    title: RequiredStr
    network: RequiredStr
    password: RequiredStr
